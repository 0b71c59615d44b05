"""Data types shared by the onboarding wizard and the profile screen."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from user_onboarding.config import Config


class WizardStep(IntEnum):
    """Onboarding screens in the order they are shown."""

    WELCOME = 0
    NAME = 1
    AGE = 2
    GENDER = 3

    @property
    def primary_action_label(self) -> str:
        """Label of the single button that advances the wizard."""
        if self is WizardStep.WELCOME:
            return "SIGN UP"
        if self is WizardStep.GENDER:
            return "FINISH"
        return "NEXT"

    @property
    def is_last(self) -> bool:
        return self is WizardStep.GENDER


@dataclass
class WizardState:
    """Transient per-session wizard input."""

    step: WizardStep = WizardStep.WELCOME
    draft_name: str = ""
    draft_age: float = float(Config.DEFAULT_AGE)
    draft_gender: str = ""
    alert_message: Optional[str] = None


@dataclass(frozen=True)
class UserProfile:
    """Profile as read back from storage. Absent keys are None."""

    name: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    signed_in: bool = False


@dataclass(frozen=True)
class StepResult:
    """Outcome of pressing the primary action.

    Exactly one of three shapes:
    - advanced: ``state`` is the next step
    - completed: ``completed`` is True and ``state`` holds the final input
    - rejected: ``error`` carries the alert message, ``state`` is unchanged
    """

    state: WizardState
    completed: bool = False
    error: Optional[str] = None

    @property
    def rejected(self) -> bool:
        return self.error is not None

    @property
    def advanced(self) -> bool:
        return not self.completed and self.error is None


@dataclass(frozen=True)
class ProfileCard:
    """Display values for the profile screen."""

    name: str
    age: int
    gender: str
    signed_in: bool

    @property
    def name_line(self) -> str:
        return self.name

    @property
    def age_line(self) -> str:
        return f"This user is {self.age} years old"

    @property
    def gender_line(self) -> str:
        return f"Their gender is {self.gender}"

    def lines(self):
        return [self.name_line, self.age_line, self.gender_line]
