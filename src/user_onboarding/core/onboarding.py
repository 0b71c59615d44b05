"""Onboarding wizard: step validation, transitions and completion."""

import logging
from dataclasses import replace
from typing import Optional

from user_onboarding.config import Config
from user_onboarding.core.models import StepResult, WizardState, WizardStep
from user_onboarding.core.store import ProfileStore
from user_onboarding.exceptions import ValidationError
from user_onboarding.utils.validators import InputValidator


def snap_age(value: float) -> float:
    """Clamp to the slider bounds and round to the slider step."""
    value = max(float(Config.MIN_AGE), min(float(Config.MAX_AGE), float(value)))
    steps = round((value - Config.MIN_AGE) / Config.AGE_STEP)
    return min(float(Config.MAX_AGE), Config.MIN_AGE + steps * Config.AGE_STEP)


def validate_step(state: WizardState):
    """
    Check the input required by the current step.

    Raises:
        ValidationError: If the step's required input is missing
    """
    if state.step is WizardStep.NAME:
        valid, msg = InputValidator.validate_name(state.draft_name)
        if not valid:
            raise ValidationError("name", msg)

    elif state.step is WizardStep.GENDER:
        valid, msg = InputValidator.validate_gender(state.draft_gender)
        if not valid:
            raise ValidationError("gender", msg)


def advance(state: WizardState) -> StepResult:
    """
    Apply the primary action to a wizard state.

    Does not touch storage or the given state. Steps only move forward and
    completion is only reachable from the last step.

    Args:
        state: Current wizard state

    Returns:
        StepResult that is advanced, completed or rejected
    """
    try:
        validate_step(state)
    except ValidationError as e:
        return StepResult(state=state, error=e.message)

    if state.step.is_last:
        return StepResult(state=state, completed=True)

    return StepResult(
        state=replace(state, step=WizardStep(state.step + 1), alert_message=None)
    )


class OnboardingFlow:
    """Drives one onboarding session and writes the result to the store."""

    def __init__(self, store: ProfileStore):
        self.store = store
        self.state = WizardState()
        self.completed = False

    @property
    def step(self) -> WizardStep:
        return self.state.step

    @property
    def primary_action_label(self) -> str:
        return self.state.step.primary_action_label

    @property
    def alert_message(self) -> Optional[str]:
        return self.state.alert_message

    # --- Input ---

    def set_name(self, name: str):
        self.state.draft_name = name

    def set_age(self, age: float):
        """Set the age with slider semantics: bounded and stepped."""
        self.state.draft_age = snap_age(age)

    def set_gender(self, gender: str):
        """Select one of the picker options."""
        if not InputValidator.is_gender_option(gender):
            raise ValueError(f"Unknown gender option: {gender!r}")
        self.state.draft_gender = gender

    # --- Actions ---

    def advance(self) -> StepResult:
        """Handle a press of the primary action."""
        result = advance(self.state)

        if result.rejected:
            self.show_validation_alert(result.error)
        elif result.completed:
            self.complete_onboarding()
        else:
            logging.info(
                f"Onboarding step {self.state.step.name} -> {result.state.step.name}"
            )
            self.state = result.state

        return result

    def complete_onboarding(self):
        """Persist the collected profile and sign the user in.

        Each key is written on its own; a failure part way leaves the
        earlier writes in place.
        """
        self.store.write_profile(
            self.state.draft_name,
            int(self.state.draft_age),
            self.state.draft_gender,
        )
        self.completed = True
        logging.info("Onboarding completed")

    def show_validation_alert(self, message: str):
        self.state.alert_message = message

    def dismiss_alert(self):
        self.state.alert_message = None
