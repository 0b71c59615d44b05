"""Reusable validation utilities."""

from typing import Tuple
from user_onboarding.config import Config


class InputValidator:
    """Centralized onboarding input validation."""

    @staticmethod
    def validate_name(name: str) -> Tuple[bool, str]:
        """Validate the name step. Whitespace-only names are accepted."""
        if not name:
            return False, Config.NAME_REQUIRED_MESSAGE

        return True, ""

    @staticmethod
    def validate_gender(gender: str) -> Tuple[bool, str]:
        """Validate the gender step.

        A value counts as selected only when it is longer than
        MIN_GENDER_LENGTH characters, so a single character is rejected.
        """
        if len(gender) <= Config.MIN_GENDER_LENGTH:
            return False, Config.GENDER_REQUIRED_MESSAGE

        return True, ""

    @staticmethod
    def is_gender_option(gender: str) -> bool:
        """Check that a value is one of the picker options."""
        return gender in Config.GENDER_OPTIONS
