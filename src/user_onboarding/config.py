import os


class Config:
    """
    Application configuration constants.

    Environment-aware configuration that adapts between development and production.
    Set USER_ONBOARDING_ENV=development for development settings.
    """

    # ============================================
    # VERSION & ENVIRONMENT
    # ============================================

    VERSION = "1.0.0"
    APP_NAME = "User Onboarding"

    # Environment detection (defaults to production)
    IS_PRODUCTION = os.getenv("USER_ONBOARDING_ENV", "production") == "production"

    # ============================================
    # ONBOARDING INPUT RULES
    # ============================================

    MIN_AGE = 18
    MAX_AGE = 100
    AGE_STEP = 1.0  # Slider granularity
    DEFAULT_AGE = 18

    GENDER_OPTIONS = ("Male", "Female", "Non-binary", "Prefer not to say")

    # Gender is treated as selected only above this length
    MIN_GENDER_LENGTH = 1

    NAME_REQUIRED_MESSAGE = "Please enter your name!"
    GENDER_REQUIRED_MESSAGE = "Please Select your gender!"

    # ============================================
    # PROFILE DISPLAY FALLBACKS
    # ============================================

    FALLBACK_NAME = "Your name here"
    FALLBACK_AGE = 0
    FALLBACK_GENDER = "unknown"

    # ============================================
    # USER INTERFACE SETTINGS
    # ============================================

    TERMINAL_MAX_WIDTH = 120  # Maximum terminal width for UI
    WARNING_DISPLAY_DURATION = 1.0 if IS_PRODUCTION else 0.0
    SUCCESS_DISPLAY_DURATION = 1.5 if IS_PRODUCTION else 0.0

    # ============================================
    # FILE PATHS (relative to storage directory)
    # ============================================

    STORAGE_DIR_ENV = "USER_ONBOARDING_HOME"
    STORAGE_DIR_NAME = ".user_onboarding"
    STORAGE_DB_FILE = "app_storage.db"
    LOG_FILE = "onboarding_activity.log"

    # ============================================
    # METHODS
    # ============================================

    @classmethod
    def get_environment(cls) -> str:
        """
        Get current environment name.

        Returns:
            'production' or 'development'
        """
        return "production" if cls.IS_PRODUCTION else "development"

    @classmethod
    def print_config_summary(cls):
        """Print configuration summary (useful for debugging)."""
        print(f"\n{cls.APP_NAME} v{cls.VERSION}")
        print(f"Environment: {cls.get_environment().upper()}")
        print(f"\nOnboarding:")
        print(f"  Age range: {cls.MIN_AGE}-{cls.MAX_AGE} (step {cls.AGE_STEP:g})")
        print(f"  Gender options: {', '.join(cls.GENDER_OPTIONS)}\n")


# ============================================
# VALIDATION
# ============================================


def validate_config():
    """
    Validate that the onboarding constants are consistent.

    Raises:
        ValueError: If configuration is inconsistent
    """
    errors = []

    if Config.MIN_AGE > Config.MAX_AGE:
        errors.append("MIN_AGE must not exceed MAX_AGE")

    if not Config.MIN_AGE <= Config.DEFAULT_AGE <= Config.MAX_AGE:
        errors.append("DEFAULT_AGE must lie within the age range")

    if Config.AGE_STEP <= 0:
        errors.append("AGE_STEP must be positive")

    if not Config.GENDER_OPTIONS:
        errors.append("At least one gender option is required")

    for option in Config.GENDER_OPTIONS:
        if len(option) <= Config.MIN_GENDER_LENGTH:
            errors.append(f"Gender option '{option}' would never pass validation")

    if errors:
        raise ValueError(
            f"Configuration validation failed:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


# Run validation on import
try:
    validate_config()
except ValueError as e:
    import logging

    logging.warning(f"Configuration validation warning: {e}")


if __name__ == "__main__":
    Config.print_config_summary()

    print("Configuration validation:", end=" ")
    try:
        validate_config()
        print("✓ PASSED")
    except ValueError as e:
        print(f"✗ FAILED\n{e}")
