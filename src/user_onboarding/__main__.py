"""Application entry point."""

from user_onboarding.ui.cli import start_application


def main():
    """Initializes and runs the application."""
    start_application()


if __name__ == "__main__":
    main()
