"""Initializes and configures the argparse parser for the CLI."""

import argparse
import sys
from user_onboarding.ui import commands, colors
from user_onboarding.config import Config


class CustomHelpFormatter(argparse.HelpFormatter):
    """Custom formatter that colorizes help text."""

    def format_help(self):
        """Add color to usage line."""
        help_text = super().format_help()
        return help_text.replace(
            "usage:", f"{colors.Colors.BRIGHT_YELLOW}Usage:{colors.Colors.RESET}"
        )


class CustomParser(argparse.ArgumentParser):
    """Custom parser that shows help on error instead of just error message."""

    def error(self, message):
        """Show help message when command parsing fails."""
        sys.stderr.write(
            f"{colors.Colors.ERROR}Error: {message}{colors.Colors.RESET}\n\n"
        )
        self.print_help(sys.stderr)
        sys.exit(2)


def initialize_parser():
    """
    Build and return the argparse parser.

    Available commands:
    - start: Run the interactive app (default)
    - profile: Print the stored profile
    - sign-out: Clear the stored profile

    Returns:
        Configured ArgumentParser instance
    """
    parser = CustomParser(
        prog="user-onboarding",
        description=f"{Config.APP_NAME} v{Config.VERSION} - Find your match!",
        formatter_class=CustomHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h", "--help", action="help", help="Show this help message and exit"
    )

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{Config.APP_NAME} v{Config.VERSION}",
        help="Show version information and exit",
    )

    parser.add_argument(
        "--storage-dir",
        metavar="PATH",
        help=f"Directory for app storage (default: ~/{Config.STORAGE_DIR_NAME})",
    )

    parser.set_defaults(func=commands.start_command)

    subparsers = parser.add_subparsers(
        title="Available Commands", metavar="<command>", dest="command"
    )

    start = subparsers.add_parser(
        "start",
        help="Run the interactive app",
        description="Sign up through the onboarding wizard or view your profile",
        formatter_class=CustomHelpFormatter,
    )
    start.set_defaults(func=commands.start_command)

    profile = subparsers.add_parser(
        "profile",
        aliases=["show"],
        help="Print the stored profile",
        description="Print the stored profile and exit",
        formatter_class=CustomHelpFormatter,
    )
    profile.set_defaults(func=commands.profile_command)

    sign_out = subparsers.add_parser(
        "sign-out",
        aliases=["signout"],
        help="Clear the stored profile",
        description="Sign out and remove the stored name, age and gender",
        formatter_class=CustomHelpFormatter,
    )
    sign_out.set_defaults(func=commands.sign_out_command)

    return parser
