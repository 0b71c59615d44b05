"""Handles all user-facing output and display formatting."""

import os
import platform
from typing import Optional, Sequence

from user_onboarding.config import Config
from user_onboarding.core.models import ProfileCard, WizardStep
from user_onboarding.ui.colors import Colors
from user_onboarding.utils.formatters import UIFormatter

WELCOME_DESCRIPTION = (
    "This is the #1 app for finding your match online! This is sample "
    "terminal project app for practicing using app storage and other "
    "Python technique."
)


# ============================================
# TERMINAL UTILITIES
# ============================================


def centered(text: str) -> str:
    """Center text when it fits the terminal."""
    width = UIFormatter.get_terminal_width()
    return text.center(width) if len(text) <= width else text


# ============================================
# BANNER & HEADERS
# ============================================


def show_banner():
    """Display the heart logo and version line."""
    heart = [
        " ██████   ██████ ",
        "████████ ████████",
        " ███████████████ ",
        "   ███████████   ",
        "     ███████     ",
        "       ███       ",
    ]
    for line in heart:
        print(f"{Colors.PRIMARY}{centered(line)}{Colors.RESET}")

    print(f"\n{Colors.MUTED}{centered(f'{Config.APP_NAME} v{Config.VERSION}')}{Colors.RESET}\n")


def show_step_header(step: WizardStep):
    """Display progress through the wizard."""
    dots = " ".join(
        "●" if s <= step else "○" for s in WizardStep
    )
    print(f"{Colors.PRIMARY}{centered(dots)}{Colors.RESET}\n")


def show_title(title: str):
    """Display a large screen title."""
    print(f"\n{Colors.HEADER}{centered(title)}{Colors.RESET}\n")


# ============================================
# SCREEN CONTROL
# ============================================


def clear_screen():
    """Clear the terminal screen."""
    os.system("cls" if platform.system() == "Windows" else "clear")


# ============================================
# ONBOARDING SECTIONS
# ============================================


def show_welcome_section():
    """Display the welcome screen copy."""
    show_title("Find your match!")
    print(f"{Colors.SECONDARY}{centered('─' * 16)}{Colors.RESET}\n")
    width = min(UIFormatter.get_terminal_width() - 8, 72)
    words, line = WELCOME_DESCRIPTION.split(), ""
    for word in words:
        if line and len(line) + len(word) + 1 > width:
            print(f"{Colors.SECONDARY}{centered(line)}{Colors.RESET}")
            line = word
        else:
            line = f"{line} {word}" if line else word
    if line:
        print(f"{Colors.SECONDARY}{centered(line)}{Colors.RESET}")


def show_name_section(current_name: str):
    """
    Display the name screen.

    Args:
        current_name: Name typed so far, may be empty
    """
    show_title("What's your name?")
    if current_name:
        print(f"  {Colors.LABEL}Current:{Colors.RESET} {Colors.VALUE}{current_name}{Colors.RESET}")


def show_age_section(age: float):
    """
    Display the age screen with the slider.

    Args:
        age: Current slider value
    """
    show_title("What's your age?")
    print(f"{Colors.HEADER}{centered(f'{age:.0f}')}{Colors.RESET}\n")
    print(f"  {UIFormatter.format_slider(age, Config.MIN_AGE, Config.MAX_AGE)}")
    print(
        f"\n{Colors.MUTED}  Type an age, or +/- to nudge. "
        f"Press Enter when done.{Colors.RESET}"
    )


def show_gender_section(options: Sequence[str], selected: str):
    """
    Display the gender picker.

    Args:
        options: Picker values
        selected: Currently selected value, may be empty
    """
    show_title("What's your gender?")
    print(f"  {Colors.LABEL}Select your gender{Colors.RESET}\n")
    for i, option in enumerate(options, 1):
        if option == selected:
            print(f"  {Colors.SELECTED}{i}. {option}  ✓{Colors.RESET}")
        else:
            print(f"  {Colors.PRIMARY}{i}.{Colors.RESET} {Colors.VALUE}{option}{Colors.RESET}")


def show_primary_action(label: str):
    """Display the primary action button."""
    print(f"\n{Colors.BUTTON} {label.center(24)} {Colors.RESET}\n")


# ============================================
# USER PROMPTS
# ============================================


def prompt_input(prompt_text: str) -> str:
    """
    Prompt for user input.

    Args:
        prompt_text: Prompt text to display

    Returns:
        User input (stripped)
    """
    return input(f"{Colors.PROMPT}❯ {prompt_text}{Colors.RESET} ").strip()


def prompt_text_field(placeholder: str) -> str:
    """
    Prompt for free text, returned exactly as typed.

    Args:
        placeholder: Hint shown before the cursor

    Returns:
        User input without the trailing newline
    """
    return input(f"{Colors.PROMPT}❯ {Colors.MUTED}{placeholder}{Colors.RESET} ")


def show_alert(title: str):
    """
    Display a modal alert and wait for it to be dismissed.

    Args:
        title: Alert title
    """
    width = min(UIFormatter.get_terminal_width() - 4, 50)
    print(f"\n{Colors.WARNING}╭{'─' * (width - 2)}╮")
    print(f"│{UIFormatter.truncate(title, width - 4).center(width - 2)}│")
    print(f"│{'OK (Enter)'.center(width - 2)}│")
    print(f"╰{'─' * (width - 2)}╯{Colors.RESET}")
    input()


# ============================================
# STATUS MESSAGES
# ============================================


def show_success(message: str):
    """Display success message with icon."""
    print(f"\n{Colors.SUCCESS}✓ {message}{Colors.RESET}")


def show_error(message: str):
    """Display error message with icon."""
    print(f"\n{Colors.ERROR}✗ {message}{Colors.RESET}")


def show_warning(message: str):
    """Display warning message with icon."""
    print(f"\n{Colors.WARNING}⚠ {message}{Colors.RESET}")


def show_info(message: str):
    """Display info message with icon."""
    print(f"\n{Colors.INFO}ℹ {message}{Colors.RESET}")


# ============================================
# PROFILE
# ============================================


def display_profile_card(card: ProfileCard, title: Optional[str] = None):
    """
    Display the stored profile in a formatted box.

    Args:
        card: Display values built by the profile screen
        title: Optional box title
    """
    print()
    print(UIFormatter.format_box(title or "Profile", card.lines()))
    print()
