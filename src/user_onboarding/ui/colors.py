"""ANSI color codes with semantic meanings for the onboarding screens."""

import platform
import os

# Initialize color support for Windows terminals
if platform.system() == "Windows":
    os.system("")  # Enables ANSI escape sequences in Windows 10/11 terminals


class Colors:
    """ANSI color codes with semantic naming."""

    RESET = "\033[0m"

    BRIGHT_YELLOW = "\033[93m"  # Help text usage line

    # ========== SEMANTIC COLORS - USE THESE FOR CONSISTENCY ==========

    # Brand: the app's purple on white
    PRIMARY = "\033[95m"  # Bright Magenta - Main brand/interactive
    SECONDARY = "\033[97m"  # Bright White - Text on brand background
    ACCENT = "\033[1m\033[95m"  # Bold Magenta - Titles

    # Status Colors
    SUCCESS = "\033[92m"  # Bright Green - Success, completion
    ERROR = "\033[91m"  # Bright Red - Errors, failures
    WARNING = "\033[93m"  # Bright Yellow - Warnings, alerts
    INFO = "\033[94m"  # Bright Blue - Information, hints

    # UI Component Colors
    PROMPT = "\033[95m"  # Bright Magenta - Input prompts
    HEADER = "\033[1m\033[97m"  # Bold White - Section headers
    BUTTON = "\033[1m\033[7m\033[95m"  # Reversed Magenta - Primary action

    # Data Display Colors
    LABEL = "\033[95m"  # Bright Magenta - Field labels
    VALUE = "\033[97m"  # Bright White - Field values
    SELECTED = "\033[1m\033[92m"  # Bold Green - Picker selection

    # Special Purpose
    MUTED = "\033[90m"  # Gray - Less important text
