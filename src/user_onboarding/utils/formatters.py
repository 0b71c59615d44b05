"""Reusable formatting utilities."""

from user_onboarding.config import Config
from user_onboarding.ui import colors
import shutil


class UIFormatter:
    """Centralized UI formatting logic."""

    @staticmethod
    def get_terminal_width(
        max_width: int = Config.TERMINAL_MAX_WIDTH, min_width: int = 60
    ) -> int:
        """Get terminal width bounded to [min_width, max_width]."""
        try:
            width = shutil.get_terminal_size().columns
            return max(min_width, min(width, max_width))
        except OSError:
            return 80

    @staticmethod
    def format_box(title: str, lines: list, width: int = None) -> str:
        """Create a formatted box with a title and one row per line."""
        if width is None:
            width = min(UIFormatter.get_terminal_width(), 60)

        inner = width - 4
        out = []
        out.append(f"{colors.Colors.PRIMARY}╭{'─' * (width - 2)}╮")

        title = UIFormatter.truncate(title, inner)
        title_padding = width - len(title) - 3
        out.append(
            f"│ {colors.Colors.ACCENT}{title}{colors.Colors.RESET}"
            f"{colors.Colors.PRIMARY}{' ' * title_padding}│"
        )
        out.append(f"├{'─' * (width - 2)}┤")

        for line in lines:
            display = UIFormatter.truncate(str(line), inner)
            padding = width - len(display) - 3
            out.append(
                f"│ {colors.Colors.VALUE}{display}{colors.Colors.PRIMARY}{' ' * padding}│"
            )

        out.append(f"╰{'─' * (width - 2)}╯{colors.Colors.RESET}")
        return "\n".join(out)

    @staticmethod
    def truncate(text: str, max_len: int) -> str:
        """Shorten text to max_len, marking the cut with an ellipsis."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 3] + "..."

    @staticmethod
    def format_slider(value: float, low: float, high: float, width: int = 30) -> str:
        """Render a horizontal slider track with the knob at value."""
        span = high - low
        position = 0 if span <= 0 else round((value - low) / span * (width - 1))
        track = ["─"] * width
        track[position] = "●"
        return (
            f"{colors.Colors.MUTED}{low:.0f} {colors.Colors.SECONDARY}"
            f"{''.join(track)}{colors.Colors.MUTED} {high:.0f}{colors.Colors.RESET}"
        )
