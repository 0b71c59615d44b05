import os
from unittest.mock import patch

from user_onboarding.ui import views
from user_onboarding.ui.parser import initialize_parser
from user_onboarding.utils.formatters import UIFormatter


class TestTerminalWidth:
    """Test the shared terminal width bounds."""

    def test_narrow_terminal_clamped_to_minimum(self):
        """Very narrow terminals should still get a usable width."""
        with patch("shutil.get_terminal_size", return_value=os.terminal_size((40, 24))):
            assert UIFormatter.get_terminal_width() == 60

    def test_wide_terminal_clamped_to_maximum(self):
        """Very wide terminals should be capped."""
        with patch("shutil.get_terminal_size", return_value=os.terminal_size((500, 24))):
            assert UIFormatter.get_terminal_width() == 120

    def test_size_lookup_failure_falls_back(self):
        """An unreadable terminal should fall back to 80 columns."""
        with patch("shutil.get_terminal_size", side_effect=OSError):
            assert UIFormatter.get_terminal_width() == 80

    def test_views_center_with_shared_width(self):
        """Centered view text should follow the formatter's width."""
        with patch.object(UIFormatter, "get_terminal_width", return_value=70):
            assert len(views.centered("hello")) == 70


class TestWelcomeSection:
    """Test the welcome screen copy."""

    def test_welcome_copy(self, capsys):
        """The welcome screen should show the title and description."""
        with patch("shutil.get_terminal_size", return_value=os.terminal_size((200, 24))):
            views.show_welcome_section()

        out = capsys.readouterr().out
        assert "Find your match!" in out
        assert "This is the #1 app for finding your match online!" in out
        assert "practicing using app storage" in out

    def test_welcome_copy_wraps_on_narrow_terminal(self, capsys):
        """Every word should still be printed when the copy wraps."""
        with patch("shutil.get_terminal_size", return_value=os.terminal_size((60, 24))):
            views.show_welcome_section()

        out = capsys.readouterr().out
        for word in views.WELCOME_DESCRIPTION.split():
            assert word in out


class TestPalette:
    """Test that the palette covers what the screens use."""

    def test_help_renders_with_palette(self):
        """Help output should render using the usage line color."""
        help_text = initialize_parser().format_help()
        assert "\033[93m" in help_text

    def test_status_messages_render(self, capsys):
        """Each status message should render with its icon."""
        views.show_success("saved")
        views.show_error("failed")
        views.show_warning("careful")
        views.show_info("note")

        out = capsys.readouterr().out
        for icon in ["✓ saved", "✗ failed", "⚠ careful", "ℹ note"]:
            assert icon in out
