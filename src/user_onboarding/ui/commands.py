"""Screen loops and command handlers for the terminal UI."""

import logging
import time
from typing import Optional

from user_onboarding.config import Config
from user_onboarding.core.models import WizardStep
from user_onboarding.core.onboarding import OnboardingFlow
from user_onboarding.core.profile import ProfileDisplay
from user_onboarding.core.store import ProfileStore
from user_onboarding.ui import views

SIGNED_OUT = "SIGNED_OUT"
EXIT = "EXIT"


# ============================================
# INPUT PARSING
# ============================================


def parse_age_input(raw: str, current: float) -> float:
    """
    Turn slider input into a new age value.

    Accepts a number, or a run of '+' or '-' characters that nudge the
    current value by one step each.

    Raises:
        ValueError: If the input is neither
    """
    raw = raw.strip()
    if raw and set(raw) == {"+"}:
        return current + len(raw) * Config.AGE_STEP
    if raw and set(raw) == {"-"}:
        return current - len(raw) * Config.AGE_STEP
    return float(raw)


def resolve_gender_choice(raw: str) -> Optional[str]:
    """Map a picker entry (1-based number or option text) to an option."""
    raw = raw.strip()
    if raw.isdecimal() and 0 < int(raw) <= len(Config.GENDER_OPTIONS):
        return Config.GENDER_OPTIONS[int(raw) - 1]
    for option in Config.GENDER_OPTIONS:
        if raw.lower() == option.lower():
            return option
    return None


# ============================================
# ONBOARDING SCREENS
# ============================================


def _render_step(flow: OnboardingFlow):
    views.clear_screen()
    views.show_step_header(flow.step)


def _collect_welcome(flow: OnboardingFlow) -> bool:
    views.show_welcome_section()
    views.show_primary_action(flow.primary_action_label)
    views.prompt_input(f"Press Enter to {flow.primary_action_label}")
    return True


def _collect_name(flow: OnboardingFlow) -> bool:
    views.show_name_section(flow.state.draft_name)
    views.show_primary_action(flow.primary_action_label)
    name = views.prompt_text_field("Your name here...")
    # An empty line keeps what was typed before
    if name:
        flow.set_name(name)
    return True


def _collect_age(flow: OnboardingFlow) -> bool:
    notice = None
    while True:
        views.show_age_section(flow.state.draft_age)
        views.show_primary_action(flow.primary_action_label)
        if notice:
            views.show_warning(notice)
            notice = None

        raw = views.prompt_input("Age:")
        if not raw:
            return True

        try:
            flow.set_age(parse_age_input(raw, flow.state.draft_age))
        except ValueError:
            notice = f"'{raw}' is not a number"

        _render_step(flow)


def _collect_gender(flow: OnboardingFlow) -> bool:
    views.show_gender_section(Config.GENDER_OPTIONS, flow.state.draft_gender)
    views.show_primary_action(flow.primary_action_label)

    raw = views.prompt_input(f"Select 1-{len(Config.GENDER_OPTIONS)}:")
    if not raw:
        return True

    choice = resolve_gender_choice(raw)
    if choice is None:
        views.show_warning(f"'{raw}' is not one of the options")
        time.sleep(Config.WARNING_DISPLAY_DURATION)
        return False

    flow.set_gender(choice)
    return True


_COLLECTORS = {
    WizardStep.WELCOME: _collect_welcome,
    WizardStep.NAME: _collect_name,
    WizardStep.AGE: _collect_age,
    WizardStep.GENDER: _collect_gender,
}


def run_onboarding(flow: OnboardingFlow):
    """
    Run the wizard until the profile is stored.

    Each pass renders the current step, collects its input and presses the
    primary action. Validation failures are shown as an alert and the step
    is repeated.

    Args:
        flow: Fresh onboarding session
    """
    logging.info("Onboarding started")

    while not flow.completed:
        _render_step(flow)

        if not _COLLECTORS[flow.step](flow):
            continue

        result = flow.advance()
        if result.rejected:
            logging.info(f"Validation alert on {flow.step.name}: {result.error}")
            views.show_alert(flow.alert_message)
            flow.dismiss_alert()

    views.show_success("Welcome aboard!")
    time.sleep(Config.SUCCESS_DISPLAY_DURATION)


# ============================================
# PROFILE SCREEN
# ============================================


def run_profile_screen(display: ProfileDisplay) -> str:
    """
    Show the profile until the user signs out or quits.

    Args:
        display: Profile screen over the shared store

    Returns:
        SIGNED_OUT after a sign-out, EXIT when the user quits
    """
    notice = None
    while True:
        views.clear_screen()
        views.show_banner()
        views.display_profile_card(display.render())
        views.show_primary_action("SIGN OUT")
        if notice:
            views.show_warning(notice)
            notice = None

        choice = views.prompt_input("Type 's' to SIGN OUT or 'q' to quit:").lower()

        if choice in ("s", "sign out", "sign-out", "signout"):
            display.sign_out()
            views.show_success("Signed out")
            time.sleep(Config.SUCCESS_DISPLAY_DURATION)
            return SIGNED_OUT

        if choice in ("q", "quit", "exit"):
            return EXIT

        notice = f"Unknown option: '{choice}'" if choice else None


# ============================================
# COMMAND HANDLERS
# ============================================


def start_command(args, store: ProfileStore):
    """
    Run the interactive app.

    Shows the profile screen while signed in and the wizard otherwise,
    switching between them as the signed-in flag changes.

    Args:
        args: Command line arguments
        store: Open profile store
    """
    while True:
        if store.is_signed_in():
            if run_profile_screen(ProfileDisplay(store)) == EXIT:
                logging.info("User chose to exit")
                return
        else:
            run_onboarding(OnboardingFlow(store))


def profile_command(args, store: ProfileStore):
    """
    Print the stored profile once.

    Args:
        args: Command line arguments
        store: Open profile store
    """
    card = ProfileDisplay(store).render()
    views.display_profile_card(card)
    if not card.signed_in:
        views.show_info("Not signed in. Run 'user-onboarding start' to sign up.")


def sign_out_command(args, store: ProfileStore):
    """
    Sign out without opening the interactive screens.

    Args:
        args: Command line arguments
        store: Open profile store
    """
    if not store.is_signed_in():
        views.show_info("Already signed out.")
        return

    ProfileDisplay(store).sign_out()
    views.show_success("Signed out")
