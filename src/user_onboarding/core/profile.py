"""Profile screen logic: read back the stored profile and sign out."""

import logging

from user_onboarding.config import Config
from user_onboarding.core.models import ProfileCard
from user_onboarding.core.store import ProfileStore


class ProfileDisplay:
    """Reads the persisted profile for display and handles sign-out."""

    def __init__(self, store: ProfileStore):
        self.store = store

    def render(self) -> ProfileCard:
        """Build display values, substituting fallbacks for absent keys."""
        profile = self.store.read_profile()
        return ProfileCard(
            name=profile.name if profile.name is not None else Config.FALLBACK_NAME,
            age=profile.age if profile.age is not None else Config.FALLBACK_AGE,
            gender=(
                profile.gender
                if profile.gender is not None
                else Config.FALLBACK_GENDER
            ),
            signed_in=profile.signed_in,
        )

    def sign_out(self):
        """Clear the stored profile. No confirmation, no undo."""
        self.store.clear_profile()
        logging.info("User signed out")
