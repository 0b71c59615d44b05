"""Persisted profile repository over the key-value storage."""

import logging

from user_onboarding.core.models import UserProfile
from user_onboarding.data import database

NAME_KEY = "name"
AGE_KEY = "age"
GENDER_KEY = "gender"
SIGNED_IN_KEY = "signed_in"

PROFILE_KEYS = (NAME_KEY, AGE_KEY, GENDER_KEY)


class ProfileStore:
    """Reads, writes and clears the profile keys.

    Shared by the onboarding flow (writer) and the profile screen
    (reader and clearer). Each key is written independently; there is no
    transaction spanning the four writes.
    """

    def __init__(self, conn):
        self.conn = conn
        database.initialize_storage_db(self.conn)

    @classmethod
    def open(cls, db_path=None):
        """Open the store at db_path, or at the default storage location."""
        if db_path is None:
            db_path = database.get_storage_db_path()
        logging.info(f"Opening profile store: {db_path}")
        return cls(database.db_connect(db_path))

    def close(self):
        self.conn.close()

    # --- Reads ---

    def get_name(self):
        return database.get_value(self.conn, NAME_KEY)

    def get_age(self):
        age = database.get_value(self.conn, AGE_KEY)
        return int(age) if age is not None else None

    def get_gender(self):
        return database.get_value(self.conn, GENDER_KEY)

    def is_signed_in(self) -> bool:
        return bool(database.get_value(self.conn, SIGNED_IN_KEY))

    def read_profile(self) -> UserProfile:
        """Read every profile key. Absent keys come back as None."""
        return UserProfile(
            name=self.get_name(),
            age=self.get_age(),
            gender=self.get_gender(),
            signed_in=self.is_signed_in(),
        )

    # --- Writes ---

    def write_profile(self, name: str, age: int, gender: str):
        """Store the wizard result and mark the user signed in."""
        database.set_value(self.conn, NAME_KEY, name)
        database.set_value(self.conn, AGE_KEY, int(age))
        database.set_value(self.conn, GENDER_KEY, gender)
        self.set_signed_in(True)
        logging.info("Profile written, user signed in")

    def set_signed_in(self, signed_in: bool):
        database.set_value(self.conn, SIGNED_IN_KEY, 1 if signed_in else 0)

    def clear_profile(self):
        """Remove the profile keys and mark the user signed out."""
        for key in PROFILE_KEYS:
            database.delete_value(self.conn, key)
        self.set_signed_in(False)
        logging.info("Profile cleared, user signed out")
