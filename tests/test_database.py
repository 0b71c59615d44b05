import pytest
import os
from user_onboarding.data.database import *


class TestDatabasePaths:
    """Test database path functions."""

    def test_storage_directory_created(self, clean_storage):
        """Storage directory should be created if not exists."""
        storage_dir = get_storage_directory()
        assert storage_dir == clean_storage
        assert os.path.isdir(storage_dir)

    def test_storage_directory_defaults_to_home(self, tmp_path, monkeypatch):
        """Without the override the directory lives under the home directory."""
        monkeypatch.delenv("USER_ONBOARDING_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("USERPROFILE", str(tmp_path))

        assert get_storage_directory() == os.path.join(str(tmp_path), ".user_onboarding")

    def test_file_paths_inside_storage(self, clean_storage):
        """Database and log files should sit in the storage directory."""
        assert get_storage_db_path() == os.path.join(clean_storage, "app_storage.db")
        assert get_log_file_path() == os.path.join(
            clean_storage, "onboarding_activity.log"
        )

    def test_explicit_directory_wins_over_environment(self, tmp_path, clean_storage):
        """A directory passed in should be used instead of the override."""
        target = str(tmp_path / "explicit")

        assert get_storage_db_path(target) == os.path.join(target, "app_storage.db")
        assert get_log_file_path(target) == os.path.join(
            target, "onboarding_activity.log"
        )
        assert os.path.isdir(target)
        assert not os.path.exists(clean_storage)


class TestKeyValueOperations:
    """Test key-value CRUD operations."""

    @pytest.fixture
    def test_db(self):
        """Create a test database."""
        conn = db_connect()
        initialize_storage_db(conn)
        yield conn
        conn.close()

    def test_missing_key_is_none(self, test_db):
        """Reading an absent key should return None."""
        assert get_value(test_db, "name") is None

    def test_set_and_get(self, test_db):
        """Should store and return a value."""
        set_value(test_db, "name", "Alex")
        assert get_value(test_db, "name") == "Alex"

    def test_value_types_preserved(self, test_db):
        """Integers and text should come back with their own type."""
        set_value(test_db, "age", 25)
        set_value(test_db, "gender", "Male")

        assert get_value(test_db, "age") == 25
        assert isinstance(get_value(test_db, "age"), int)
        assert isinstance(get_value(test_db, "gender"), str)

    def test_set_replaces_existing(self, test_db, stored_keys):
        """Writing a key twice should keep only the latest value."""
        set_value(test_db, "name", "Alex")
        set_value(test_db, "name", "Sam")

        assert get_value(test_db, "name") == "Sam"
        assert stored_keys(test_db) == ["name"]

    def test_delete_value(self, test_db, stored_keys):
        """Deleting should remove the row entirely."""
        set_value(test_db, "name", "Alex")

        assert delete_value(test_db, "name") == 1
        assert get_value(test_db, "name") is None
        assert stored_keys(test_db) == []

    def test_delete_missing_key(self, test_db):
        """Deleting an absent key should change nothing."""
        assert delete_value(test_db, "name") == 0

    def test_initialize_is_idempotent(self, test_db):
        """Initializing twice should keep existing rows."""
        set_value(test_db, "name", "Alex")
        initialize_storage_db(test_db)

        assert get_value(test_db, "name") == "Alex"

    def test_sql_injection_prevention(self, test_db, stored_keys):
        """SQL injection attempts should be stored as plain text."""
        malicious = "'; DROP TABLE app_storage; --"
        set_value(test_db, "name", malicious)

        assert get_value(test_db, "name") == malicious
        assert stored_keys(test_db) == ["name"]
