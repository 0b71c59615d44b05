import pytest

from user_onboarding.config import Config
from user_onboarding.core.store import ProfileStore
from user_onboarding.data import database


@pytest.fixture
def clean_storage(tmp_path, monkeypatch):
    """Point the storage directory at an empty temporary directory."""
    storage_dir = tmp_path / "storage"
    monkeypatch.setenv(Config.STORAGE_DIR_ENV, str(storage_dir))
    yield str(storage_dir)


@pytest.fixture
def store():
    """Profile store over an in-memory database."""
    profile_store = ProfileStore(database.db_connect())
    yield profile_store
    profile_store.close()


@pytest.fixture
def stored_keys():
    """Return a function listing the keys present in a storage table."""

    def list_keys(conn):
        cursor = conn.cursor()
        cursor.execute("SELECT key FROM app_storage ORDER BY key")
        return [row[0] for row in cursor.fetchall()]

    return list_keys
