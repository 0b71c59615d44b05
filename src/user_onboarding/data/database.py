"""Handles the key-value storage file backing the persisted profile."""

import sqlite3
import os

from user_onboarding.config import Config

# --- Path Management ---


def get_storage_directory(storage_dir=None):
    """Ensures and returns the storage directory.

    An explicit storage_dir wins over the environment override and the
    default under the home directory.
    """
    storage_dir = storage_dir or os.getenv(Config.STORAGE_DIR_ENV) or os.path.join(
        os.path.expanduser("~"), Config.STORAGE_DIR_NAME
    )
    os.makedirs(storage_dir, exist_ok=True)
    return storage_dir


def get_storage_db_path(storage_dir=None):
    """Returns the path to the key-value storage database."""
    return os.path.join(get_storage_directory(storage_dir), Config.STORAGE_DB_FILE)


def get_log_file_path(storage_dir=None):
    """Returns the path to the activity log."""
    return os.path.join(get_storage_directory(storage_dir), Config.LOG_FILE)


# --- Database Initialization ---


def db_connect(db_path=":memory:"):
    """Establishes a connection, defaulting to an in-memory database."""
    return sqlite3.connect(db_path)


def initialize_storage_db(conn):
    """Initializes the key-value table.

    The value column has no declared type so each row keeps the type it
    was written with (text or integer).
    """
    cursor = conn.cursor()
    cursor.execute(
        """
        CREATE TABLE IF NOT EXISTS app_storage(
            key TEXT PRIMARY KEY,
            value
        );
        """
    )
    conn.commit()


# --- Key-Value Operations ---


def get_value(conn, key):
    """Returns the stored value for a key, or None when the key is absent."""
    cursor = conn.cursor()
    cursor.execute("SELECT value FROM app_storage WHERE key = ?", (key,))
    row = cursor.fetchone()
    return row[0] if row else None


def set_value(conn, key, value):
    """Writes a value, replacing any previous one."""
    cursor = conn.cursor()
    cursor.execute(
        "INSERT OR REPLACE INTO app_storage (key, value) VALUES (?, ?)",
        (key, value),
    )
    conn.commit()


def delete_value(conn, key):
    """Removes a key. Returns the number of rows removed."""
    cursor = conn.cursor()
    cursor.execute("DELETE FROM app_storage WHERE key = ?", (key,))
    changes = cursor.rowcount
    conn.commit()
    return changes
