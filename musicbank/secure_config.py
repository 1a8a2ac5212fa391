"""
MusicBank - Secure Credential Storage

Stores the Gemini API key in the system keyring, with a fallback to the
SQLite config table on systems where no keyring backend works.
"""

import logging

import keyring

logger = logging.getLogger("musicbank.security")

SERVICE_NAME = "MusicBank"
API_KEY_NAME = "musicbank_api_key"
SENSITIVE_KEYS = {API_KEY_NAME}

# Stored in the config table when the real value lives in the keyring
KEYRING_MARKER = "***"


def has_keyring() -> bool:
    """Return True if a working system keyring is available."""
    try:
        keyring.get_password(SERVICE_NAME, "__test__")
        return True
    except Exception:
        return False


def get_secret(key: str, fallback_db=None) -> str | None:
    """Retrieve a secret, trying keyring first then database.

    Args:
        key: One of the SENSITIVE_KEYS.
        fallback_db: Optional Database instance for fallback lookup.

    Returns:
        The credential value, or None if not found.
    """
    try:
        value = keyring.get_password(SERVICE_NAME, key)
        if value:
            return value
    except Exception as e:
        logger.debug("Keyring read failed for %s: %s", key, e)

    if fallback_db is not None:
        value = fallback_db.get_config(key)
        if value and value != KEYRING_MARKER:
            return value

    return None


def set_secret(key: str, value: str, fallback_db=None) -> None:
    """Store a secret in the keyring, falling back to the database.

    When keyring is available, the database value is replaced with ``***``
    to indicate that the real value lives in the keyring.

    Args:
        key: One of the SENSITIVE_KEYS.
        value: The credential to store.
        fallback_db: Optional Database instance for fallback storage.
    """
    try:
        keyring.set_password(SERVICE_NAME, key, value)
        if fallback_db is not None:
            fallback_db.set_config(key, KEYRING_MARKER)
        logger.info("Stored %s in system keyring", key)
        return
    except Exception as e:
        logger.warning("Keyring write failed for %s: %s, using DB fallback", key, e)

    # Fallback: store in DB (plaintext)
    if fallback_db is not None:
        fallback_db.set_config(key, value)
        logger.info("Stored %s in database (no keyring available)", key)
