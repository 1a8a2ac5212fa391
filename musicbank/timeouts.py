"""
MusicBank - Configuration-Driven Timeouts

Centralized timeout defaults with database override support.
Usage: ``get_timeout(db, "api_request_s")`` returns the configured or default value.
"""


# Default timeouts; keys describe the operation and unit
TIMEOUTS = {
    "api_request_s": 300,         # Gemini generateContent request
    "toast_visible_ms": 3000,     # Notification display time
    "toast_slide_ms": 300,        # Notification slide in/out animation
    "fade_in_ms": 500,            # Main window fade-in on startup
}


def get_timeout(db, key: str) -> int | float:
    """Get a timeout value, checking the config table first.

    Args:
        db: Database instance (or None for defaults only).
        key: Timeout key from TIMEOUTS dict.

    Returns:
        The configured timeout value, or the default from TIMEOUTS.

    Raises:
        KeyError: If key is not in TIMEOUTS.
    """
    if key not in TIMEOUTS:
        raise KeyError(f"Unknown timeout key: {key!r}")
    if db is not None:
        override = db.get_config(f"timeout_{key}")
        if override is not None:
            try:
                return type(TIMEOUTS[key])(override)
            except (ValueError, TypeError):
                pass
    return TIMEOUTS[key]
