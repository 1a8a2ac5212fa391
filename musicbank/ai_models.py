"""Available Gemini models for MusicBank.

Centralizes model definitions so that api_client.py and the worker that
resolves the configured model reference the same list.
"""

# Each entry: (model_id, display_name, description)
AVAILABLE_MODELS = [
    ("gemini-2.5-flash-preview-05-20", "Gemini 2.5 Flash Preview", "Fast, cost-effective"),
    ("gemini-2.5-pro", "Gemini 2.5 Pro", "Most capable"),
    ("gemini-2.0-flash", "Gemini 2.0 Flash", "Previous generation"),
]

DEFAULT_MODEL = "gemini-2.5-flash-preview-05-20"


def get_model_ids() -> list[str]:
    """Return just the model ID strings."""
    return [m[0] for m in AVAILABLE_MODELS]


def get_model_display_name(model_id: str) -> str:
    """Return the display name for a model ID."""
    for mid, name, _ in AVAILABLE_MODELS:
        if mid == model_id:
            return name
    return model_id


def resolve_model(db) -> str:
    """Return the model configured under the ``model`` key, or the default."""
    if db is None:
        return DEFAULT_MODEL
    return db.get_config("model") or DEFAULT_MODEL
