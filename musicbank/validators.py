"""
MusicBank - Input Validation Layer

Validation functions for user-facing forms.  Each returns a list of
``ValidationError`` instances (empty list means valid).
"""


class ValidationError:
    """Represents a single validation failure."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message

    def __repr__(self):
        return f"ValidationError({self.field!r}, {self.message!r})"


def validate_api_key(api_key: str) -> list[ValidationError]:
    """Validate the API key before saving or using it."""
    errors = []
    if not api_key or not api_key.strip():
        errors.append(ValidationError("api_key", "API 키를 입력해주세요."))
    return errors


def validate_generation_request(topic: str, api_key: str) -> list[ValidationError]:
    """Validate the inputs of a lyrics generation request.

    The topic is checked before the key so the first error matches the
    field the user is most likely editing.
    """
    errors = []
    if not topic or not topic.strip():
        errors.append(ValidationError("topic", "가사 주제를 입력해주세요."))
    errors.extend(validate_api_key(api_key))
    return errors
