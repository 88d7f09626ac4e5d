"""Cache errors and validation helpers."""


class CacheInitError(Exception):
    """Local store could not be opened or its schema applied."""

    def __init__(self, message: str = "Cache store initialization failed"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


def validate_list_name(name: str | None) -> str:
    """Trim a list name and reject blank ones."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("List name must not be empty")
    return cleaned
