"""Input checks shared by the services."""


def is_blank(value: str | None) -> bool:
    """None, empty, or whitespace only."""
    return value is None or not value.strip()
