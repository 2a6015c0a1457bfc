"""Identifier parsing for ids that arrive as raw path segments."""

from uuid import UUID


def parse_id(raw: str) -> UUID | None:
    """Return the UUID for ``raw``, or None when it is not a well-formed id."""
    try:
        return UUID(raw)
    except (ValueError, TypeError, AttributeError):
        return None
