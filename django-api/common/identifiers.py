"""Opaque identifier shape shared by every entity id."""

import re
from uuid import UUID

UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def parse_uuid(value: str | UUID) -> UUID:
    """Parse a canonical hyphenated UUID string.

    Raises:
        ValueError: If the value does not have the 8-4-4-4-12 hex shape.
    """
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str) or not UUID_PATTERN.fullmatch(value):
        raise ValueError(f"Malformed identifier: {value!r}")
    return UUID(value)


def is_valid_uuid(value: object) -> bool:
    return isinstance(value, str) and UUID_PATTERN.fullmatch(value) is not None
