"""String predicates shared across modules."""

from __future__ import annotations

import uuid

_NIL_OR_MAX = (0, (1 << 128) - 1)


def is_valid_uuid(value: str) -> bool:
    """Return ``True`` when ``value`` is a canonical, hyphenated RFC UUID string.

    The version nibble must be 1-8 and the variant must be RFC 4122, except
    for the nil and max UUIDs which are accepted as-is.  Compact hex
    (``"1234abcd..."``), braces and ``urn:uuid:`` prefixes are rejected so
    that slugs made of 32 hex characters are never mistaken for identifiers.
    """
    if not isinstance(value, str):
        return False
    try:
        parsed = uuid.UUID(value)
    except ValueError:
        return False
    if str(parsed) != value.lower():
        return False
    if parsed.int in _NIL_OR_MAX:
        return True
    return parsed.variant == uuid.RFC_4122 and 1 <= parsed.version <= 8
