"""Domain identifiers.

Every aggregate carries a string domain id, generated on creation and
stable across saves. Repositories look entities up by this id.
"""

from __future__ import annotations

import uuid


def generate_id() -> str:
    """Generate a new domain id."""
    return str(uuid.uuid4())


def is_valid_id(value: str) -> bool:
    """Check if a string parses as a domain id."""
    if not isinstance(value, str):
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True
