"""
Utility functions for BotCafe request handling.
"""

from typing import Any

from botcafe.exceptions import BadRequest

# Largest id a signed 64-bit INTEGER column can hold
MAX_ID = 2 ** 63 - 1


def coerce_id(value: Any, label: str = 'ID') -> int:
    """
    Parse a record identifier from a path or body value.

    Args:
        value: Raw identifier (int or numeric string)
        label: Name used in the error message, e.g. 'Bot ID'

    Returns:
        Positive integer id

    Raises:
        BadRequest: if the value is blank, not a positive integer, or
            too large for an integer column
    """
    if value is None or isinstance(value, bool):
        raise BadRequest(f'{label} is required')
    if isinstance(value, int):
        parsed = value
    else:
        text = str(value).strip()
        if not text:
            raise BadRequest(f'{label} is required')
        if not text.isdecimal():
            raise BadRequest(f'Invalid {label}')
        parsed = int(text)
    if parsed <= 0 or parsed > MAX_ID:
        raise BadRequest(f'Invalid {label}')
    return parsed


def equals(**fields) -> dict:
    """Build an ``and`` filter of equality conditions."""
    return {'and': [{field: {'equals': value}} for field, value in fields.items()]}
