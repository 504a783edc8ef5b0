"""
Item field validation and id generation.
"""

from __future__ import annotations

import re
import secrets
import string

# Accepted shapes, ASCII digits only. Separators may not be mixed.
_PHONE_PATTERNS = (
    re.compile(r"\(([0-9]{3})\) ([0-9]{3})-([0-9]{4})"),
    re.compile(r"([0-9]{3})-([0-9]{3})-([0-9]{4})"),
    re.compile(r"([0-9]{3})\.([0-9]{3})\.([0-9]{4})"),
    re.compile(r"([0-9]{3}) ([0-9]{3}) ([0-9]{4})"),
    re.compile(r"([0-9]{3})([0-9]{3})([0-9]{4})"),
)

_ID_ALPHABET = string.ascii_letters + string.digits


class ItemValidationError(ValueError):
    pass


def require_field(value: str | None, field_name: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ItemValidationError(f"{field_name} is required.")
    return value


def normalize_phone_number(phone_number: str) -> str:
    """
    Return `phone_number` formatted as `(NNN) NNN-NNNN`.
    """
    value = (phone_number or "").strip()
    for pattern in _PHONE_PATTERNS:
        match = pattern.fullmatch(value)
        if match is not None:
            area, exchange, line = match.groups()
            return f"({area}) {exchange}-{line}"
    raise ItemValidationError(f"Invalid phone number: {phone_number!r}")


def generate_item_id(length: int = 10) -> str:
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))
