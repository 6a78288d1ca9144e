from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

# Max length per string field, mirrors the column sizes of users/student_profiles
STUDENT_FIELD_LIMITS: dict[str, int] = {
    "name": 100,
    "email": 100,
    "gender": 10,
    "phone": 20,
    "class": 50,
    "section": 50,
    "currentAddress": 50,
    "permanentAddress": 50,
    "fatherName": 50,
    "fatherPhone": 20,
    "motherName": 50,
    "motherPhone": 20,
    "guardianName": 50,
    "guardianPhone": 20,
    "relationOfGuardian": 30,
}


_DECIMAL = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")
_PREFIXED_INT = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_RADIX = {"x": 16, "o": 8, "b": 2}


def truncate(value: Any, max_length: int) -> Any:
    if not isinstance(value, str):
        return value
    return value[:max_length] if len(value) > max_length else value


def normalize_student_payload(body: Mapping[str, Any] | None) -> dict[str, Any]:
    """Cuts every known string field to its column size.

    Unknown keys and non-string values are kept as they are. Known fields
    missing from the body are present in the result as None.
    """
    b = dict(body or {})
    for field, max_length in STUDENT_FIELD_LIMITS.items():
        b[field] = truncate(b.get(field), max_length)
    return b


def parse_roll(raw: str | None) -> int | float | None:
    """Query string roll to a number; blank or non-finite text means no filter.

    Accepts plain decimals with an optional exponent and unsigned 0x/0o/0b
    literals. Digit separators, "inf" and "nan" spellings are rejected.
    """
    if not isinstance(raw, str) or raw.strip() == "":
        return None
    text = raw.strip()
    prefixed = _PREFIXED_INT.match(text)
    if prefixed:
        return int(text[2:], _RADIX[text[1].lower()])
    if not _DECIMAL.match(text):
        return None
    roll = float(text)
    if not math.isfinite(roll):
        return None
    return int(roll) if roll.is_integer() else roll
