"""Validators — pure predicates over raw request values.

Invariants:
    - Total functions: never raise, whatever the input type
    - None is the absence marker; 0 and False count as present

Design Decisions:
    - is_email is a permissive shape check (x@y.z anywhere in the string),
      not RFC 5322. Unanchored search, same as the frontend check.
"""

import re
from typing import Any

_EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


def is_email(value: Any) -> bool:
    """True when value is a string containing an email-shaped token."""
    if not isinstance(value, str):
        return False
    return _EMAIL_PATTERN.search(value) is not None


def is_required(value: Any) -> bool:
    """True unless value is None or the empty string."""
    if value is None:
        return False
    return not (isinstance(value, str) and value == "")


def min_length(value: Any, length: int) -> bool:
    """True when value is a str of at least `length` characters."""
    return isinstance(value, str) and len(value) >= length
