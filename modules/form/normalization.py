"""Normalization utilities for the form."""

from __future__ import annotations

import re
from typing import Any

_NON_DIGIT_RE = re.compile(r"\D+")
_AREA_CODE_RE = re.compile(r"^(\d{2})(\d)")
_SUFFIX_RE = re.compile(r"(\d{5})(\d{1,4})$")

PHONE_MASK_LENGTH = len("(DD) DDDDD-DDDD")


def only_digits(value: Any) -> str:
    """Return only the digits of ``value``."""

    return _NON_DIGIT_RE.sub("", str(value or ""))


def mask_phone(value: Any) -> str:
    """Apply the ``(DD) DDDDD-DDDD`` mask progressively while the user types.

    >>> mask_phone("11987654321")
    '(11) 98765-4321'
    >>> mask_phone("119")
    '(11) 9'
    """

    digits = only_digits(value)
    masked = _AREA_CODE_RE.sub(r"(\1) \2", digits, count=1)
    masked = _SUFFIX_RE.sub(r"\1-\2", masked, count=1)
    return masked[:PHONE_MASK_LENGTH]
