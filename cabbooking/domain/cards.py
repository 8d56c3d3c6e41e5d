"""Credit-card number helpers: normalisation, shape check and masking."""

from __future__ import annotations

import re
from typing import Optional

_SEPARATORS = re.compile(r"[\s-]")

MIN_CARD_DIGITS = 13
MAX_CARD_DIGITS = 19


def normalize_card_number(card_number: str) -> str:
    """Strip spaces and dashes so differently formatted numbers compare equal."""
    return _SEPARATORS.sub("", card_number)


def is_valid_card_format(
    card_number: Optional[str],
    min_digits: int = MIN_CARD_DIGITS,
    max_digits: int = MAX_CARD_DIGITS,
) -> bool:
    if not card_number or not card_number.strip():
        return False
    digits = normalize_card_number(card_number)
    return digits.isdigit() and min_digits <= len(digits) <= max_digits


def mask_card_number(card_number: Optional[str]) -> str:
    """Return ``****`` followed by the last four digits, or just ``****``."""
    if not card_number:
        return "****"
    digits = normalize_card_number(card_number)
    if len(digits) < 4:
        return "****"
    return "****" + digits[-4:]
