"""Input checks shared by registration and login."""

import re
from typing import Any

MIN_PASSWORD_LENGTH = 6

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# Optional leading +, first digit 1-9, then 1 to 14 more digits.
_PHONE_RE = re.compile(r"\+?[1-9]\d{1,14}", re.ASCII)
_NON_DIGITS_RE = re.compile(r"\D", re.ASCII)


def is_blank(value: Any) -> bool:
    """Missing, empty, whitespace-only, or not text at all."""
    return not isinstance(value, str) or not value.strip()


def is_valid_email(email: str) -> bool:
    return _EMAIL_RE.fullmatch(email) is not None


def is_valid_phone(phone: str) -> bool:
    """Check a phone number after dropping every non-digit character.

    Only ASCII digits count. Separators such as spaces, dashes and
    parentheses are tolerated; the stored value is still the one the
    caller supplied.
    """
    return _PHONE_RE.fullmatch(_NON_DIGITS_RE.sub("", phone)) is not None


def is_long_enough(password: str) -> bool:
    return len(password) >= MIN_PASSWORD_LENGTH
