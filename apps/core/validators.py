"""
Field validators for loan applications.

Each predicate is total: malformed input (including the empty string
or a non-string value) returns False instead of raising.
"""

import re

EMAIL_PATTERN = re.compile(r'[^\s@]+@[^\s@]+\.[^\s@]+')
PAN_PATTERN = re.compile(r'[A-Z]{5}[0-9]{4}[A-Z]')
FULL_NAME_PATTERN = re.compile(r'[A-Za-z\s]+')
AMOUNT_PATTERN = re.compile(r'[0-9]+')

MIN_NAME_WORDS = 2
MIN_NAME_WORD_LENGTH = 4
MAX_AMOUNT_DIGITS = 9


def is_valid_email(email) -> bool:
    """Minimal structural check: local@domain.tld with no spaces."""
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_pan(pan) -> bool:
    """
    Check a PAN in the fixed ABCDE1234F layout.

    Case-sensitive: callers upper-case the value before checking.
    """
    if not isinstance(pan, str):
        return False
    return PAN_PATTERN.fullmatch(pan) is not None


def is_valid_full_name(name) -> bool:
    """
    Letters and whitespace only, at least two words, each word
    at least four characters long.
    """
    if not isinstance(name, str) or not FULL_NAME_PATTERN.fullmatch(name):
        return False
    parts = name.split()
    if len(parts) < MIN_NAME_WORDS:
        return False
    return all(len(part) >= MIN_NAME_WORD_LENGTH for part in parts)


def is_valid_amount(amount) -> bool:
    """Digits only, no sign or decimal point, at most nine digits."""
    if not isinstance(amount, str) or not AMOUNT_PATTERN.fullmatch(amount):
        return False
    return len(amount) <= MAX_AMOUNT_DIGITS
