"""Normalization helpers shared by the field validators."""

from __future__ import annotations

import re

_NON_DIGIT = re.compile(r"[^0-9]")


def is_not_empty(value: str | None) -> bool:
    """True for a string with something other than whitespace in it."""
    return isinstance(value, str) and value.strip() != ""


def digits_only(value: str | None) -> str:
    """Drop every character that is not an ASCII digit."""
    if not value:
        return ""
    return _NON_DIGIT.sub("", value)


def email_domain(email: str | None) -> str:
    """Return the part after the last '@', or '' when there is none."""
    if not email or "@" not in email:
        return ""
    return email.rsplit("@", 1)[1]
