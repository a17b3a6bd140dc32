"""Stock regular expressions used by the stock validators."""

from __future__ import annotations

from enum import Enum


class RegexPattern(str, Enum):
    """Named regular expressions with the error each one reports.

    Patterns are applied with a search, not a full match: only the anchors
    written into a pattern constrain where it may match. ``ZIP`` is anchored
    at the start only, so ``"100129999"`` passes; this is intentional.
    """

    PHONE = r"^[0-9]{3}-[0-9]{3}-[0-9]{4}$"
    PHONE_AREA_CODE_PARENTHESES = r"^\([0-9]{3}\) [0-9]{3}-[0-9]{4}$"
    EMAIL = r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"
    SSN = r"^[0-9]{3}-[0-9]{2}-[0-9]{4}$"
    ZIP = r"^[0-9]{5}"

    @property
    def error_description(self) -> str:
        return _ERROR_DESCRIPTIONS[self]

    @classmethod
    def from_name(cls, name: str) -> RegexPattern:
        """Look up a pattern by case-insensitive member name.

        Raises:
            KeyError: If no pattern has that name
        """
        return cls[name.upper()]


_ERROR_DESCRIPTIONS = {
    RegexPattern.PHONE: "Invalid Phone",
    RegexPattern.PHONE_AREA_CODE_PARENTHESES: "Invalid Phone",
    RegexPattern.EMAIL: "Invalid Email",
    RegexPattern.SSN: "Invalid SSN",
    RegexPattern.ZIP: "Invalid Zip",
}
