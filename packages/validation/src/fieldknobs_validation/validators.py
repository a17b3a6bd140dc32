"""Stock validators for common user-entered fields.

Each validator rejects non-ASCII input (priority 0) and applies one
field-specific rule (priority 1).
"""

from __future__ import annotations

from enum import Enum

from .patterns import RegexPattern
from .rules import (
    AlwaysValidRule,
    FullNameRule,
    LengthRule,
    NonAsciiRule,
    RangeLengthRule,
    RegexRule,
    StateRule,
    ValidationRule,
)
from .validator import Validator


class AlwaysValidValidator(Validator):
    """Accepts everything; a placeholder for fields with no constraints."""

    name = "always_valid"

    def build_rules(self) -> list[ValidationRule]:
        return [AlwaysValidRule(priority=0)]


class BaseValidator(Validator):
    """Accepts any ASCII text."""

    name = "base"

    def build_rules(self) -> list[ValidationRule]:
        return [NonAsciiRule(priority=0)]


class EmailValidator(Validator):
    name = "email"

    def build_rules(self) -> list[ValidationRule]:
        return [
            NonAsciiRule(priority=0),
            RegexRule(RegexPattern.EMAIL, priority=1),
        ]


class FullNameValidator(Validator):
    """First and last name, e.g. ``"Patrick Smith"``."""

    name = "full_name"

    def build_rules(self) -> list[ValidationRule]:
        return [
            NonAsciiRule(priority=0),
            FullNameRule(priority=1),
        ]


class PhoneStyle(Enum):
    """Accepted US phone number layouts."""

    HYPHENS = "hyphens"
    AREA_CODE_PARENTHESES = "area_code_parentheses"

    @property
    def pattern(self) -> RegexPattern:
        if self is PhoneStyle.AREA_CODE_PARENTHESES:
            return RegexPattern.PHONE_AREA_CODE_PARENTHESES
        return RegexPattern.PHONE


class PhoneValidator(Validator):
    """US phone number in ``444-555-5745`` or ``(444) 555-5745`` form."""

    name = "phone"

    def __init__(self, style: PhoneStyle = PhoneStyle.HYPHENS):
        self.style = style
        if style is PhoneStyle.AREA_CODE_PARENTHESES:
            self.name = "phone_area_code_parentheses"
        super().__init__()

    def build_rules(self) -> list[ValidationRule]:
        return [
            NonAsciiRule(priority=0),
            RegexRule(self.style.pattern, priority=1),
        ]


class SSNValidator(Validator):
    name = "ssn"

    def build_rules(self) -> list[ValidationRule]:
        return [
            NonAsciiRule(priority=0),
            RegexRule(RegexPattern.SSN, priority=1),
        ]


class LastFourSSNValidator(Validator):
    name = "last_four_ssn"

    def build_rules(self) -> list[ValidationRule]:
        return [
            NonAsciiRule(priority=0),
            LengthRule(4, priority=1),
        ]


class ZipValidator(Validator):
    """Five-digit ZIP code.

    Only the first five characters are checked, so ZIP+4 written without a
    hyphen (``"100129999"``) is accepted.
    """

    name = "zip"

    def build_rules(self) -> list[ValidationRule]:
        return [
            NonAsciiRule(priority=0),
            RegexRule(RegexPattern.ZIP, priority=1),
        ]


class StateValidator(Validator):
    """Two-letter US state abbreviation such as ``"NY"``."""

    name = "state"

    def build_rules(self) -> list[ValidationRule]:
        return [
            NonAsciiRule(priority=0),
            StateRule(priority=1),
        ]


class CCVValidator(Validator):
    """Card verification value: three or four characters."""

    name = "ccv"

    def build_rules(self) -> list[ValidationRule]:
        return [
            NonAsciiRule(priority=0),
            RangeLengthRule(3, 4, priority=1),
        ]


STOCK_VALIDATORS: dict[str, type[Validator]] = {
    cls.name: cls
    for cls in (
        AlwaysValidValidator,
        BaseValidator,
        EmailValidator,
        FullNameValidator,
        PhoneValidator,
        SSNValidator,
        LastFourSSNValidator,
        ZipValidator,
        StateValidator,
        CCVValidator,
    )
}


def create_stock_validator(name: str) -> Validator:
    """Instantiate a stock validator by name.

    ``phone_area_code_parentheses`` selects the parenthesized phone style.

    Raises:
        KeyError: If ``name`` is not a stock validator
    """
    if name == "phone_area_code_parentheses":
        return PhoneValidator(PhoneStyle.AREA_CODE_PARENTHESES)
    return STOCK_VALIDATORS[name]()


def stock_validator_names() -> list[str]:
    """Names accepted by ``create_stock_validator``."""
    return [*STOCK_VALIDATORS, "phone_area_code_parentheses"]
