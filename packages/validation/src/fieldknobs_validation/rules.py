"""Rule implementations with a consistent, single-error contract.

Every rule is a total function from a string to a ``ValidationResult``:
it never raises for any input, and on failure it reports exactly its own
``validation_error``.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping

from .error import ValidationError
from .lookups import US_STATES
from .patterns import RegexPattern
from .result import ValidationResult


class ValidationRule(ABC):
    """Base class for all rules.

    Attributes:
        priority: Evaluation order within a validator; higher runs first
        validation_error: Error reported when the rule fails
    """

    default_error = ValidationError("Validation failed")

    def __init__(self, priority: int = 0, validation_error: ValidationError | None = None):
        """Initialize the rule.

        Args:
            priority: Evaluation priority (higher is evaluated first)
            validation_error: Override for the rule's default error
        """
        self.priority = priority
        if validation_error is None:
            validation_error = self._default_error()
        self.validation_error = validation_error

    def _default_error(self) -> ValidationError:
        return self.default_error

    @abstractmethod
    def is_satisfied_by(self, value: str) -> bool:
        """Return True if ``value`` passes this rule."""

    def validate(self, value: str) -> ValidationResult:
        """Validate a value against this rule.

        Args:
            value: Input string

        Returns:
            The valid result, or an invalid result holding ``validation_error``
        """
        if self.is_satisfied_by(value):
            return ValidationResult.success()
        return ValidationResult.from_error(self.validation_error)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(priority={self.priority})"


class NonAsciiRule(ValidationRule):
    """Rejects values that contain non-ASCII characters.

    Leading and trailing whitespace is ignored, so a trailing non-breaking
    space does not fail the rule.
    """

    default_error = ValidationError("Unsupported character")

    def is_satisfied_by(self, value: str) -> bool:
        return value.strip().isascii()


class NonEmptyRule(ValidationRule):
    """Value must not be the empty string."""

    default_error = ValidationError("Must not be empty")

    def is_satisfied_by(self, value: str) -> bool:
        return value != ""


class LengthRule(ValidationRule):
    """Value must have exactly ``length`` characters.

    Characters are code points, so a letter followed by a combining accent
    (NFD form) counts as two.
    """

    def __init__(
        self,
        length: int,
        priority: int = 0,
        validation_error: ValidationError | None = None,
    ):
        self.length = length
        super().__init__(priority, validation_error)

    def _default_error(self) -> ValidationError:
        return ValidationError(f"Must be equal to {self.length}")

    def is_satisfied_by(self, value: str) -> bool:
        return len(value) == self.length


class RangeLengthRule(ValidationRule):
    """Value length must be within ``min``..``max``, both inclusive.

    Length is counted in code points, as in ``LengthRule``.
    """

    def __init__(
        self,
        min: int,
        max: int,
        priority: int = 0,
        validation_error: ValidationError | None = None,
    ):
        self.min = min
        self.max = max
        super().__init__(priority, validation_error)

    def _default_error(self) -> ValidationError:
        return ValidationError(f"Must be between {self.min} {self.max}")

    def is_satisfied_by(self, value: str) -> bool:
        return self.min <= len(value) <= self.max


class FullNameRule(ValidationRule):
    """Value must hold at least two space-separated names of two or more characters.

    Runs of spaces count as one separator. Single-word names always fail.
    """

    default_error = ValidationError("Invalid Name")

    def is_satisfied_by(self, value: str) -> bool:
        names = [name for name in value.split(" ") if name]
        return len(names) > 1 and all(len(name) > 1 for name in names)


class RegexRule(ValidationRule):
    """Value must contain a match for a regular expression.

    The pattern is searched for anywhere in the value; use ``^``/``$`` in the
    pattern itself to anchor it. Stock ``RegexPattern`` members bring their
    own error message.
    """

    def __init__(
        self,
        pattern: RegexPattern | str,
        priority: int = 0,
        validation_error: ValidationError | None = None,
    ):
        """Initialize pattern rule.

        Args:
            pattern: Stock pattern or a regex string
            priority: Evaluation priority
            validation_error: Error to report; defaults to the stock pattern's
                description, or a generic message for plain strings

        Raises:
            re.error: If the pattern does not compile
        """
        if isinstance(pattern, RegexPattern):
            self.pattern_str = pattern.value
            self.stock_pattern: RegexPattern | None = pattern
        else:
            self.pattern_str = pattern
            self.stock_pattern = None
        self.regex = re.compile(self.pattern_str)
        super().__init__(priority, validation_error)

    def _default_error(self) -> ValidationError:
        if self.stock_pattern is not None:
            return ValidationError(self.stock_pattern.error_description)
        return ValidationError(f"Must match pattern '{self.pattern_str}'")

    def is_satisfied_by(self, value: str) -> bool:
        return self.regex.search(value) is not None

    def __repr__(self) -> str:
        return f"RegexRule({self.pattern_str!r}, priority={self.priority})"


class MembershipRule(ValidationRule):
    """Value must equal one of the values of a fixed lookup table.

    Only the value side of the mapping is accepted: with a state table,
    ``"NY"`` passes and ``"New York"`` does not.
    """

    default_error = ValidationError("Invalid Value")

    def __init__(
        self,
        lookup: Mapping[str, str],
        priority: int = 0,
        validation_error: ValidationError | None = None,
    ):
        self.lookup = lookup
        self.allowed = frozenset(lookup.values())
        super().__init__(priority, validation_error)

    def is_satisfied_by(self, value: str) -> bool:
        return value in self.allowed


class StateRule(MembershipRule):
    """Value must be a US state, district or territory abbreviation."""

    default_error = ValidationError("Invalid State")

    def __init__(
        self,
        lookup: Mapping[str, str] = US_STATES,
        priority: int = 0,
        validation_error: ValidationError | None = None,
    ):
        super().__init__(lookup, priority, validation_error)


class AlwaysValidRule(ValidationRule):
    """Passes every value."""

    default_error = ValidationError("")

    def is_satisfied_by(self, value: str) -> bool:
        return True
