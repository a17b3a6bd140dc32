"""Validation outcome with union-based merging.

A ``ValidationResult`` is either valid (no errors) or invalid (a non-empty
set of ``ValidationError``). Results form a join semilattice under ``merge``:
the valid result is the identity, and two invalid results combine by set
union. Because the operation is associative and commutative, folding any
sequence of results gives the same verdict regardless of order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce
from typing import Any

from .error import ValidationError


@dataclass(frozen=True)
class ValidationResult:
    """Unified, immutable result of validating one value.

    ``errors`` is ``None`` for a valid result and a non-empty ``frozenset``
    otherwise. Use the ``success``/``failure`` constructors rather than
    building instances directly.
    """

    errors: frozenset[ValidationError] | None = None

    def __post_init__(self) -> None:
        if self.errors is None:
            return
        errors = frozenset(self.errors)
        if not errors:
            raise ValueError("An invalid result requires at least one error")
        object.__setattr__(self, "errors", errors)

    @property
    def is_valid(self) -> bool:
        """True iff this is the valid result."""
        return self.errors is None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.is_valid

    @property
    def messages(self) -> list[str]:
        """Sorted error messages (empty when valid)."""
        if self.errors is None:
            return []
        return sorted(error.message for error in self.errors)

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Combine with another result.

        valid + x is x, and invalid + invalid is the union of both error
        sets. Neither operand is modified.

        Args:
            other: Another ValidationResult to merge with this one

        Returns:
            Combined ValidationResult
        """
        if self.errors is None:
            return other
        if other.errors is None:
            return self
        return ValidationResult(self.errors | other.errors)

    def __or__(self, other: ValidationResult) -> ValidationResult:
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return self.merge(other)

    def merge_with(self, results: Iterable[ValidationResult]) -> ValidationResult:
        """Fold ``results`` into this result, left to right."""
        return reduce(ValidationResult.merge, results, self)

    @classmethod
    def merge_all(cls, results: Iterable[ValidationResult]) -> ValidationResult:
        """Fold a sequence of results starting from the valid result.

        An empty sequence, or one made only of valid results, yields the
        valid result.
        """
        return cls.success().merge_with(results)

    @classmethod
    def success(cls) -> ValidationResult:
        """Create the valid result."""
        return cls()

    @classmethod
    def failure(cls, errors: Iterable[ValidationError]) -> ValidationResult:
        """Create an invalid result.

        Args:
            errors: One or more errors; duplicates collapse

        Raises:
            ValueError: If ``errors`` is empty
        """
        return cls(frozenset(errors))

    @classmethod
    def from_error(cls, error: ValidationError) -> ValidationResult:
        """Create an invalid result carrying a single error."""
        return cls(frozenset((error,)))

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary with errors in stable order."""
        errors = sorted(self.errors or (), key=ValidationError.sort_key)
        return {
            "valid": self.is_valid,
            "errors": [error.to_dict() for error in errors],
        }

    def __repr__(self) -> str:
        if self.errors is None:
            return "ValidationResult(valid)"
        return f"ValidationResult(invalid, errors={self.messages!r})"
