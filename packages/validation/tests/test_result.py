"""Tests for ValidationError and ValidationResult merge semantics."""

import itertools

import pytest

from fieldknobs_common import SerializationError
from fieldknobs_validation import ValidationError, ValidationResult


class TestValidationError:
    """Test ValidationError value semantics."""

    def test_equal_when_message_and_recovery_match(self):
        """Test equality and hashing by value."""
        first = ValidationError("Invalid Zip", recovery="Use five digits")
        second = ValidationError("Invalid Zip", recovery="Use five digits")

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_recovery_distinguishes_errors(self):
        """Test that a different recovery hint makes a different error."""
        assert ValidationError("Invalid Zip") != ValidationError("Invalid Zip", recovery="hint")

    def test_immutable(self):
        """Test that fields cannot be reassigned."""
        error = ValidationError("Invalid Name")
        with pytest.raises(AttributeError):
            error.message = "changed"

    def test_str(self):
        """Test the human-readable rendering."""
        assert str(ValidationError("Invalid SSN")) == "Invalid SSN"
        assert str(ValidationError("Invalid SSN", "Use 123-45-6789")) == "Invalid SSN (Use 123-45-6789)"

    def test_dict_conversion(self):
        """Test to_dict/from_dict."""
        error = ValidationError("Invalid Phone", recovery="Use 444-555-5745")
        data = error.to_dict()

        assert data == {"message": "Invalid Phone", "recovery": "Use 444-555-5745"}
        assert ValidationError.from_dict(data) == error
        assert ValidationError.from_dict({"message": "x"}) == ValidationError("x")

    def test_from_dict_requires_message(self):
        """Test deserializing without a message fails."""
        with pytest.raises(SerializationError):
            ValidationError.from_dict({"recovery": "retry"})


class TestValidationResult:
    """Test ValidationResult construction and accessors."""

    def test_success_result(self):
        """Test the valid result."""
        result = ValidationResult.success()
        assert result.is_valid is True
        assert result.errors is None
        assert result.messages == []
        assert bool(result) is True
        assert result == ValidationResult()

    def test_failure_result(self, name_error, ascii_error):
        """Test an invalid result."""
        result = ValidationResult.failure([name_error, ascii_error])
        assert result.is_valid is False
        assert result.errors == frozenset({name_error, ascii_error})
        assert result.messages == ["Invalid Name", "Unsupported character"]
        assert bool(result) is False

    def test_failure_collapses_duplicates(self, name_error):
        """Test that repeated identical errors collapse to one."""
        result = ValidationResult.failure([name_error, ValidationError("Invalid Name")])
        assert len(result.errors) == 1

    def test_failure_requires_errors(self):
        """Test that an invalid result cannot be empty."""
        with pytest.raises(ValueError):
            ValidationResult.failure([])

    def test_from_error(self, name_error):
        """Test the single-error constructor."""
        assert ValidationResult.from_error(name_error) == ValidationResult.failure([name_error])

    def test_errors_are_frozen(self, name_error):
        """Test that the error set handed out cannot be mutated."""
        result = ValidationResult.failure([name_error])
        assert isinstance(result.errors, frozenset)

    def test_equality_ignores_error_order(self, name_error, ascii_error):
        """Test that results compare as sets."""
        assert ValidationResult.failure([name_error, ascii_error]) == ValidationResult.failure(
            [ascii_error, name_error]
        )
        assert ValidationResult.success() != ValidationResult.failure([name_error])

    def test_to_dict_sorted(self, name_error, ascii_error):
        """Test dictionary output lists errors in stable order."""
        result = ValidationResult.failure([ascii_error, name_error])
        assert result.to_dict() == {
            "valid": False,
            "errors": [
                {"message": "Invalid Name", "recovery": None},
                {"message": "Unsupported character", "recovery": None},
            ],
        }
        assert ValidationResult.success().to_dict() == {"valid": True, "errors": []}

    def test_repr(self, name_error):
        """Test the debug representation."""
        assert repr(ValidationResult.success()) == "ValidationResult(valid)"
        assert "Invalid Name" in repr(ValidationResult.failure([name_error]))


class TestMerge:
    """Test the union-based merge operation."""

    def test_valid_merge_returns_other(self, name_error):
        """Test Valid.merge(x) == x."""
        invalid = ValidationResult.failure([name_error])
        assert ValidationResult.success().merge(invalid) == invalid
        assert ValidationResult.success().merge(ValidationResult.success()).is_valid

    def test_invalid_merge_valid_keeps_errors(self, name_error):
        """Test Invalid(E).merge(Valid) == Invalid(E)."""
        invalid = ValidationResult.failure([name_error])
        assert invalid.merge(ValidationResult.success()) == invalid

    def test_union_not_sum(self):
        """Test overlapping errors are counted once."""
        a, b, c = ValidationError("A"), ValidationError("B"), ValidationError("C")
        merged = ValidationResult.failure([a, b]).merge(ValidationResult.failure([b, c]))

        assert merged.errors == frozenset({a, b, c})
        assert len(merged.errors) == 3

    def test_merge_does_not_mutate(self):
        """Test that operands are unchanged by merging."""
        a, b = ValidationError("A"), ValidationError("B")
        left = ValidationResult.failure([a])
        right = ValidationResult.failure([b])

        left.merge(right)

        assert left.errors == frozenset({a})
        assert right.errors == frozenset({b})

    def test_or_operator(self):
        """Test that | is merge."""
        a, b = ValidationError("A"), ValidationError("B")
        left = ValidationResult.failure([a])
        right = ValidationResult.failure([b])
        assert (left | right) == left.merge(right)

    def test_identity(self, sample_results):
        """Test the valid result is a two-sided identity."""
        valid = ValidationResult.success()
        for result in sample_results:
            assert valid.merge(result) == result
            assert result.merge(valid) == result

    def test_commutative(self, sample_results):
        """Test r1.merge(r2) == r2.merge(r1)."""
        for r1, r2 in itertools.product(sample_results, repeat=2):
            assert r1.merge(r2) == r2.merge(r1)

    def test_associative(self, sample_results):
        """Test (r1.merge(r2)).merge(r3) == r1.merge(r2.merge(r3))."""
        for r1, r2, r3 in itertools.product(sample_results, repeat=3):
            assert r1.merge(r2).merge(r3) == r1.merge(r2.merge(r3))

    def test_idempotent(self, sample_results):
        """Test r.merge(r) == r."""
        for result in sample_results:
            assert result.merge(result) == result


class TestMergeAll:
    """Test folding sequences of results."""

    def test_empty_sequence_is_valid(self):
        """Test that merging nothing yields valid."""
        assert ValidationResult.merge_all([]).is_valid

    def test_all_valid_is_valid(self):
        """Test that merging only valid results yields valid."""
        assert ValidationResult.merge_all([ValidationResult.success()] * 3).is_valid

    def test_collects_every_error(self, sample_results):
        """Test that the fold is the union of all error sets."""
        merged = ValidationResult.merge_all(sample_results)
        assert merged.messages == ["A", "B", "C"]

    def test_order_independent(self, sample_results):
        """Test that any ordering gives the same verdict."""
        expected = ValidationResult.merge_all(sample_results)
        for ordering in itertools.permutations(sample_results):
            assert ValidationResult.merge_all(ordering) == expected

    def test_accepts_generators(self, name_error):
        """Test that any iterable can be folded."""
        merged = ValidationResult.merge_all(
            ValidationResult.from_error(name_error) for _ in range(3)
        )
        assert merged == ValidationResult.from_error(name_error)

    def test_merge_with_starts_from_self(self, name_error, ascii_error):
        """Test folding onto an existing result."""
        start = ValidationResult.from_error(name_error)
        merged = start.merge_with([ValidationResult.success(), ValidationResult.from_error(ascii_error)])

        assert merged.errors == frozenset({name_error, ascii_error})
        assert start.merge_with([]) == start
