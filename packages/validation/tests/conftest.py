"""Pytest configuration for fieldknobs_validation tests."""

import sys
from pathlib import Path

import pytest

# Add the package sources to path for testing
packages_root = Path(__file__).parent.parent.parent
for package in ("validation", "config", "common"):
    src_path = packages_root / package / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))

from fieldknobs_validation import ValidationError, ValidationResult  # noqa: E402


@pytest.fixture
def name_error():
    return ValidationError("Invalid Name")


@pytest.fixture
def ascii_error():
    return ValidationError("Unsupported character")


@pytest.fixture
def sample_results():
    """A small spread of results covering valid, single, and overlapping errors."""
    a = ValidationError("A")
    b = ValidationError("B", recovery="try b")
    c = ValidationError("C")
    return [
        ValidationResult.success(),
        ValidationResult.failure([a]),
        ValidationResult.failure([a, b]),
        ValidationResult.failure([b, c]),
        ValidationResult.failure([c]),
    ]
