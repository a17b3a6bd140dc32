"""Pytest configuration and fixtures for config package tests."""

import sys
from pathlib import Path

import pytest

# Add the package sources to path for testing
packages_root = Path(__file__).parent.parent.parent
for src_path in (packages_root / "config" / "src", packages_root / "common" / "src"):
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def validators_config_dict():
    """Sample validators configuration dictionary."""
    return {
        "validators": [
            {
                "name": "username",
                "rules": [
                    {"type": "non_ascii"},
                    {"type": "range_length", "min": 3, "max": "${USERNAME_MAX:20}"},
                ],
            },
            {"name": "contact_email", "extends": "email"},
        ]
    }
