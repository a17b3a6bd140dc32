"""Failure descriptor reported by validation rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fieldknobs_common import SerializationError


@dataclass(frozen=True)
class ValidationError:
    """Immutable description of why a value failed a rule.

    Two errors are interchangeable (equal, same hash) when both the message
    and the recovery hint match, so identical failures reported by different
    rules collapse to one inside a ``ValidationResult``.

    This is a value, not an exception: it is never raised.
    """

    message: str
    recovery: str | None = None

    def __str__(self) -> str:
        if self.recovery:
            return f"{self.message} ({self.recovery})"
        return self.message

    def sort_key(self) -> tuple[str, str]:
        """Key giving a stable display order for error collections."""
        return (self.message, self.recovery or "")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {"message": self.message, "recovery": self.recovery}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValidationError:
        """Create from a dictionary produced by ``to_dict``.

        Raises:
            SerializationError: If ``message`` is missing
        """
        if "message" not in data:
            raise SerializationError(
                "Cannot deserialize validation error without a message",
                context={"data": data},
            )
        return cls(message=data["message"], recovery=data.get("recovery"))
