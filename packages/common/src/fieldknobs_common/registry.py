"""Named lookup table shared by fieldknobs packages.

The validation package builds its ``ValidatorRegistry`` on top of this class
to map names such as ``"email"`` or ``"zip"`` to ready-to-use validators.
"""

import threading
from typing import Dict, Generic, List, TypeVar

from fieldknobs_common.exceptions import NotFoundError, OperationError

T = TypeVar("T")


class Registry(Generic[T]):
    """Thread-safe mapping of unique names to items, kept in registration order.

    Example:
        ```python
        registry = Registry[str]("patterns")
        registry.register("zip", "^[0-9]{5}")
        registry.get("zip")
        # '^[0-9]{5}'
        ```
    """

    def __init__(self, name: str):
        self._name = name
        self._entries: Dict[str, T] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self._name

    def register(self, key: str, item: T, allow_overwrite: bool = False) -> None:
        """Store ``item`` under ``key``.

        Raises:
            OperationError: If ``key`` is taken and ``allow_overwrite`` is False
        """
        with self._lock:
            if key in self._entries and not allow_overwrite:
                raise OperationError(
                    f"Item '{key}' already registered in {self._name}",
                    context={"key": key, "registry": self._name},
                )
            self._entries[key] = item

    def get(self, key: str) -> T:
        """Return the item stored under ``key``.

        Raises:
            NotFoundError: If nothing is registered under ``key``; the error
                context lists the registered keys
        """
        with self._lock:
            try:
                return self._entries[key]
            except KeyError:
                raise NotFoundError(
                    f"Item not found: {key}",
                    context={"key": key, "registry": self._name, "available_keys": list(self._entries)},
                ) from None

    def list_keys(self) -> List[str]:
        with self._lock:
            return list(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, keys={self.list_keys()!r})"
