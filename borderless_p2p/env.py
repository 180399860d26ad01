"""Contract environment: persistent storage, addresses and value checks."""

from __future__ import annotations

import hashlib
import itertools
from dataclasses import dataclass, field
from typing import Any

I128_MIN = -(2**127)
I128_MAX = 2**127 - 1


@dataclass(frozen=True, order=True)
class Address:
    """An account or contract address, compared by its identifier."""

    value: str

    def __str__(self) -> str:
        return self.value


_env_ids = itertools.count(1)


@dataclass
class Env:
    """Execution environment holding the contract's persistent storage."""

    _storage: dict[str, Any] = field(default_factory=dict, repr=False)
    _env_id: int = field(default_factory=lambda: next(_env_ids), repr=False)
    _address_counter: itertools.count = field(
        default_factory=lambda: itertools.count(1), repr=False
    )

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default`` if absent."""
        return self._storage.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        self._storage[key] = value

    def generate_address(self) -> Address:
        """Create a fresh address that is unique across environments."""
        seed = f"{self._env_id}:{next(self._address_counter)}".encode()
        digest = hashlib.sha256(seed).hexdigest().upper()
        return Address("G" + digest[:55])


def fixed_bytes(value: bytes | bytearray | memoryview, size: int) -> bytes:
    """Return ``value`` as immutable bytes, requiring exactly ``size`` bytes."""
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected bytes of length {size}, got {type(value).__name__}")
    data = bytes(value)
    if len(data) != size:
        raise ValueError(f"expected {size} bytes, got {len(data)}")
    return data


def check_i128(value: int) -> int:
    """Return ``value`` if it is an integer that fits in a signed 128-bit range."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if not I128_MIN <= value <= I128_MAX:
        raise OverflowError(f"{value} does not fit in a signed 128-bit integer")
    return value


def check_address(value: Any) -> Address:
    """Return ``value`` if it is an :class:`Address`."""
    if not isinstance(value, Address):
        raise TypeError(f"expected an Address, got {type(value).__name__}")
    return value