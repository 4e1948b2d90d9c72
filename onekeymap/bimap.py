"""A bidirectional one-to-one mapping."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterator, Mapping, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V", bound=Hashable)


class BiMap(Generic[K, V]):
    """A mapping that can be looked up by key or by value."""

    def __init__(self, mapping: Optional[Mapping[K, V]] = None) -> None:
        self._forward: Dict[K, V] = {}
        self._inverse: Dict[V, K] = {}
        for key, value in (mapping or {}).items():
            self.insert(key, value)

    def insert(self, key: K, value: V) -> None:
        """Map ``key`` to ``value``, dropping the reverse entry of any old value."""
        if key in self._forward:
            del self._inverse[self._forward[key]]
        self._forward[key] = value
        self._inverse[value] = key

    def exists(self, key: K) -> bool:
        return key in self._forward

    def exists_inverse(self, value: V) -> bool:
        return value in self._inverse

    def get(self, key: K) -> Optional[V]:
        """Return the value for ``key``, or None when absent."""
        return self._forward.get(key)

    def get_inverse(self, value: V) -> Optional[K]:
        """Return the key for ``value``, or None when absent."""
        return self._inverse.get(value)

    def __contains__(self, key: object) -> bool:
        return key in self._forward

    def __len__(self) -> int:
        return len(self._forward)

    def __iter__(self) -> Iterator[K]:
        return iter(self._forward)