"""Hash-backed multi-map.

``MultiMap`` keeps, for every key, a non-empty list of values in insertion
order. Keys must be hashable; values only need equality.

Iteration runs over a snapshot taken when the iterator is created: mutating
the map while an iterator is alive is allowed, is not seen by that iterator,
and the iterator never writes to the map. There is no locking; sharing a map
between threads is up to the caller.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator, KeysView, Mapping
from dataclasses import dataclass, field
from typing import Generic, Self

from multivaluedict.errors import MultiMapKeyError, MultiMapValueError
from multivaluedict.protocols import HashableKeyType, ValueType
from multivaluedict.utils import flatten, index_of

logger = logging.getLogger(__name__)


@dataclass
class MultiMapIterator(Iterator[tuple[HashableKeyType, ValueType]], Generic[HashableKeyType, ValueType]):
    remaining: dict[HashableKeyType, deque[ValueType]]

    _pending_keys: deque[HashableKeyType] = field(init=False)

    def __post_init__(self) -> None:
        self.remaining = {key: values for key, values in self.remaining.items() if values}
        self._pending_keys = deque(self.remaining)

    @classmethod
    def from_mapping(cls, mapping: Mapping[HashableKeyType, list[ValueType]]) -> Self:
        return cls({key: deque(values) for key, values in mapping.items()})

    def __next__(self) -> tuple[HashableKeyType, ValueType]:
        if not self._pending_keys:
            raise StopIteration()

        key = self._pending_keys[0]
        values = self.remaining[key]
        value = values.popleft()
        if not values:
            del self.remaining[key]
            self._pending_keys.popleft()
        return key, value

    def __length_hint__(self) -> int:
        return sum(len(values) for values in self.remaining.values())


@dataclass
class MultiMap(Generic[HashableKeyType, ValueType]):
    mapping: dict[HashableKeyType, list[ValueType]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.mapping = self._build_mapping((key, list(values)) for key, values in self.mapping.items() if values)

    @staticmethod
    def _build_mapping(
        items: Iterable[tuple[HashableKeyType, list[ValueType]]],
    ) -> dict[HashableKeyType, list[ValueType]]:
        return dict(items)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[HashableKeyType, ValueType]]) -> Self:
        multi_map = cls()
        for key, value in pairs:
            multi_map.add(key, value)
        return multi_map

    def add(self, key: HashableKeyType, value: ValueType) -> bool:
        if (values := self.mapping.get(key)) is not None:
            values.append(value)
        else:
            self.mapping[key] = [value]
        return True

    def add_multiple(self, key: HashableKeyType, values: Iterable[ValueType]) -> bool:
        for value in values:
            self.add(key, value)
        return True

    def get_values(self, key: HashableKeyType) -> tuple[ValueType, ...] | None:
        if (values := self.mapping.get(key)) is None:
            return None
        return tuple(values)

    def remove_one(self, key: HashableKeyType, value: ValueType) -> tuple[HashableKeyType, ValueType] | None:
        if (values := self.mapping.get(key)) is None:
            return None

        if (index := index_of(values, value)) is None:
            return None

        removed = values.pop(index)
        if not values:
            self._drop_key(key)
        return key, removed

    def remove_all(self, key: HashableKeyType) -> tuple[ValueType, ...] | None:
        if key not in self.mapping:
            return None
        values = self.mapping[key]
        self._drop_key(key)
        return tuple(values)

    def remove(self, key: HashableKeyType, value: ValueType) -> None:
        if key not in self.mapping:
            raise MultiMapKeyError(key)
        if self.remove_one(key, value) is None:
            raise MultiMapValueError(key, value)

    def contains(self, key: HashableKeyType, value: ValueType) -> bool:
        return index_of(self.mapping.get(key, []), value) is not None

    def count_values(self, key: HashableKeyType) -> int:
        return len(self.mapping.get(key, []))

    def items(self) -> Iterator[tuple[HashableKeyType, ValueType]]:
        return iter(self)

    def clear(self) -> None:
        self.mapping.clear()

    def copy(self) -> Self:
        return type(self)(self.mapping)

    def _drop_key(self, key: HashableKeyType) -> None:
        del self.mapping[key]
        logger.debug("dropped key %r from %s", key, type(self).__name__)

    @property
    def count(self) -> int:
        return sum(len(values) for values in self.mapping.values())

    @property
    def keys_count(self) -> int:
        return len(self.mapping)

    @property
    def keys(self) -> KeysView[HashableKeyType]:
        return self.mapping.keys()

    @property
    def values(self) -> list[ValueType]:
        return list(flatten(self.mapping.values()))

    def __iter__(self) -> MultiMapIterator[HashableKeyType, ValueType]:
        return MultiMapIterator.from_mapping(self.mapping)

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: object) -> bool:
        return key in self.mapping

    def __getitem__(self, key: HashableKeyType) -> tuple[ValueType, ...]:
        if (values := self.get_values(key)) is None:
            raise MultiMapKeyError(key)
        return values

    def __delitem__(self, key: HashableKeyType) -> None:
        if self.remove_all(key) is None:
            raise MultiMapKeyError(key)
