from __future__ import annotations

from collections.abc import Hashable, Iterator, KeysView
from typing import Protocol, TypeVar, runtime_checkable

HashableKeyType = TypeVar("HashableKeyType", bound=Hashable)
ValueType = TypeVar("ValueType")


@runtime_checkable
class MultiValueDictionary(Protocol[HashableKeyType, ValueType]):
    """A mapping where one key holds an ordered list of values.

    Lookups and removals report a missing key or value by returning ``None``.
    """

    def add(self, key: HashableKeyType, value: ValueType) -> bool: ...

    def get_values(self, key: HashableKeyType) -> tuple[ValueType, ...] | None: ...

    def remove_one(self, key: HashableKeyType, value: ValueType) -> tuple[HashableKeyType, ValueType] | None: ...

    def remove_all(self, key: HashableKeyType) -> tuple[ValueType, ...] | None: ...

    def __iter__(self) -> Iterator[tuple[HashableKeyType, ValueType]]: ...

    @property
    def count(self) -> int: ...

    @property
    def keys(self) -> KeysView[HashableKeyType]: ...

    @property
    def values(self) -> list[ValueType]: ...
