from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from sortedcontainers import SortedDict

from multivaluedict.multi_map import MultiMap
from multivaluedict.protocols import HashableKeyType, ValueType


@dataclass
class SortedMultiMap(MultiMap[HashableKeyType, ValueType]):
    """Multi-map whose keys are always enumerated in ascending order."""

    mapping: SortedDict[HashableKeyType, list[ValueType]] = field(default_factory=SortedDict)  # type: ignore[assignment]

    @staticmethod
    def _build_mapping(
        items: Iterable[tuple[HashableKeyType, list[ValueType]]],
    ) -> SortedDict[HashableKeyType, list[ValueType]]:
        return SortedDict(items)

    def first_key(self) -> HashableKeyType | None:
        if not self.mapping:
            return None
        key, _ = self.mapping.peekitem(0)
        return key

    def last_key(self) -> HashableKeyType | None:
        if not self.mapping:
            return None
        key, _ = self.mapping.peekitem(-1)
        return key

    def irange_keys(
        self,
        minimum: HashableKeyType | None = None,
        maximum: HashableKeyType | None = None,
        inclusive: tuple[bool, bool] = (True, True),
        reverse: bool = False,
    ) -> Iterator[HashableKeyType]:
        return self.mapping.irange(minimum, maximum, inclusive, reverse=reverse)
