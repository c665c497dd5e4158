from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def flatten(value: Iterable[Sequence[T]]) -> Iterable[T]:
    for item in value:
        yield from item


def index_of(values: Sequence[T], value: Any) -> int | None:  # noqa: ANN401
    for index, item in enumerate(values):
        if item == value:
            return index
    return None
