from typing import Any


class MultiMapError(Exception):
    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class MultiMapKeyError(MultiMapError, KeyError):
    def __init__(self, key: Any) -> None:  # noqa: ANN401
        super().__init__(f"key not found: {key!r}")
        self.key = key

    def __str__(self) -> str:
        return self.message


class MultiMapValueError(MultiMapError, ValueError):
    def __init__(self, key: Any, value: Any) -> None:  # noqa: ANN401
        super().__init__(f"value {value!r} not found under key {key!r}")
        self.key = key
        self.value = value
