from enum import Enum
from typing import Any


class EnumAutoStr(str, Enum):
    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list[Any]) -> str:
        return name


def assert_some[T](result: T | None) -> T:
    assert result is not None
    return result
