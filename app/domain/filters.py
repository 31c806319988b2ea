"""Store-agnostic query filters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FilterOperator(str, Enum):
    EQ = "eq"
    NE = "ne"
    IN = "in"


@dataclass(frozen=True)
class Filter:
    """Single ``field <operator> value`` condition understood by stores.

    A sequence of filters is combined with logical AND.
    """

    field: str
    value: Any
    operator: FilterOperator = FilterOperator.EQ

    @classmethod
    def eq(cls, field: str, value: Any) -> "Filter":
        return cls(field=field, value=value, operator=FilterOperator.EQ)


__all__ = ["Filter", "FilterOperator"]
