"""Base aliases and enums for shortest-path computations."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

#: Integer vertex identifier in ``[0, vertex_count)``.
VertexID = int

#: Numeric edge weight or traversal time.
Cost = Union[int, float]

#: Distance/time sentinel for vertices not reached from the source.
INF = float("inf")


class _ParseableEnum(IntEnum):
    @classmethod
    def from_string(cls, value: str):
        """Parse a case-insensitive member name.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.strip().upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid {cls.__name__} '{value}'. Valid values are: {valid}"
            ) from None


class Metric(_ParseableEnum):
    """Which edge attribute a shortest-path query minimizes."""

    #: Edge ``weight``; may be negative, computed with cycle detection.
    COST = 1
    #: Edge ``time``; edges without a time are ignored.
    TIME = 2


class UnreachablePolicy(_ParseableEnum):
    """How queries report a target that cannot be reached from the source."""

    #: Return a record with an infinite distance/time and a degenerate path.
    IMPLICIT = 1
    #: Raise `NoPathError`.
    RAISE = 2
