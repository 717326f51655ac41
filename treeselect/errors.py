from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass


class TreeSelectError(Exception):
    """Base class for malformed-input and invariant-violation errors."""


@dataclass(frozen=True, slots=True, eq=False)
class NotATreeError(TreeSelectError):
    value: object

    def __str__(self) -> str:
        return f"Not a tree: {self.value!r}"


@dataclass(frozen=True, slots=True, eq=False)
class CircularStructureError(TreeSelectError):
    node: object

    def __str__(self) -> str:
        return f"Circular structure: {self.node!r} was visited twice"


@dataclass(frozen=True, slots=True, eq=False)
class CardinalityError(TreeSelectError):
    expected: int
    actual: int
    items: Collection[object]

    def __str__(self) -> str:
        return (
            f"Expected exactly {self.expected} element(s), "
            f"got {self.actual}: {list(self.items)!r}"
        )
