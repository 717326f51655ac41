from __future__ import annotations

from collections.abc import Callable, Iterable
import logging
from typing import TypeVar

from treeselect.errors import CircularStructureError

T = TypeVar("T")

Predicate = Callable[[T], bool]
Descend = Callable[[T], Iterable[T]]

logger = logging.getLogger(__name__)


def select(tree: T, predicate: Predicate[T], descend: Descend[T]) -> list[T]:
    """Return every subtree of ``tree`` satisfying ``predicate``.

    The walk is depth-first and pre-order, with children supplied by
    ``descend``. A matching subtree is returned whole and its children are
    not searched, so results never nest. Every value is visited at most once
    per call: reaching the same object again, whether through a cycle or a
    shared subtree, raises ``CircularStructureError`` and no partial result
    is returned.
    """
    matches: list[T] = []
    # id() -> value; holding the value keeps its id from being reused.
    seen: dict[int, T] = {}
    stack: list[T] = [tree]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            logger.debug("Traversal aborted, %r reached twice", node)
            raise CircularStructureError(node)
        seen[id(node)] = node
        if predicate(node):
            matches.append(node)
            continue
        stack.extend(reversed(list(descend(node))))
    return matches
