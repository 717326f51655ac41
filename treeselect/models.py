from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TypeAlias


class TreeKind(Enum):
    LEAF = "leaf"
    NODE = "node"


@dataclass(frozen=True, slots=True)
class Leaf:
    value: str

    def __repr__(self) -> str:
        return f"Leaf({self.value!r})"


def _empty_attributes() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Node:
    """Element with a tag, attributes and ordered children.

    Nodes compare by value but are unhashable; key them by ``id()``.
    """

    tag: str
    attributes: Mapping[str, str] = field(default_factory=_empty_attributes)
    content: Sequence["Tree"] = ()

    def __repr__(self) -> str:
        if self.attributes:
            attr_str = " ".join(f'{k}="{v}"' for k, v in self.attributes.items())
            return f"<{self.tag} {attr_str}>"
        return f"<{self.tag}>"


Tree: TypeAlias = Leaf | Node


def kind_of(value: object) -> TreeKind | None:
    if isinstance(value, Leaf):
        return TreeKind.LEAF
    if isinstance(value, Node):
        return TreeKind.NODE
    return None


def leaf(value: str) -> Leaf:
    return Leaf(value)


def element(
    tag: str, attributes: Mapping[str, str] | None = None, *children: Tree | str
) -> Node:
    """Build a Node, wrapping plain strings among ``children`` into leaves.

    ``element("p", {}, "Hello, ", element("b", {}, "world"), "!")`` is the
    tree ``(p, {}, ["Hello, ", (b, {}, ["world"]), "!"])``.
    """
    wrapped = tuple(Leaf(child) if isinstance(child, str) else child for child in children)
    return Node(tag, MappingProxyType(dict(attributes or {})), wrapped)
