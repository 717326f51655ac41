from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, Mapping, Sequence
from typing import TypeVar

from treeselect.errors import CardinalityError, NotATreeError
from treeselect.models import Leaf, Node, Tree, TreeKind, kind_of
from treeselect.selector import select
from treeselect.text import normalize_whitespace

T = TypeVar("T")

CLASS_ATTRIBUTE = "class"


def is_leaf(value: object) -> bool:
    return kind_of(value) is TreeKind.LEAF


def is_node(value: object) -> bool:
    return kind_of(value) is TreeKind.NODE


def tag(tree: object) -> str | None:
    if isinstance(tree, Node):
        return tree.tag
    return None


def attributes(tree: object) -> Mapping[str, str] | None:
    if isinstance(tree, Node):
        return tree.attributes
    return None


def content(tree: object) -> Sequence[Tree]:
    """Return the children of a tree value.

    A leaf has no children. Anything that is not a leaf or a well-formed node
    raises ``NotATreeError`` rather than being treated as childless.
    """
    kind = kind_of(tree)
    if kind is TreeKind.LEAF:
        return ()
    if kind is TreeKind.NODE and isinstance(tree.content, (list, tuple)):
        return tree.content
    raise NotATreeError(tree)


def attribute_value(tree: object, key: str) -> str | None:
    attrs = attributes(tree)
    if attrs is None:
        return None
    return attrs.get(key)


def classes(tree: object) -> frozenset[str]:
    class_attr = attribute_value(tree, CLASS_ATTRIBUTE) or ""
    return frozenset(part for part in class_attr.split() if part)


def select_html(tree: Tree, predicate: Callable[[Tree], bool]) -> list[Tree]:
    return select(tree, predicate, content)


def select_by_tag(tree: Tree, tag_name: str) -> list[Tree]:
    return select_html(tree, lambda node: tag(node) == tag_name)


def select_by_attribute(
    tree: Tree, key: str, value: str | None = None
) -> list[Tree]:
    def _matches(node: Tree) -> bool:
        actual = attribute_value(node, key)
        if actual is None:
            return False
        return value is None or actual == value

    return select_html(tree, _matches)


def select_by_class(tree: Tree, class_name: str) -> list[Tree]:
    return select_html(tree, lambda node: class_name in classes(node))


def get_sole_element(items: Iterable[T]) -> T:
    collected: Collection[T] = items if isinstance(items, Collection) else list(items)
    if len(collected) != 1:
        raise CardinalityError(expected=1, actual=len(collected), items=collected)
    return next(iter(collected))


def get_value(tree: Tree) -> Tree:
    return get_sole_element(content(tree))


def as_text(tree: Tree) -> str:
    leaves = select_html(tree, is_leaf)
    return "".join(item.value for item in leaves if isinstance(item, Leaf))


def normalized_text(tree: Tree) -> str:
    return normalize_whitespace(as_text(tree))
