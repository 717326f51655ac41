from __future__ import annotations

from treeselect.accessors import (
    as_text,
    attribute_value,
    attributes,
    classes,
    content,
    get_sole_element,
    get_value,
    is_leaf,
    is_node,
    normalized_text,
    select_by_attribute,
    select_by_class,
    select_by_tag,
    select_html,
    tag,
)
from treeselect.errors import (
    CardinalityError,
    CircularStructureError,
    NotATreeError,
    TreeSelectError,
)
from treeselect.html_parser import parse_html, parse_html_file
from treeselect.models import Leaf, Node, Tree, TreeKind, element, kind_of, leaf
from treeselect.selector import select

__all__ = [
    "select",
    "select_html",
    "select_by_tag",
    "select_by_attribute",
    "select_by_class",
    "get_sole_element",
    "get_value",
    "as_text",
    "normalized_text",
    "tag",
    "attributes",
    "attribute_value",
    "classes",
    "content",
    "is_leaf",
    "is_node",
    "parse_html",
    "parse_html_file",
    "Leaf",
    "Node",
    "Tree",
    "TreeKind",
    "element",
    "kind_of",
    "leaf",
    "TreeSelectError",
    "NotATreeError",
    "CircularStructureError",
    "CardinalityError",
]
