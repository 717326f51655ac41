from __future__ import annotations

from dataclasses import dataclass, field
from html.parser import HTMLParser
from pathlib import Path
from types import MappingProxyType
from typing import Final

from treeselect.config import ParseOptions
from treeselect.models import Leaf, Node, Tree
from treeselect.text import is_blank

DOCUMENT_TAG: Final[str] = "document"
COMMENT_TAG: Final[str] = "comment"

VOID_TAGS: Final[frozenset[str]] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


@dataclass(slots=True)
class _OpenElement:
    tag: str
    attrs: dict[str, str]
    children: list[Tree | str] = field(default_factory=list)


class _TreeBuilder(HTMLParser):
    def __init__(self, options: ParseOptions) -> None:
        super().__init__(convert_charrefs=True)
        self._options = options
        self._stack: list[_OpenElement] = [_OpenElement(DOCUMENT_TAG, {})]

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        element = _OpenElement(tag, _attrs_dict(attrs))
        if tag in VOID_TAGS:
            self._stack[-1].children.append(self._freeze(element))
            return
        self._stack.append(element)

    def handle_startendtag(
        self, tag: str, attrs: list[tuple[str, str | None]]
    ) -> None:
        self._stack[-1].children.append(self._freeze(_OpenElement(tag, _attrs_dict(attrs))))

    def handle_endtag(self, tag: str) -> None:
        for index in range(len(self._stack) - 1, 0, -1):
            if self._stack[index].tag == tag:
                while len(self._stack) > index:
                    self._close_top()
                return

    def handle_data(self, data: str) -> None:
        if not data:
            return
        children = self._stack[-1].children
        if children and isinstance(children[-1], str):
            children[-1] += data
        else:
            children.append(data)

    def handle_comment(self, data: str) -> None:
        if not self._options.keep_comments:
            return
        comment = Node(COMMENT_TAG, MappingProxyType({}), (Leaf(data),))
        self._stack[-1].children.append(comment)

    def finish(self) -> Node:
        self.close()
        while len(self._stack) > 1:
            self._close_top()
        return self._freeze(self._stack.pop())

    def _close_top(self) -> None:
        element = self._stack.pop()
        self._stack[-1].children.append(self._freeze(element))

    def _freeze(self, element: _OpenElement) -> Node:
        content: list[Tree] = []
        for child in element.children:
            if not isinstance(child, str):
                content.append(child)
            elif self._options.keep_whitespace or not is_blank(child):
                content.append(Leaf(child))
        return Node(element.tag, MappingProxyType(element.attrs), tuple(content))


def _attrs_dict(attrs: list[tuple[str, str | None]]) -> dict[str, str]:
    return {key: "" if value is None else value for key, value in attrs if key}


def parse_html(text: str, options: ParseOptions | None = None) -> Node:
    builder = _TreeBuilder(options or ParseOptions())
    builder.feed(text)
    return builder.finish()


def parse_html_file(
    path: str | Path, options: ParseOptions | None = None, encoding: str = "utf-8"
) -> Node:
    return parse_html(Path(path).read_text(encoding=encoding), options)
