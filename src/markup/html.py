# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""
HTML5 documents.

Pretty printing in HTML depends on the inline flag of elements. A sibling
list is only broken over several lines when it holds at least one block
element; text and inline elements next to each other are kept on the same
line, so no whitespace is introduced into the rendered text flow.
"""

from __future__ import annotations as _future_annotations

from collections.abc import Callable

import dataclasses

from markup import config
from markup.generator import Generator
from markup.nodes import Builder, Element, Node, Text

DOCTYPE = "<!DOCTYPE html>"

# Text directly inside these elements is written without entity escaping.
RAW_TEXT_ELEMENTS = frozenset(("script", "style"))


@dataclasses.dataclass(slots=True)
class Document(Builder):
    nodes: list[Node] = dataclasses.field(default_factory=list)
    doctype: bool = True

    @classmethod
    def fragment(cls) -> Document:
        """A document that renders its nodes without a leading doctype."""
        return cls(doctype=False)

    @classmethod
    def html(cls, lang: str, build: Callable[[Element], object]) -> Document:
        """
        Create a full document with an ``<html lang="...">`` root.

        ``build`` receives the root element to fill in before the document is
        returned.
        """
        document = cls()
        build(document.tag("html").attr("lang", lang))
        return document

    def to_string(self) -> str:
        return HtmlGenerator().generate(self)

    def to_pretty_string(self, indent: str | None = None) -> str:
        return HtmlGenerator(config.default_indent() if indent is None else indent).generate(self)

    def __str__(self) -> str:
        return self.to_string()


def _is_block(node: Node | None) -> bool:
    return isinstance(node, Element) and not node.inline


def _flows(node: Node | None) -> bool:
    return isinstance(node, Text) or (isinstance(node, Element) and node.inline)


class HtmlGenerator(Generator):
    def _prologue(self, document: Builder) -> None:
        if not getattr(document, "doctype", False):
            return

        self._write(DOCTYPE)

        if self.pretty:
            self._newline()

    def _children(self, element: Element, depth: int) -> None:
        nodes = element.nodes
        escape_text = element.name not in RAW_TEXT_ELEMENTS

        if not (self.pretty and any(_is_block(node) for node in nodes)):
            self._nodes(nodes, depth + 1, escape_text=escape_text)
            return

        self._newline()

        last = len(nodes) - 1
        for index, node in enumerate(nodes):
            before = nodes[index - 1] if index > 0 else None
            after = nodes[index + 1] if index < last else None

            match node:
                case Element(inline=True):
                    indent = index == 0
                    newline = _is_block(after)
                case Text():
                    indent = not _flows(before)
                    newline = not _flows(after) and not node.endswith("\n")
                case _:
                    indent = newline = True

            if indent:
                self._indent(depth + 1)

            self._node(node, depth + 1, escape_text=escape_text)

            if newline:
                self._newline()

        self._indent(depth)


def generate(document: Builder, indent: str = "") -> str:
    return HtmlGenerator(indent).generate(document)
