# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from typing import TYPE_CHECKING

import abc
import logging

from markup.escape import escape
from markup.nodes import Element, Text

if TYPE_CHECKING:
    from markup.nodes import Builder, Node


class Generator(abc.ABC):
    """
    Depth-first conversion of a node tree into markup text.

    An empty ``indent`` produces compact output. Any other value switches on
    pretty printing, using ``indent`` once per nesting level; which sibling
    lists actually get line breaks is up to the concrete generator.
    """

    indent: str
    logger: logging.Logger
    _buffer: list[str]

    __slots__ = ("indent", "logger", "_buffer")

    def __init__(self, indent: str = "", logger: logging.Logger | None = None) -> None:
        self.indent = indent
        self.logger = logger or logging.getLogger(self.__class__.__module__)
        self._buffer = []

    @property
    def pretty(self) -> bool:
        return bool(self.indent)

    def generate(self, document: Builder) -> str:
        self._buffer = []

        self.logger.debug(
            "Generating %s with %d top-level nodes (%s)",
            type(document).__name__,
            len(document.nodes),
            "pretty" if self.pretty else "compact",
        )

        self._prologue(document)
        self._nodes(document.nodes, 0, escape_text=True)

        output, self._buffer = "".join(self._buffer), []
        return output

    @abc.abstractmethod
    def _prologue(self, document: Builder) -> None:
        pass

    @abc.abstractmethod
    def _children(self, element: Element, depth: int) -> None:
        pass

    def _nodes(self, nodes: list[Node], depth: int, *, escape_text: bool) -> None:
        for node in nodes:
            self._node(node, depth, escape_text=escape_text)

    def _node(self, node: Node, depth: int, *, escape_text: bool) -> None:
        match node:
            case Element():
                self._element(node, depth)
            case Text():
                self._text(node, escape_text=escape_text)

    def _element(self, element: Element, depth: int) -> None:
        self._write("<", element.name)

        for key, value in element.attributes.items():
            self._write(" ", key, '="', escape(value, escape_quotes=True), '"')

        if element.self_closing and not element.nodes:
            self._write(" />")
        else:
            self._write(">")
            self._children(element, depth)
            self._write("</", element.name, ">")

        if depth == 0 and self.pretty:
            self._write("\n")

    def _text(self, value: str, *, escape_text: bool) -> None:
        self._write(escape(value) if escape_text else value)

    def _newline(self) -> None:
        self._write("\n")

    def _indent(self, depth: int) -> None:
        if depth:
            self._write(self.indent * depth)

    def _write(self, *parts: str) -> None:
        self._buffer.extend(parts)
