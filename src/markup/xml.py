# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""
XML documents.

Text content in XML is significant, so pretty printing only ever adds line
breaks and indentation between siblings that are all elements. As soon as a
sibling list contains text, it is written out exactly as built.
"""

from __future__ import annotations as _future_annotations

import dataclasses

from markup import config
from markup.generator import Generator
from markup.nodes import Builder, Element, Node

PROLOGUE = '<?xml version="1.0" encoding="UTF-8" ?>'


@dataclasses.dataclass(slots=True)
class Document(Builder):
    nodes: list[Node] = dataclasses.field(default_factory=list)

    def to_string(self) -> str:
        return XmlGenerator().generate(self)

    def to_pretty_string(self, indent: str | None = None) -> str:
        return XmlGenerator(config.default_indent() if indent is None else indent).generate(self)

    def __str__(self) -> str:
        return self.to_string()


class XmlGenerator(Generator):
    def _prologue(self, document: Builder) -> None:
        self._write(PROLOGUE)

        if self.pretty:
            self._newline()

    def _children(self, element: Element, depth: int) -> None:
        nodes = element.nodes

        if not (self.pretty and all(isinstance(node, Element) for node in nodes)):
            self._nodes(nodes, depth + 1, escape_text=True)
            return

        self._newline()

        for node in nodes:
            self._indent(depth + 1)
            self._node(node, depth + 1, escape_text=True)
            self._newline()

        self._indent(depth)


def generate(document: Builder, indent: str = "") -> str:
    return XmlGenerator(indent).generate(document)
