# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from typing import Self

import abc
import copy
import dataclasses

from markup import tags


class Text(str):
    __slots__ = ()


class Builder(abc.ABC):
    """
    Tree-growing operations shared by documents and elements.

    Implementations only provide ``nodes``, the list of children they own;
    every operation here works on that list.
    """

    nodes: list[Node]

    __slots__ = ()

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def element(self, name: str) -> Element:
        """Append a new, empty element and return it for further building."""
        child = Element(name)
        self.nodes.append(child)
        return child

    def tag(self, name: str) -> Element:
        """Append an element, flagged according to the HTML5 catalogue entry for ``name``."""
        child = self.element(name)
        info = tags.lookup(name)

        if info.self_closing:
            child.mark_self_closing()
        if info.inline:
            child.mark_inline()

        return child

    def text(self, value: str) -> Self:
        self.nodes.append(Text(value))
        return self

    def append(self, other: Builder) -> Self:
        """
        Append copies of all top-level nodes of ``other``.

        ``other`` is left untouched, and later changes to either tree do
        not show up in the other one.
        """
        self.nodes.extend(copy.deepcopy(other.nodes))
        return self

    def take_nodes(self) -> list[Node]:
        nodes, self.nodes = self.nodes, []
        return nodes


@dataclasses.dataclass(slots=True)
class Element(Builder):
    name: str
    attributes: dict[str, str] = dataclasses.field(default_factory=dict)
    nodes: list[Node] = dataclasses.field(default_factory=list)
    self_closing: bool = False
    inline: bool = False

    def attr(self, name: str, value: str) -> Self:
        # dict keeps the original position of a key when its value is replaced.
        self.attributes[name] = value
        return self

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def mark_self_closing(self) -> Self:
        self.self_closing = True
        return self

    def mark_inline(self) -> Self:
        self.inline = True
        return self


Node = Element | Text
