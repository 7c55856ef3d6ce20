# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""
Build XML and HTML5 documents in memory and turn them into text.

    >>> from markup import html
    >>> doc = html.Document.fragment()
    >>> doc.tag("p").text("Tom & Jerry")
    Element(name='p', attributes={}, nodes=['Tom & Jerry'], self_closing=False, inline=False)
    >>> doc.to_string()
    '<p>Tom &amp; Jerry</p>'
"""

from __future__ import annotations as _future_annotations

from markup import html, xml
from markup.escape import escape
from markup.nodes import Builder, Element, Node, Text

__all__ = [
    "Builder",
    "Element",
    "Node",
    "Text",
    "escape",
    "html",
    "xml",
]
