# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""Layout metadata for the standard HTML5 elements."""

from __future__ import annotations as _future_annotations

from typing import NamedTuple


class TagInfo(NamedTuple):
    self_closing: bool
    inline: bool


BLOCK = TagInfo(self_closing=False, inline=False)
INLINE = TagInfo(self_closing=False, inline=True)
VOID = TagInfo(self_closing=True, inline=False)
INLINE_VOID = TagInfo(self_closing=True, inline=True)


# Elements with no entry here are treated as BLOCK.
HTML_TAGS: dict[str, TagInfo] = {
    # Void elements that start their own line.
    "area": VOID,
    "base": VOID,
    "col": VOID,
    "embed": VOID,
    "hr": VOID,
    "link": VOID,
    "meta": VOID,
    "param": VOID,
    "source": VOID,
    "track": VOID,
    # Void elements that flow with the surrounding text.
    "br": INLINE_VOID,
    "img": INLINE_VOID,
    "input": INLINE_VOID,
    "wbr": INLINE_VOID,
    # Phrasing content.
    "a": INLINE,
    "abbr": INLINE,
    "b": INLINE,
    "bdi": INLINE,
    "bdo": INLINE,
    "button": INLINE,
    "cite": INLINE,
    "code": INLINE,
    "data": INLINE,
    "del": INLINE,
    "dfn": INLINE,
    "em": INLINE,
    "i": INLINE,
    "ins": INLINE,
    "kbd": INLINE,
    "label": INLINE,
    "mark": INLINE,
    "meter": INLINE,
    "output": INLINE,
    "progress": INLINE,
    "q": INLINE,
    "rp": INLINE,
    "rt": INLINE,
    "ruby": INLINE,
    "s": INLINE,
    "samp": INLINE,
    "select": INLINE,
    "small": INLINE,
    "span": INLINE,
    "strong": INLINE,
    "sub": INLINE,
    "sup": INLINE,
    "textarea": INLINE,
    "time": INLINE,
    "u": INLINE,
    "var": INLINE,
}


def lookup(name: str) -> TagInfo:
    return HTML_TAGS.get(name, BLOCK)
