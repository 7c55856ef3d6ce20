# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from xml.sax.saxutils import escape as _escape

_TEXT_TRIGGERS = ("&", "<", ">")
_ATTRIBUTE_TRIGGERS = (*_TEXT_TRIGGERS, '"')
_QUOTE_ENTITIES = {'"': "&quot;"}


def escape(text: str, escape_quotes: bool = False) -> str:  # noqa: FBT001, FBT002
    """
    Replace the characters that are special in markup with named entities.

    ``&``, ``<`` and ``>`` are always replaced; ``"`` only when escaping an
    attribute value. Text without any of these is returned as-is.
    """
    triggers = _ATTRIBUTE_TRIGGERS if escape_quotes else _TEXT_TRIGGERS

    if not any(char in text for char in triggers):
        return text

    return _escape(text, _QUOTE_ENTITIES if escape_quotes else {})
