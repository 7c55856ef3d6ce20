# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

import pytest

from markup.escape import escape


@pytest.mark.parametrize("text", ["", "plain text", "it's fine", "multi\nline\ttext", "ünïcödé"])
def test_text_without_special_characters_is_returned_as_is(text: str) -> None:
    assert escape(text) is text
    assert escape(text, escape_quotes=True) is text


def test_escapes_markup_characters() -> None:
    assert escape("&><", escape_quotes=False) == "&amp;&gt;&lt;"


def test_escapes_quotes_only_when_asked() -> None:
    assert escape('a"b', escape_quotes=True) == "a&quot;b"
    assert escape('a"b', escape_quotes=False) == 'a"b'


def test_mixed_content() -> None:
    assert escape('<a href="x">Tom & Jerry</a>', escape_quotes=True) == (
        "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&lt;/a&gt;"
    )


def test_existing_entities_are_escaped_again() -> None:
    assert escape("&amp;") == "&amp;amp;"


def test_single_quotes_are_left_alone() -> None:
    assert escape("it's <ok>", escape_quotes=True) == "it's &lt;ok&gt;"
