# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Iterator

import json
import logging
import sys

import pytest

from markup import html, logger
from markup.config import Settings
from markup.logger import LOGGER_NAME, JsonFormatter, enable_logging


@pytest.fixture(autouse=True)
def _restore_logger() -> Iterator[None]:
    markup_logger = logging.getLogger(LOGGER_NAME)
    level = markup_logger.level
    handlers = list(markup_logger.handlers)

    yield

    markup_logger.setLevel(level)
    markup_logger.handlers[:] = handlers
    logger._handler = None  # noqa: SLF001


def _raise_chained() -> None:
    try:
        int("x")
    except ValueError as exc:
        raise RuntimeError("could not render") from exc


def test_exception_is_structured() -> None:
    try:
        _raise_chained()
    except RuntimeError:
        record = logging.LogRecord(
            "markup.test", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )

    output = json.loads(JsonFormatter().format(record))  # type: ignore[no-untyped-call]

    assert output["message"] == "failed"
    exc_info = output["exc_info"]
    assert exc_info["type"] == "RuntimeError"
    assert exc_info["message"] == "could not render"
    assert exc_info["traceback"][-1]["method"] == "test_exception_is_structured"
    assert exc_info["cause"]["type"] == "ValueError"
    assert exc_info["cause"]["cause"] is None


def test_record_without_exception() -> None:
    record = logging.LogRecord("markup.test", logging.INFO, __file__, 1, "hello %s", ("x",), None)

    output = json.loads(JsonFormatter().format(record))  # type: ignore[no-untyped-call]

    assert output["message"] == "hello x"
    assert "exc_info" not in output


def test_enable_logging_writes_json(capsys: pytest.CaptureFixture[str]) -> None:
    enable_logging(Settings(log_level=logging.DEBUG))

    doc = html.Document.fragment()
    doc.tag("p").text("x")
    doc.to_pretty_string("  ")

    lines = capsys.readouterr().err.splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["message"] == "Generating Document with 1 top-level nodes (pretty)"


def test_enable_logging_replaces_previous_handler() -> None:
    markup_logger = logging.getLogger(LOGGER_NAME)

    first = enable_logging(Settings())
    second = enable_logging(Settings(log_level=logging.INFO))

    assert first not in markup_logger.handlers
    assert second in markup_logger.handlers
    assert markup_logger.level == logging.INFO
    assert second.level == logging.INFO
