# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from types import TracebackType
from typing import Any

import logging
import traceback

from pythonjsonlogger.jsonlogger import JsonFormatter as _JsonFormatter

from markup.config import Settings

LOGGER_NAME = "markup"

_SysExcInfoType = (
    tuple[type[BaseException], BaseException, TracebackType | None] | tuple[None, None, None]
)


class JsonFormatter(_JsonFormatter):
    def formatException(self, ei: _SysExcInfoType) -> dict[str, Any] | None:  # type: ignore[override]
        _, exc_value, _ = ei
        if exc_value is None:
            return None

        return _describe(exc_value)


def _describe(exc: BaseException) -> dict[str, Any]:
    return {
        "type": type(exc).__name__,
        "message": str(exc),
        "traceback": [
            {"source": f"{frame.filename}:{frame.lineno}", "method": frame.name}
            for frame in reversed(traceback.extract_tb(exc.__traceback__))
        ],
        "cause": _describe(exc.__cause__) if exc.__cause__ else None,
    }


_handler: logging.Handler | None = None


def enable_logging(settings: Settings | None = None) -> logging.Handler:
    """
    Send records of the ``markup`` loggers to stderr as JSON.

    Calling this again replaces the handler installed by the previous call.
    """
    global _handler  # noqa: PLW0603

    settings = settings or Settings.from_environ()
    logger = logging.getLogger(LOGGER_NAME)

    if _handler is not None:
        logger.removeHandler(_handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter(json_indent=settings.json_indent))  # type: ignore[no-untyped-call]
    handler.setLevel(settings.log_level)

    logger.addHandler(handler)
    logger.setLevel(settings.log_level)

    _handler = handler
    return handler
