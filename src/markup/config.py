# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Mapping

import dataclasses
import logging
import os

from dotenv import load_dotenv

DEFAULT_INDENT = "  "

ENV_INDENT = "MARKUP_INDENT"
ENV_LOG_LEVEL = "MARKUP_LOG_LEVEL"
ENV_LOG_JSON_INDENT = "MARKUP_LOG_JSON_INDENT"


@dataclasses.dataclass(frozen=True, slots=True)
class Settings:
    indent: str = DEFAULT_INDENT
    log_level: int = logging.WARNING
    json_indent: int | None = None

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        load_env: bool = False,
    ) -> Settings:
        # A .env file only feeds the process environment, not an explicit mapping.
        if environ is None:
            if load_env:
                load_dotenv()
            environ = os.environ

        return cls(
            indent=environ.get(ENV_INDENT, DEFAULT_INDENT),
            log_level=_log_level(environ.get(ENV_LOG_LEVEL)),
            json_indent=_json_indent(environ.get(ENV_LOG_JSON_INDENT)),
        )


def _log_level(value: str | None) -> int:
    if not value:
        return logging.WARNING

    if value.isdigit():
        return int(value)

    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"{ENV_LOG_LEVEL}: unknown log level {value!r}")

    return level


def _json_indent(value: str | None) -> int | None:
    if not value:
        return None

    try:
        indent = int(value)
    except ValueError as exc:
        raise ValueError(f"{ENV_LOG_JSON_INDENT}: expected an integer, got {value!r}") from exc

    if indent < 0:
        raise ValueError(f"{ENV_LOG_JSON_INDENT}: must not be negative, got {indent}")

    return indent


def default_indent() -> str:
    """The indentation used for pretty output when the caller does not pass one."""
    return Settings.from_environ(load_env=True).indent
