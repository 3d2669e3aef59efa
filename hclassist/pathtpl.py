"""Paths with template actions such as ``{{ pid }}`` and ``{{ timestamp }}``."""

from __future__ import annotations

import os
import time
from collections.abc import Callable
from dataclasses import dataclass

_NO_VALUE = "<no value>"
_LEFT = "{{"
_RIGHT = "}}"
_TRIM_WS = " \t\r\n"


class TemplateError(ValueError):
    """Raised when a path template cannot be parsed or executed."""


@dataclass(frozen=True)
class _Action:
    name: str


class PathTemplate:
    """A parsed path template.

    The ``timestamp`` function yields the Unix time at which the template
    was created; ``pid`` and ``ppid`` yield the current and parent process ids.
    """

    def __init__(self, name: str, text: str) -> None:
        self.name = name
        created = int(time.time())
        self._functions: dict[str, Callable[[], object]] = {
            "timestamp": lambda: created,
            "pid": os.getpid,
            "ppid": os.getppid,
        }
        self._parts = list(self._parse(text))

    def _error(self, text: str, offset: int, message: str) -> TemplateError:
        line = text.count("\n", 0, offset) + 1
        return TemplateError(f"template: {self.name}:{line}: {message}")

    def _parse(self, text: str):
        pending = ""
        pos = 0
        while True:
            start = text.find(_LEFT, pos)
            if start < 0:
                pending += text[pos:]
                break
            literal = text[pos:start]
            inner_start = start + len(_LEFT)
            if text.startswith("- ", inner_start) or text.startswith("-\t", inner_start):
                literal = literal.rstrip(_TRIM_WS)
                inner_start += 1
            pending += literal

            end = text.find(_RIGHT, inner_start)
            if end < 0:
                raise self._error(text, start, "unclosed action")
            inner_end = end
            pos = end + len(_RIGHT)
            trim_right = end - 1 >= inner_start and text[end - 1] == "-" and (
                end - 2 >= inner_start and text[end - 2] in _TRIM_WS
            )
            if trim_right:
                inner_end -= 1

            content = text[inner_start:inner_end].strip(_TRIM_WS)
            if content.startswith("/*"):
                if not content.endswith("*/") or len(content) < 4:
                    raise self._error(text, start, "unclosed comment")
            elif not content:
                raise self._error(text, start, "missing value for command")
            elif content == ".":
                pending += _NO_VALUE
            else:
                words = content.split()
                if words[0] not in self._functions:
                    raise self._error(
                        text, start, f'function "{words[0]}" not defined'
                    )
                if len(words) != 1:
                    raise self._error(
                        text,
                        start,
                        f"wrong number of args for {words[0]}: "
                        f"want 0 got {len(words) - 1}",
                    )
                if pending:
                    yield pending
                    pending = ""
                yield _Action(words[0])

            if trim_right:
                while pos < len(text) and text[pos] in _TRIM_WS:
                    pos += 1
        if pending:
            yield pending

    def execute(self) -> str:
        """Render the template into a string."""
        return "".join(
            str(self._functions[part.name]()) if isinstance(part, _Action) else part
            for part in self._parts
        )


def parse_raw_path(name: str, raw_path: str) -> str:
    """Parse ``raw_path`` as a template named ``name`` and render it."""
    return PathTemplate(name, raw_path).execute()