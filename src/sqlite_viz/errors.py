"""Error chain: an exception carrying a stack of human-readable contexts.

Each fallible call site pushes one context with ``wrap_err``; the root
exception stays attached as ``__cause__``.

    with wrap_err(f"failed to get columns for `{table}`"):
        rows = conn.execute(...).fetchall()
"""
from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Iterator, List

from pydantic import ValidationError

WRAPPED_ERRORS = (sqlite3.Error, ValidationError, OSError)


class ErrorChain(Exception):
    def __init__(self, context: str):
        super().__init__(context)
        # outermost first
        self.contexts: List[str] = [context]

    def wrap(self, context: str) -> "ErrorChain":
        self.contexts.insert(0, context)
        return self

    def chain(self) -> List[str]:
        messages = list(self.contexts)
        cause = self.__cause__
        while cause is not None:
            text = str(cause).strip() or type(cause).__name__
            messages.append(text)
            cause = cause.__cause__
        return messages

    def format(self) -> str:
        messages = self.chain()
        lines = [messages[0]]
        if len(messages) > 1:
            lines.append("")
            lines.append("Caused by:")
            for i, msg in enumerate(messages[1:]):
                lines.append(f"    {i}: {msg}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.contexts[0]


@contextmanager
def wrap_err(context: str) -> Iterator[None]:
    try:
        yield
    except ErrorChain as e:
        raise e.wrap(context)
    except WRAPPED_ERRORS as e:
        raise ErrorChain(context) from e
