# src/logging/context.py - v2
"""Name of the derivation currently running, for log records.

Public builders are wrapped with ``operation("<name>")``; every record logged
while one runs, including from nested helpers, carries that name. The
outermost builder wins, so ``membership_graph`` records stay attributed to it
while its BFS runs.
"""

from __future__ import annotations

import contextvars
import functools
from collections.abc import Callable
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation", default=None
)


def current_operation() -> str | None:
    """Outermost derivation running in this context, if any."""
    return _operation.get()


def operation(name: str) -> Callable[[F], F]:
    """Decorator recording ``name`` as the running derivation."""

    def decorate(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if _operation.get() is not None:
                return fn(*args, **kwargs)
            token = _operation.set(name)
            try:
                return fn(*args, **kwargs)
            finally:
                _operation.reset(token)

        return wrapper  # type: ignore[return-value]

    return decorate
