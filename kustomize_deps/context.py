"""Utilities for trace logging of extraction steps.

Nested steps are joined into a single label so a log line shows which file
and which step produced it, e.g. `extract kustomization.yaml > parse`.
"""

import contextvars
from contextlib import contextmanager
import logging
from time import perf_counter
from typing import Generator


_LOGGER = logging.getLogger(__name__)

# No public API
__all__: list[str] = []


_STEPS: contextvars.ContextVar[tuple[str, ...]] = contextvars.ContextVar(
    "steps", default=()
)


def current_label() -> str:
    """Return the label of the innermost active step, or an empty string."""
    return " > ".join(_STEPS.get())


@contextmanager
def trace_context(step: str) -> Generator[None, None, None]:
    """Log entry into and exit from an extraction step at DEBUG level."""
    token = _STEPS.set(_STEPS.get() + (step,))
    label = current_label()
    start = perf_counter()
    _LOGGER.debug("[Trace] > %s", label)
    try:
        yield
    finally:
        _STEPS.reset(token)
        _LOGGER.debug("[Trace] < %s (%0.4fs)", label, perf_counter() - start)
