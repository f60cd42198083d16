"""
Opt-in logging for the span finders.

Usage in library code:
    from commentspans._logging import resolve_logger

    def find_things(text, *, logger=None, log: bool = False):
        log = resolve_logger(logger=logger, enabled=log, name=__name__)
        log.debug("scanning %d chars", len(text))  # silent unless opted in
        ...

Nothing is printed and no handlers are installed; callers opt in by passing
a logger or `log=True`.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def _ensure_propagation(lg: logging.Logger) -> None:
    # Records bubble to the root so pytest's caplog sees them.
    lg.propagate = True


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.DEBUG,
) -> logging.Logger | NoopLogger:
    """
    Return a usable logger according to opt-in policy.

    - If `logger` is provided, use it.
    - Else if `enabled` is True, create/get a named logger.
    - Else return a NoopLogger that ignores calls.
    """
    # Duck-typed: if the caller gave us an object with .debug(...), use it.
    # The finders pass already-resolved loggers, NoopLogger included.
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "commentspans")
        lg.setLevel(level)
        _ensure_propagation(lg)
        return lg
    return NoopLogger()
