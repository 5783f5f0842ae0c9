"""Object-literal builders and the shared scratch-buffer pool.

Attribute values such as ``data-class`` and ``data-signals`` are small
JavaScript object literals. They are assembled with the StringBuilder
pattern: fragments are appended to a list and joined once, so the final
string is allocated at its exact size in a single pass.

Two object dialects exist and are kept apart on purpose:

- pair objects quote their keys: ``{'font-bold': $isBold}``
- signal, filter and option objects do not: ``{count: 42}``

Thread-Safety:
    Builders take a buffer from :data:`DEFAULT_POOL` for the duration of
    one call and always return it cleared, including when formatting
    raises. No buffer is ever visible to two calls at once.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager

from dsattr._types import Filter, Modifier, Pair, Signal

logger = logging.getLogger(__name__)


class ScratchPool:
    """Pool of reusable fragment buffers.

    Pooling only saves allocations; a call that finds the pool empty
    simply gets a fresh list. Buffers returned while the pool already
    holds ``max_size`` entries are dropped.

    Example:
        >>> pool = ScratchPool(max_size=4)
        >>> with pool.acquire() as buf:
        ...     buf.append("{")
        ...     buf.append("}")
        ...     "".join(buf)
        '{}'
    """

    __slots__ = ("_free", "_lock", "max_size")

    def __init__(self, max_size: int = 32):
        if max_size < 0:
            raise ValueError(f"max_size must not be negative, got {max_size}")
        self.max_size = max_size
        self._free: list[list[str]] = []
        self._lock = threading.Lock()

    @contextmanager
    def acquire(self) -> Iterator[list[str]]:
        """Borrow an empty buffer; it is cleared and returned on exit."""
        with self._lock:
            buf = self._free.pop() if self._free else []
        try:
            yield buf
        finally:
            buf.clear()
            with self._lock:
                if len(self._free) < self.max_size:
                    self._free.append(buf)
                else:
                    logger.debug("Scratch pool full (%d), dropping buffer", self.max_size)

    def __len__(self) -> int:
        """Number of idle buffers."""
        with self._lock:
            return len(self._free)


DEFAULT_POOL = ScratchPool()


def _identity(expr: str) -> str:
    return expr


def arrow(expr: str) -> str:
    """Wrap an expression as a zero-argument arrow function."""
    return "() => " + expr


def join_modifiers(modifiers: Sequence[Modifier], *, pool: ScratchPool = DEFAULT_POOL) -> str:
    """Concatenate modifiers in the order given."""
    if not modifiers:
        return ""
    with pool.acquire() as buf:
        buf.extend(modifiers)
        return "".join(buf)


def build_pairs(
    pairs: Sequence[Pair],
    value_fmt: Callable[[str], str] = _identity,
    *,
    pool: ScratchPool = DEFAULT_POOL,
) -> str:
    """Render pairs as ``{'k1': v1, 'k2': v2}``.

    Keys are single-quoted so hyphenated names (``font-bold``) stay valid.
    ``value_fmt`` transforms each expression, e.g. :func:`arrow` for
    computed signals. Nothing is escaped.
    """
    with pool.acquire() as buf:
        buf.append("{")
        for i, item in enumerate(pairs):
            if i:
                buf.append(", ")
            buf.append("'")
            buf.append(item.key)
            buf.append("': ")
            buf.append(value_fmt(item.expr))
        buf.append("}")
        return "".join(buf)


def build_signals(signals: Sequence[Signal], *, pool: ScratchPool = DEFAULT_POOL) -> str:
    """Render typed signals as ``{key1: value1, key2: value2}`` (unquoted keys)."""
    return build_entries([(sig.key, sig.value) for sig in signals], pool=pool)


def build_filter(f: Filter) -> str:
    """Render a filter as ``{include: /re/, exclude: /re/}``, omitting empty fields."""
    fields = (("include", f.include), ("exclude", f.exclude))
    return build_entries([(key, source) for key, source in fields if source])


def build_entries(
    entries: Sequence[tuple[str, str]], *, pool: ScratchPool = DEFAULT_POOL
) -> str:
    """Render already-formatted ``(key, value)`` entries as ``{key: value, ...}``."""
    with pool.acquire() as buf:
        buf.append("{")
        for i, (key, value) in enumerate(entries):
            if i:
                buf.append(", ")
            buf.append(key)
            buf.append(": ")
            buf.append(value)
        buf.append("}")
        return "".join(buf)


__all__ = [
    "DEFAULT_POOL",
    "ScratchPool",
    "arrow",
    "build_entries",
    "build_filter",
    "build_pairs",
    "build_signals",
    "join_modifiers",
]
