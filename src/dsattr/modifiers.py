"""Numeric modifier tags.

Turn durations and visibility fractions into the canonical suffixes
Datastar expects after a timing or threshold modifier:

    >>> on_click("save()", MOD_DEBOUNCE, ms(300))
    {'data-on:click__debounce.300ms': 'save()'}
    >>> on_intersect("load()", MOD_THRESHOLD, threshold(0.25))
    {'data-on-intersect__threshold.25': 'load()'}

Each builder is strict and raises InvalidArgumentError on out-of-range
input. The ``*_safe`` twins run the same validation and return an
empty modifier instead, so a bad value simply drops out of the name.
"""

from __future__ import annotations

from datetime import timedelta

from dsattr._types import Modifier
from dsattr.exceptions import ErrorCode, InvalidArgumentError, safe_variant

_ZERO = timedelta(0)
_MICROSECOND = timedelta(microseconds=1)


def duration(d: timedelta) -> Modifier:
    """Return a ``.{N}ms`` tag, rounded to the nearest millisecond.

    Halves round away from zero, so 500µs renders ``.1ms`` and 100µs
    renders ``.0ms``.

    Example:
        >>> duration(timedelta(milliseconds=300))
        '.300ms'

    Raises:
        InvalidArgumentError: If ``d`` is negative.
    """
    if d < _ZERO:
        raise InvalidArgumentError(
            f"duration must not be negative, got {d}",
            argument="d",
            value=d,
            suggestion="Use timedelta(0) for an immediate trigger",
            code=ErrorCode.NEGATIVE_DURATION,
        )
    micros = d // _MICROSECOND
    return Modifier(f".{(micros + 500) // 1000}ms")


def ms(n: int) -> Modifier:
    """Return a ``.{n}ms`` tag from a raw millisecond count.

    Raises:
        InvalidArgumentError: If ``n`` is negative.
    """
    if n < 0:
        raise InvalidArgumentError(
            f"milliseconds must not be negative, got {n}",
            argument="n",
            value=n,
            code=ErrorCode.NEGATIVE_MILLISECONDS,
        )
    return Modifier(f".{n}ms")


def seconds(n: int) -> Modifier:
    """Return a ``.{n}s`` tag.

    Raises:
        InvalidArgumentError: If ``n`` is negative.
    """
    if n < 0:
        raise InvalidArgumentError(
            f"seconds must not be negative, got {n}",
            argument="n",
            value=n,
            code=ErrorCode.NEGATIVE_SECONDS,
        )
    return Modifier(f".{n}s")


def threshold(t: float) -> Modifier:
    """Return a visibility percentage tag for ``__threshold``.

    ``t`` is a fraction in (0.0, 1.0]. It is rounded to two decimals and
    rendered without the leading zero; full visibility is ``.100``.

    Example:
        >>> threshold(0.5)
        '.50'
        >>> threshold(0.335)
        '.34'
        >>> threshold(1)
        '.100'

    Raises:
        InvalidArgumentError: If ``t`` is <= 0, > 1 or NaN.
    """
    if not 0 < t <= 1:
        raise InvalidArgumentError(
            f"threshold must be between 0.0 (exclusive) and 1.0 (inclusive), got {t}",
            argument="t",
            value=t,
            suggestion="Use a fraction such as 0.25 for 25% visibility",
            code=ErrorCode.THRESHOLD_RANGE,
        )
    text = f"{t:.2f}"
    # 0.995 and up round to "1.00"
    if t == 1 or text == "1.00":
        return Modifier(".100")
    return Modifier(text.removeprefix("0"))


_NO_MODIFIER = Modifier("")

duration_safe = safe_variant(duration, fallback=_NO_MODIFIER)
ms_safe = safe_variant(ms, fallback=_NO_MODIFIER)
seconds_safe = safe_variant(seconds, fallback=_NO_MODIFIER)
threshold_safe = safe_variant(threshold, fallback=_NO_MODIFIER)


__all__ = [
    "duration",
    "duration_safe",
    "ms",
    "ms_safe",
    "seconds",
    "seconds_safe",
    "threshold",
    "threshold_safe",
]
