"""Exceptions for dsattr.

Exception Hierarchy:
DatastarError (base)
└── InvalidArgumentError      # Malformed helper argument (also a ValueError)
    ├── PairCountError        # Flat key/expr list with an odd length
    └── SignalEncodingError   # Value could not be encoded as JSON

Strict vs. safe helpers:
Every fallible helper is strict: it raises as soon as an argument is
invalid, because a bad literal in a template is a bug at the call site.
Helpers whose input may come from users also exist as a ``*_safe`` twin
built by :func:`safe_variant`. The twin runs the very same callable,
logs the failure and returns a fallback instead of raising.

Example:
    ```
    InvalidArgumentError: threshold must be between 0.0 (exclusive) and 1.0 (inclusive), got 1.5
      Argument: t = 1.5 (float)
      Hint: Use a fraction such as 0.25 for 25% visibility
      Docs: https://data-star.dev/reference/attributes#data-on-intersect
    ```
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, ParamSpec, TypeVar

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------

_REFERENCE_BASE = "https://data-star.dev/reference"


class ErrorCode(Enum):
    """Searchable error codes for dsattr errors.

    Format: D-{CATEGORY}-{NUMBER}
    Categories: MOD (modifiers), ATT (attributes), SIG (signals), ACT (actions)
    """

    # Modifier errors (D-MOD-xxx)
    NEGATIVE_DURATION = "D-MOD-001"
    NEGATIVE_MILLISECONDS = "D-MOD-002"
    NEGATIVE_SECONDS = "D-MOD-003"
    THRESHOLD_RANGE = "D-MOD-004"

    # Attribute errors (D-ATT-xxx)
    ODD_PAIRS = "D-ATT-001"
    INVALID_PAIR_ITEM = "D-ATT-002"

    # Signal errors (D-SIG-xxx)
    SIGNAL_ENCODING = "D-SIG-001"
    INVALID_SIGNAL_ITEM = "D-SIG-002"

    # Action errors (D-ACT-xxx)
    URL_FORMAT = "D-ACT-001"

    @property
    def category(self) -> str:
        """Error category (e.g., 'modifier', 'attribute', 'signal', 'action')."""
        prefix = self.value.split("-")[1]
        return {
            "MOD": "modifier",
            "ATT": "attribute",
            "SIG": "signal",
            "ACT": "action",
        }.get(prefix, "unknown")

    @property
    def reference_url(self) -> str:
        """Datastar reference page for the feature that failed."""
        if self.category == "action":
            return f"{_REFERENCE_BASE}/actions"
        if self.category == "modifier":
            return f"{_REFERENCE_BASE}/attributes#data-on"
        if self.category == "signal":
            return f"{_REFERENCE_BASE}/attributes#data-signals"
        return f"{_REFERENCE_BASE}/attributes"


class DatastarError(Exception):
    """Base exception for all dsattr errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a short terminal diagnostic with its reference URL."""
        parts: list[str] = []

        header = str(self)
        if self.code:
            code_str = self.code.value
            if code_str not in header:
                header = f"{code_str}: {header}"
        parts.append(header)

        if self.code:
            parts.append(f"  Docs: {self.code.reference_url}")

        return "\n".join(parts)


class InvalidArgumentError(DatastarError, ValueError):
    """A helper received an argument it cannot render.

    Subclasses ValueError so callers that already guard user input with
    ``except ValueError`` keep working.

    Attributes:
        message: Error description
        argument: Name of the offending parameter
        value: The rejected value
        suggestion: Actionable fix suggestion
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: Any = None,
        suggestion: str | None = None,
        code: ErrorCode | None = None,
    ):
        self.message = message
        self.argument = argument
        self.value = value
        self.suggestion = suggestion
        if code is not None:
            self.code = code
        super().__init__(message)

    def format_compact(self) -> str:
        parts = [super().format_compact().split("\n")[0]]
        if self.argument is not None:
            parts.append(
                f"  Argument: {self.argument} = {self.value!r} ({type(self.value).__name__})"
            )
        if self.suggestion:
            parts.append(f"  Hint: {self.suggestion}")
        if self.code:
            parts.append(f"  Docs: {self.code.reference_url}")
        return "\n".join(parts)


class PairCountError(InvalidArgumentError):
    """Flat key/expression list has a key without an expression."""

    code: ErrorCode | None = ErrorCode.ODD_PAIRS


class SignalEncodingError(InvalidArgumentError):
    """A signal value could not be serialized to JSON.

    Common causes are circular references, sets, arbitrary objects and
    NaN/Infinity floats. The underlying error is chained as ``__cause__``.
    """

    code: ErrorCode | None = ErrorCode.SIGNAL_ENCODING


# ---------------------------------------------------------------------------
# Safe variants
# ---------------------------------------------------------------------------


def safe_variant(
    func: Callable[P, R], *, name: str | None = None, fallback: Any = None
) -> Callable[..., R | Any]:
    """Build the recoverable twin of a strict helper.

    The twin accepts the same arguments plus a keyword-only ``default``
    (``fallback`` unless given). Any DatastarError raised by ``func`` is
    logged at WARNING and ``default`` is returned instead. Other
    exceptions propagate unchanged.

    Modifier twins use an empty ``Modifier("")`` fallback so their result
    can always be passed on to another helper.

    Example:
        >>> threshold_safe = safe_variant(threshold, fallback=Modifier(""))
        >>> threshold_safe(2.0)
        ''
        >>> threshold_safe(2.0, default=MOD_FULL)
        '__full'
    """

    @functools.wraps(func)
    def wrapper(*args: Any, default: Any = fallback, **kwargs: Any) -> R | Any:
        try:
            return func(*args, **kwargs)
        except DatastarError as exc:
            logger.warning("%s() failed, using default %r: %s", func.__name__, default, exc)
            return default

    wrapper.__name__ = name or f"{func.__name__.rstrip('_')}_safe"
    wrapper.__qualname__ = wrapper.__name__
    return wrapper


__all__ = [
    "DatastarError",
    "ErrorCode",
    "InvalidArgumentError",
    "PairCountError",
    "SignalEncodingError",
    "safe_variant",
]
