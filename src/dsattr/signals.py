"""data-signals helpers.

Signals are declared either from typed values, which render as an object
literal with bare keys:

    >>> signals(int_("count", 42), string("msg", "hi"))
    {'data-signals': '{count: 42, msg: "hi"}'}

or from a plain mapping, which renders as compact JSON:

    >>> signals_map({"foo": 1}, MOD_IF_MISSING)
    {'data-signals__ifmissing': '{"foo":1}'}

See https://data-star.dev/reference/attributes#data-signals
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from dsattr._types import Attributes, Modifier, Signal
from dsattr.exceptions import ErrorCode, InvalidArgumentError, SignalEncodingError, safe_variant
from dsattr.naming import keyed, plugin, value
from dsattr.utils.builder import build_signals
from dsattr.utils.constants import ATTR_SIGNALS

_MODIFIER_PREFIXES = ("__", ".")

# ---------------------------------------------------------------------------
# Typed signal constructors
# ---------------------------------------------------------------------------


def int_(key: str, val: int) -> Signal:
    """Integer signal."""
    return Signal(key, str(int(val)))


def string(key: str, val: str) -> Signal:
    """String signal, double-quoted and escaped for JavaScript."""
    return Signal(key, json.dumps(val, ensure_ascii=False))


def bool_(key: str, val: bool) -> Signal:
    """Boolean signal (``true``/``false``)."""
    return Signal(key, "true" if val else "false")


def float_(key: str, val: float) -> Signal:
    """Float signal in plain decimal notation.

    Uses the shortest representation that round-trips and never an
    exponent: ``3.0`` renders ``3``, ``1e21`` renders
    ``1000000000000000000000``. NaN and infinities render as the
    JavaScript globals ``NaN``/``Infinity``.
    """
    return Signal(key, _format_float(float(val)))


def _format_float(val: float) -> str:
    if math.isnan(val):
        return "NaN"
    if math.isinf(val):
        return "Infinity" if val > 0 else "-Infinity"
    text = format(Decimal(repr(val)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _dumps(val: Any) -> str:
    try:
        return json.dumps(val, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SignalEncodingError(
            f"failed to marshal signal value: {exc}",
            argument="value",
            value=val,
            suggestion="Pass only dicts, lists, str, int, float, bool and None",
        ) from exc


def json_(key: str, val: Any) -> Signal:
    """Signal from any JSON-serializable value (lists, dicts, ...).

    Example:
        >>> signals(json_("user", {"name": "Alice", "age": 30}))
        {'data-signals': '{user: {"name":"Alice","age":30}}'}

    Raises:
        SignalEncodingError: If the value cannot be encoded, e.g. a
            circular reference, a set, an arbitrary object or NaN.
    """
    return Signal(key, _dumps(val))


json_safe = safe_variant(json_)

# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------


def signals(*items: Signal | Modifier) -> Attributes:
    """Patch one or more typed signals.

    Signal items become entries of the object; modifier items (strings
    starting with ``__`` or ``.``, or the empty modifier) are appended to
    the attribute name in order.

        >>> signals(int_("count", 0), MOD_IF_MISSING)
        {'data-signals__ifmissing': '{count: 0}'}

    Raises:
        InvalidArgumentError: If an item is neither a Signal nor a modifier.
    """
    entries: list[Signal] = []
    modifiers: list[Modifier] = []
    for item in items:
        if isinstance(item, Signal):
            entries.append(item)
        elif isinstance(item, str) and (not item or item.startswith(_MODIFIER_PREFIXES)):
            modifiers.append(Modifier(item))
        else:
            raise InvalidArgumentError(
                f"signals expects Signal or modifier items, got {item!r}",
                argument="items",
                value=item,
                suggestion="Build signals with int_(), string(), bool_(), float_() or json_()",
                code=ErrorCode.INVALID_SIGNAL_ITEM,
            )
    return value(plugin(ATTR_SIGNALS, modifiers), build_signals(entries))


def signals_map(mapping: Mapping[str, Any], *modifiers: Modifier) -> Attributes:
    """Patch signals from a mapping serialized as compact JSON.

    Raises:
        SignalEncodingError: If the mapping is not JSON-serializable.
    """
    return value(plugin(ATTR_SIGNALS, modifiers), _dumps(dict(mapping)))


signals_map_safe = safe_variant(signals_map)


def signals_json(raw: str, *modifiers: Modifier) -> Attributes:
    """Patch signals from an already serialized value, inserted verbatim."""
    return value(plugin(ATTR_SIGNALS, modifiers), raw)


def signal_key(name: str, expr: str, *modifiers: Modifier) -> Attributes:
    """Patch a single signal with keyed syntax: ``data-signals:{name}``."""
    return value(keyed(ATTR_SIGNALS, name, modifiers), expr)


__all__ = [
    "bool_",
    "float_",
    "int_",
    "json_",
    "json_safe",
    "signal_key",
    "signals",
    "signals_json",
    "signals_map",
    "signals_map_safe",
    "string",
]
