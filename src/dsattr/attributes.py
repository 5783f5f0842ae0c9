"""Datastar attribute helpers.

Every helper returns a fresh attribute map ready to be spread onto an
element:

    >>> show("$visible")
    {'data-show': '$visible'}
    >>> class_("hidden", "$isHidden", "font-bold", "$isBold")
    {'data-class': "{'hidden': $isHidden, 'font-bold': $isBold}"}
    >>> bind("name")
    {'data-bind:name': True}

Expressions are inserted verbatim. They are JavaScript evaluated by
Datastar in the browser, so never build them from untrusted input.

See https://data-star.dev/reference/attributes
"""

from __future__ import annotations

from dsattr._types import Attributes, Filter, Modifier, Pair
from dsattr.exceptions import ErrorCode, InvalidArgumentError, PairCountError, safe_variant
from dsattr.naming import flag, keyed, plugin, value
from dsattr.utils.builder import arrow, build_filter, build_pairs
from dsattr.utils.constants import (
    ATTR_ATTR,
    ATTR_BIND,
    ATTR_CLASS,
    ATTR_COMPUTED,
    ATTR_EFFECT,
    ATTR_IGNORE,
    ATTR_IGNORE_MORPH,
    ATTR_INDICATOR,
    ATTR_INIT,
    ATTR_JSON_SIGNALS,
    ATTR_ON_INTERSECT,
    ATTR_ON_INTERVAL,
    ATTR_ON_SIGNAL_PATCH,
    ATTR_ON_SIGNAL_PATCH_FILTER,
    ATTR_PRESERVE_ATTR,
    ATTR_REF,
    ATTR_SHOW,
    ATTR_STYLE,
    ATTR_TEXT,
    PREFIX,
)

# ---------------------------------------------------------------------------
# Pair objects
# ---------------------------------------------------------------------------


def collect_pairs(items: tuple[Pair | str, ...], what: str) -> list[Pair]:
    """Normalize ``Pair`` items and flat ``key, expr`` strings into pairs.

    Both styles may be mixed; flat strings are consumed two at a time.

    Raises:
        PairCountError: If a flat key has no expression after it.
        InvalidArgumentError: If an item is neither a Pair nor a string.
    """
    pairs: list[Pair] = []
    pending: str | None = None
    for item in items:
        if isinstance(item, Pair):
            if pending is not None:
                raise _missing_expression(what, pending, items)
            pairs.append(item)
        elif isinstance(item, str):
            if pending is None:
                pending = item
            else:
                pairs.append(Pair(pending, item))
                pending = None
        else:
            raise InvalidArgumentError(
                f"{what} expects Pair items or key/expression strings, got {type(item).__name__}",
                argument="items",
                value=item,
                suggestion="Build items with pair(key, expr)",
                code=ErrorCode.INVALID_PAIR_ITEM,
            )
    if pending is not None:
        raise _missing_expression(what, pending, items)
    return pairs


def _missing_expression(what: str, key: str, items: tuple[Pair | str, ...]) -> PairCountError:
    return PairCountError(
        f"each {what} key must have an expression, {key!r} has none",
        argument="items",
        value=items,
        suggestion="Pass keys and expressions in pairs, or use pair(key, expr)",
    )


def computed(*items: Pair | str) -> Attributes:
    """Create read-only computed signals; each expression becomes ``() => expr``.

        >>> computed("total", "$price * $qty")
        {'data-computed': "{'total': () => $price * $qty}"}

    See https://data-star.dev/reference/attributes#data-computed
    """
    pairs = collect_pairs(items, "computed signal")
    return value(PREFIX + ATTR_COMPUTED, build_pairs(pairs, arrow))


def computed_key(name: str, expr: str, *modifiers: Modifier) -> Attributes:
    """Create a single computed signal with keyed syntax."""
    return value(keyed(ATTR_COMPUTED, name, modifiers), expr)


def class_(*items: Pair | str) -> Attributes:
    """Add or remove CSS classes from an object of class -> condition.

    See https://data-star.dev/reference/attributes#data-class
    """
    return value(PREFIX + ATTR_CLASS, build_pairs(collect_pairs(items, ATTR_CLASS)))


def class_key(name: str, expr: str, *modifiers: Modifier) -> Attributes:
    """Add or remove a single CSS class with keyed syntax."""
    return value(keyed(ATTR_CLASS, name, modifiers), expr)


def attr(*items: Pair | str) -> Attributes:
    """Set HTML attributes from an object of attribute -> expression.

    See https://data-star.dev/reference/attributes#data-attr
    """
    return value(PREFIX + ATTR_ATTR, build_pairs(collect_pairs(items, ATTR_ATTR)))


def attr_key(name: str, expr: str, *modifiers: Modifier) -> Attributes:
    """Set a single HTML attribute with keyed syntax.

        >>> attr_key("title", "'Theme: ' + $theme")
        {'data-attr:title': "'Theme: ' + $theme"}
    """
    return value(keyed(ATTR_ATTR, name, modifiers), expr)


def style(*items: Pair | str) -> Attributes:
    """Set inline styles from an object of property -> expression.

    See https://data-star.dev/reference/attributes#data-style
    """
    return value(PREFIX + ATTR_STYLE, build_pairs(collect_pairs(items, ATTR_STYLE)))


def style_key(prop: str, expr: str, *modifiers: Modifier) -> Attributes:
    """Set a single inline style with keyed syntax."""
    return value(keyed(ATTR_STYLE, prop, modifiers), expr)


computed_safe = safe_variant(computed)
class_safe = safe_variant(class_)
attr_safe = safe_variant(attr)
style_safe = safe_variant(style)

# ---------------------------------------------------------------------------
# Expression attributes
# ---------------------------------------------------------------------------


def show(expr: str) -> Attributes:
    """Show or hide the element based on a boolean expression."""
    return value(PREFIX + ATTR_SHOW, expr)


def text(expr: str) -> Attributes:
    """Bind the element's text content to an expression."""
    return value(PREFIX + ATTR_TEXT, expr)


def effect(expr: str) -> Attributes:
    """Run an expression on load and whenever its signals change."""
    return value(PREFIX + ATTR_EFFECT, expr)


def init(expr: str, *modifiers: Modifier) -> Attributes:
    """Run an expression when the element is loaded into the DOM.

        >>> init("@get('/updates')", MOD_DELAY, ms(500))
        {'data-init__delay.500ms': "@get('/updates')"}
    """
    return value(plugin(ATTR_INIT, modifiers), expr)


def ref(name: str, *modifiers: Modifier) -> Attributes:
    """Create a signal holding a reference to the element."""
    return value(plugin(ATTR_REF, modifiers), name)


def indicator(name: str, *modifiers: Modifier) -> Attributes:
    """Create a boolean signal that is true while a fetch is in flight."""
    return value(plugin(ATTR_INDICATOR, modifiers), name)


# ---------------------------------------------------------------------------
# Binding
# ---------------------------------------------------------------------------


def bind(name: str, *modifiers: Modifier) -> Attributes:
    """Two-way bind a signal to the element's value (keyed syntax).

        >>> bind("table.search")
        {'data-bind:table.search': True}
    """
    return flag(keyed(ATTR_BIND, name, modifiers))


def bind_expr(name: str) -> Attributes:
    """Two-way bind a signal using value syntax: ``data-bind="name"``."""
    return value(PREFIX + ATTR_BIND, name)


# ---------------------------------------------------------------------------
# Plugin watchers
# ---------------------------------------------------------------------------


def on_intersect(expr: str, *modifiers: Modifier) -> Attributes:
    """Run an expression when the element intersects the viewport.

        >>> on_intersect("$visible = true", MOD_THRESHOLD, threshold(0.25))
        {'data-on-intersect__threshold.25': '$visible = true'}
    """
    return value(plugin(ATTR_ON_INTERSECT, modifiers), expr)


def on_interval(expr: str, *modifiers: Modifier) -> Attributes:
    """Run an expression at a regular interval (Datastar default: 1s)."""
    return value(plugin(ATTR_ON_INTERVAL, modifiers), expr)


def on_signal_patch(expr: str, *modifiers: Modifier) -> Attributes:
    """Run an expression whenever signals are patched."""
    return value(plugin(ATTR_ON_SIGNAL_PATCH, modifiers), expr)


def on_signal_patch_filter(signal_filter: Filter) -> Attributes:
    """Restrict which signals trigger ``data-on-signal-patch``."""
    return value(PREFIX + ATTR_ON_SIGNAL_PATCH_FILTER, build_filter(signal_filter))


# ---------------------------------------------------------------------------
# DOM processing
# ---------------------------------------------------------------------------


def ignore(*modifiers: Modifier) -> Attributes:
    """Skip Datastar processing for the element and its descendants."""
    return flag(plugin(ATTR_IGNORE, modifiers))


def ignore_morph() -> Attributes:
    """Skip morphing the element and its children on element patches."""
    return flag(PREFIX + ATTR_IGNORE_MORPH)


def json_signals(signal_filter: Filter = Filter(), *modifiers: Modifier) -> Attributes:
    """Set text content to the JSON of the current signals.

    An empty filter renders a flag attribute.

        >>> json_signals(Filter(include="/user/"), MOD_TERSE)
        {'data-json-signals__terse': '{include: /user/}'}
    """
    name = plugin(ATTR_JSON_SIGNALS, modifiers)
    if not signal_filter:
        return flag(name)
    return value(name, build_filter(signal_filter))


def preserve_attr(*attrs: str) -> Attributes:
    """Preserve the given attributes when morphing: ``data-preserve-attr="open class"``."""
    return value(PREFIX + ATTR_PRESERVE_ATTR, " ".join(attrs))


__all__ = [
    "attr",
    "attr_key",
    "attr_safe",
    "bind",
    "bind_expr",
    "class_",
    "class_key",
    "class_safe",
    "collect_pairs",
    "computed",
    "computed_key",
    "computed_safe",
    "effect",
    "ignore",
    "ignore_morph",
    "indicator",
    "init",
    "json_signals",
    "on_intersect",
    "on_interval",
    "on_signal_patch",
    "on_signal_patch_filter",
    "preserve_attr",
    "ref",
    "show",
    "style",
    "style_key",
    "style_safe",
    "text",
]
