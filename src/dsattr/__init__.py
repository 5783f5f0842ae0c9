"""dsattr: Datastar attribute helpers for Python templates.

Builds the ``data-*`` attribute names and values understood by the
Datastar client, as plain dicts that a template spreads onto an element.

Quickstart:
    >>> from dsattr import MOD_DEBOUNCE, ms, on_click, show, merge
    >>> on_click("$open = true", MOD_DEBOUNCE, ms(300))
    {'data-on:click__debounce.300ms': '$open = true'}
    >>> merge(show("$open"), on_click("$open = false"))
    {'data-show': '$open', 'data-on:click': '$open = false'}

Templates:
    >>> from jinja2 import Environment
    >>> from dsattr import install
    >>> env = Environment(autoescape=True)
    >>> _ = install(env)
    >>> env.from_string('<div{{ ds.show("$open") | ds_attrs }}></div>').render()
    '<div data-show="$open"></div>'

Attribute-name grammar:
- ``data-on:{event}{mods}`` for DOM events (colon)
- ``data-{plugin}{mods}`` for plugin attributes such as ``data-on-intersect`` (hyphen)
- ``data-{name}:{key}{mods}`` for keyed attributes
- modifiers (``__debounce``, ``.300ms``, ``.leading``) are appended in call order

Object-literal dialects:
- ``class_``, ``attr``, ``style``, ``computed`` quote keys: ``{'font-bold': $bold}``
- ``signals`` and filters leave keys bare: ``{count: 42}``

Errors:
Helpers raise :class:`InvalidArgumentError` (a ValueError) on malformed
arguments such as a negative duration or an odd key/expression list.
Every fallible helper has a ``*_safe`` twin that logs the error and
returns ``default`` (None) instead.

Thread-Safety:
All helpers are pure functions. The shared scratch-buffer pool hands
each call its own buffer, so helpers can be called from any thread.
"""

from dsattr._types import Attributes, Filter, Modifier, Pair, Signal, p, pair
from dsattr.actions import (
    Option,
    QuotedOption,
    RawOption,
    action,
    delete,
    get,
    opt,
    opt_raw,
    patch,
    post,
    put,
)
from dsattr.attributes import (
    attr,
    attr_key,
    attr_safe,
    bind,
    bind_expr,
    class_,
    class_key,
    class_safe,
    computed,
    computed_key,
    computed_safe,
    effect,
    ignore,
    ignore_morph,
    indicator,
    init,
    json_signals,
    on_intersect,
    on_interval,
    on_signal_patch,
    on_signal_patch_filter,
    preserve_attr,
    ref,
    show,
    style,
    style_key,
    style_safe,
    text,
)
from dsattr.events import *  # noqa: F403
from dsattr.events import EVENT_HELPERS, on_event
from dsattr.exceptions import (
    DatastarError,
    ErrorCode,
    InvalidArgumentError,
    PairCountError,
    SignalEncodingError,
)
from dsattr.globals import DATASTAR_GLOBALS, HelperNamespace, install
from dsattr.modifiers import (
    duration,
    duration_safe,
    ms,
    ms_safe,
    seconds,
    seconds_safe,
    threshold,
    threshold_safe,
)
from dsattr.naming import merge
from dsattr.signals import (
    bool_,
    float_,
    int_,
    json_,
    json_safe,
    signal_key,
    signals,
    signals_json,
    signals_map,
    signals_map_safe,
    string,
)
from dsattr.utils.builder import DEFAULT_POOL, ScratchPool
from dsattr.utils.constants import (
    CAMEL,
    KEBAB,
    LEADING,
    MODIFIERS,
    MOD_CAPTURE,
    MOD_CASE,
    MOD_DEBOUNCE,
    MOD_DELAY,
    MOD_DURATION,
    MOD_EXIT,
    MOD_FULL,
    MOD_HALF,
    MOD_IF_MISSING,
    MOD_ONCE,
    MOD_OUTSIDE,
    MOD_PASSIVE,
    MOD_PREVENT,
    MOD_SELF,
    MOD_STOP,
    MOD_TERSE,
    MOD_THRESHOLD,
    MOD_THROTTLE,
    MOD_VIEW_TRANSITION,
    MOD_WINDOW,
    NO_LEADING,
    NO_TRAILING,
    PASCAL,
    SNAKE,
    TRAILING,
)
from dsattr.utils.html import render_attr, render_attrs

__version__ = "0.4.0"

__all__ = [
    # Types
    "Attributes",
    "Filter",
    "Modifier",
    "Option",
    "Pair",
    "QuotedOption",
    "RawOption",
    "Signal",
    "p",
    "pair",
    # Modifiers
    "MODIFIERS",
    *MODIFIERS,
    "duration",
    "duration_safe",
    "ms",
    "ms_safe",
    "seconds",
    "seconds_safe",
    "threshold",
    "threshold_safe",
    # Signals
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
    # Attributes
    "attr",
    "attr_key",
    "attr_safe",
    "bind",
    "bind_expr",
    "class_",
    "class_key",
    "class_safe",
    "computed",
    "computed_key",
    "computed_safe",
    "effect",
    "ignore",
    "ignore_morph",
    "indicator",
    "init",
    "json_signals",
    "merge",
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
    # Events
    "EVENT_HELPERS",
    "on_event",
    *EVENT_HELPERS,
    # Actions
    "action",
    "delete",
    "get",
    "opt",
    "opt_raw",
    "patch",
    "post",
    "put",
    # Errors
    "DatastarError",
    "ErrorCode",
    "InvalidArgumentError",
    "PairCountError",
    "SignalEncodingError",
    # Rendering and integration
    "DATASTAR_GLOBALS",
    "DEFAULT_POOL",
    "HelperNamespace",
    "ScratchPool",
    "install",
    "render_attr",
    "render_attrs",
]
