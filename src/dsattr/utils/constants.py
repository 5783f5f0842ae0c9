"""Shared constants for dsattr.

Single source of truth for Datastar attribute names, DOM event names,
prefixes and modifier tokens. Helper modules build full attribute names
from these segments; only the modifier tokens are part of the public API.
"""

from __future__ import annotations

from dsattr._types import Modifier

# ---------------------------------------------------------------------------
# Prefixes and separators
# ---------------------------------------------------------------------------

PREFIX = "data-"
# DOM event handlers use a colon, plugin watchers (on-intersect, ...) a hyphen
PREFIX_ON = "data-on:"
SEP_COLON = ":"

# ---------------------------------------------------------------------------
# Attribute name segments (without the "data-" prefix)
# ---------------------------------------------------------------------------

ATTR_ATTR = "attr"
ATTR_BIND = "bind"
ATTR_CLASS = "class"
ATTR_COMPUTED = "computed"
ATTR_EFFECT = "effect"
ATTR_IGNORE = "ignore"
ATTR_IGNORE_MORPH = "ignore-morph"
ATTR_INDICATOR = "indicator"
ATTR_INIT = "init"
ATTR_JSON_SIGNALS = "json-signals"
ATTR_ON_INTERSECT = "on-intersect"
ATTR_ON_INTERVAL = "on-interval"
ATTR_ON_SIGNAL_PATCH = "on-signal-patch"
ATTR_ON_SIGNAL_PATCH_FILTER = "on-signal-patch-filter"
ATTR_PRESERVE_ATTR = "preserve-attr"
ATTR_REF = "ref"
ATTR_SHOW = "show"
ATTR_SIGNALS = "signals"
ATTR_STYLE = "style"
ATTR_TEXT = "text"

# ---------------------------------------------------------------------------
# SSE action verbs
# ---------------------------------------------------------------------------

ACTION_GET = "get"
ACTION_POST = "post"
ACTION_PUT = "put"
ACTION_PATCH = "patch"
ACTION_DELETE = "delete"

# ---------------------------------------------------------------------------
# DOM events
# Source: WHATWG HTML Living Standard, grouped as the on_* helpers are.
# Maps helper suffix -> event name.
# ---------------------------------------------------------------------------

DOM_EVENTS: dict[str, str] = {
    # Mouse events
    "click": "click",
    "dbl_click": "dblclick",
    "mouse_down": "mousedown",
    "mouse_up": "mouseup",
    "mouse_over": "mouseover",
    "mouse_out": "mouseout",
    "mouse_move": "mousemove",
    "mouse_enter": "mouseenter",
    "mouse_leave": "mouseleave",
    "context_menu": "contextmenu",
    # Keyboard events
    "key_down": "keydown",
    "key_up": "keyup",
    "key_press": "keypress",
    # Focus events
    "focus": "focus",
    "blur": "blur",
    "focus_in": "focusin",
    "focus_out": "focusout",
    # Form events
    "submit": "submit",
    "reset": "reset",
    "input": "input",
    "change": "change",
    "invalid": "invalid",
    "select": "select",
    # Drag events
    "drag": "drag",
    "drag_start": "dragstart",
    "drag_end": "dragend",
    "drag_over": "dragover",
    "drag_enter": "dragenter",
    "drag_leave": "dragleave",
    "drop": "drop",
    # Touch events
    "touch_start": "touchstart",
    "touch_end": "touchend",
    "touch_move": "touchmove",
    "touch_cancel": "touchcancel",
    # Pointer events
    "pointer_down": "pointerdown",
    "pointer_up": "pointerup",
    "pointer_move": "pointermove",
    "pointer_over": "pointerover",
    "pointer_out": "pointerout",
    "pointer_enter": "pointerenter",
    "pointer_leave": "pointerleave",
    "pointer_cancel": "pointercancel",
    "got_pointer_capture": "gotpointercapture",
    "lost_pointer_capture": "lostpointercapture",
    # Scroll / wheel events
    "scroll": "scroll",
    "wheel": "wheel",
    # Animation / transition events
    "animation_start": "animationstart",
    "animation_end": "animationend",
    "animation_iteration": "animationiteration",
    "transition_end": "transitionend",
    # Media events
    "load": "load",
    "error": "error",
    # Clipboard events
    "copy": "copy",
    "cut": "cut",
    "paste": "paste",
}

# ---------------------------------------------------------------------------
# Modifiers: double-underscore tags (listener behavior and timing)
# ---------------------------------------------------------------------------

MOD_CAPTURE = Modifier("__capture")
MOD_CASE = Modifier("__case")
MOD_DEBOUNCE = Modifier("__debounce")
MOD_DELAY = Modifier("__delay")
MOD_DURATION = Modifier("__duration")
MOD_EXIT = Modifier("__exit")
MOD_FULL = Modifier("__full")
MOD_HALF = Modifier("__half")
MOD_IF_MISSING = Modifier("__ifmissing")
MOD_ONCE = Modifier("__once")
MOD_OUTSIDE = Modifier("__outside")
MOD_PASSIVE = Modifier("__passive")
MOD_PREVENT = Modifier("__prevent")
MOD_SELF = Modifier("__self")
MOD_STOP = Modifier("__stop")
MOD_TERSE = Modifier("__terse")
MOD_THRESHOLD = Modifier("__threshold")
MOD_THROTTLE = Modifier("__throttle")
MOD_VIEW_TRANSITION = Modifier("__viewtransition")
MOD_WINDOW = Modifier("__window")

# ---------------------------------------------------------------------------
# Modifiers: dot tags (case conversion and timing edges)
# ---------------------------------------------------------------------------

CAMEL = Modifier(".camel")
KEBAB = Modifier(".kebab")
SNAKE = Modifier(".snake")
PASCAL = Modifier(".pascal")
LEADING = Modifier(".leading")
NO_LEADING = Modifier(".noleading")
NO_TRAILING = Modifier(".notrailing")
TRAILING = Modifier(".trailing")

MODIFIERS: dict[str, Modifier] = {
    name: value
    for name, value in globals().items()
    if name.isupper() and isinstance(value, str) and value.startswith(("__", "."))
}
