"""DOM event helpers: ``data-on:{event}``.

Each ``on_<event>`` helper returns ``{"data-on:{event}{modifiers}": expr}``:

    >>> on_click("$open = true")
    {'data-on:click': '$open = true'}
    >>> on_input("search()", MOD_DEBOUNCE, ms(300), LEADING)
    {'data-on:input__debounce.300ms.leading': 'search()'}

Use :func:`on_event` for custom events and web-component events.

See https://data-star.dev/reference/attributes#data-on
"""

from __future__ import annotations

from collections.abc import Callable

from dsattr._types import Attributes, Modifier
from dsattr.naming import on, value
from dsattr.utils.constants import DOM_EVENTS

EventHelper = Callable[..., Attributes]


def on_event(event: str, expr: str, *modifiers: Modifier) -> Attributes:
    """Handle any event by name.

        >>> on_event("table-select", "$selected = evt.detail.ids")
        {'data-on:table-select': '$selected = evt.detail.ids'}
    """
    return value(on(event, modifiers), expr)


def _event_helper(suffix: str) -> EventHelper:
    event = DOM_EVENTS[suffix]

    def helper(expr: str, *modifiers: Modifier) -> Attributes:
        return value(on(event, modifiers), expr)

    helper.__name__ = helper.__qualname__ = f"on_{suffix}"
    helper.__doc__ = f'Handle the "{event}" event.'
    return helper


# Mouse events
on_click = _event_helper("click")
on_dbl_click = _event_helper("dbl_click")
on_mouse_down = _event_helper("mouse_down")
on_mouse_up = _event_helper("mouse_up")
on_mouse_over = _event_helper("mouse_over")
on_mouse_out = _event_helper("mouse_out")
on_mouse_move = _event_helper("mouse_move")
on_mouse_enter = _event_helper("mouse_enter")
on_mouse_leave = _event_helper("mouse_leave")
on_context_menu = _event_helper("context_menu")

# Keyboard events
on_key_down = _event_helper("key_down")
on_key_up = _event_helper("key_up")
on_key_press = _event_helper("key_press")

# Focus events
on_focus = _event_helper("focus")
on_blur = _event_helper("blur")
on_focus_in = _event_helper("focus_in")
on_focus_out = _event_helper("focus_out")

# Form events
on_submit = _event_helper("submit")
on_reset = _event_helper("reset")
on_input = _event_helper("input")
on_change = _event_helper("change")
on_invalid = _event_helper("invalid")
on_select = _event_helper("select")

# Drag events
on_drag = _event_helper("drag")
on_drag_start = _event_helper("drag_start")
on_drag_end = _event_helper("drag_end")
on_drag_over = _event_helper("drag_over")
on_drag_enter = _event_helper("drag_enter")
on_drag_leave = _event_helper("drag_leave")
on_drop = _event_helper("drop")

# Touch events
on_touch_start = _event_helper("touch_start")
on_touch_end = _event_helper("touch_end")
on_touch_move = _event_helper("touch_move")
on_touch_cancel = _event_helper("touch_cancel")

# Pointer events
on_pointer_down = _event_helper("pointer_down")
on_pointer_up = _event_helper("pointer_up")
on_pointer_move = _event_helper("pointer_move")
on_pointer_over = _event_helper("pointer_over")
on_pointer_out = _event_helper("pointer_out")
on_pointer_enter = _event_helper("pointer_enter")
on_pointer_leave = _event_helper("pointer_leave")
on_pointer_cancel = _event_helper("pointer_cancel")
on_got_pointer_capture = _event_helper("got_pointer_capture")
on_lost_pointer_capture = _event_helper("lost_pointer_capture")

# Scroll / wheel events
on_scroll = _event_helper("scroll")
on_wheel = _event_helper("wheel")

# Animation / transition events
on_animation_start = _event_helper("animation_start")
on_animation_end = _event_helper("animation_end")
on_animation_iteration = _event_helper("animation_iteration")
on_transition_end = _event_helper("transition_end")

# Media events
on_load = _event_helper("load")
on_error = _event_helper("error")

# Clipboard events
on_copy = _event_helper("copy")
on_cut = _event_helper("cut")
on_paste = _event_helper("paste")

# helper name -> helper, in DOM_EVENTS order
EVENT_HELPERS: dict[str, EventHelper] = {
    f"on_{suffix}": globals()[f"on_{suffix}"] for suffix in DOM_EVENTS
}

__all__ = ["EVENT_HELPERS", "on_event", *EVENT_HELPERS]
