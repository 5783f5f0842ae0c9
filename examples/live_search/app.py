"""Live search -- safe helpers for values that come from users.

Debounce delay and reveal threshold are read from query parameters.
The strict helpers raise on bad input; the ``*_safe`` twins log a
warning and fall back to a default, so one bad parameter does not
break the page.

Run:
    python app.py
"""

import logging

from jinja2 import Environment

from dsattr import (
    MOD_DEBOUNCE,
    MOD_THRESHOLD,
    bind,
    get,
    merge,
    ms,
    ms_safe,
    on_input,
    on_intersect,
    opt,
    render_attrs,
    signals_map_safe,
    threshold_safe,
)

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

DEFAULT_DEBOUNCE = ms(300)


def search_box(params: dict[str, str]) -> dict[str, str | bool]:
    """Attributes for the search input, tuned by query parameters."""
    delay = ms_safe(int(params.get("debounce", "300")), default=DEFAULT_DEBOUNCE)
    action = get("/api/search", opt("requestCancellation", "auto"))
    return merge(bind("query"), on_input(action, MOD_DEBOUNCE, delay))


def reveal(params: dict[str, str]) -> dict[str, str | bool]:
    """Attributes for the results sentinel; an invalid threshold drops the modifier pair."""
    tag = threshold_safe(float(params.get("reveal", "0.1")))
    modifiers = (MOD_THRESHOLD, tag) if tag else ()
    return on_intersect("$more = true", *modifiers)


env = Environment(autoescape=True)
page = env.from_string(
    "<div{{ state }}>\n  <input{{ box }}>\n  <div{{ sentinel }}></div>\n</div>"
)


def render(params: dict[str, str]) -> str:
    state = signals_map_safe({"query": params.get("q", ""), "more": False}, default={})
    return page.render(
        state=render_attrs(state),
        box=render_attrs(search_box(params)),
        sentinel=render_attrs(reveal(params)),
    )


good_output = render({"q": "dat", "debounce": "150", "reveal": "0.25"})
bad_output = render({"q": "dat", "debounce": "-5", "reveal": "7"})


def main() -> None:
    print(good_output)
    print()
    print(bad_output)


if __name__ == "__main__":
    main()
