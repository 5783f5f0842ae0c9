"""Render attribute maps as HTML attribute text.

Values are escaped with MarkupSafe, the escaper Jinja2 uses, and the
result is returned as ``Markup`` so autoescaping templates do not escape
it a second time:

    >>> render_attrs(merge(show("$open"), on_click("$open = !$open")))
    Markup(' data-show="$open" data-on:click="$open = !$open"')
    >>> render_attrs(bind("name"))
    Markup(' data-bind:name')
"""

from __future__ import annotations

from collections.abc import Mapping

from markupsafe import Markup, escape


def render_attr(name: str, value: object) -> Markup:
    """Render one attribute with a leading space.

    ``True`` renders the bare name; ``False`` and ``None`` render nothing.
    """
    if value is True:
        return Markup(" ") + escape(name)
    if value is False or value is None:
        return Markup("")
    return Markup(' {}="{}"').format(name, value)


def render_attrs(attrs: Mapping[str, object]) -> Markup:
    """Render a whole attribute map, in mapping order."""
    if not attrs:
        return Markup("")
    return Markup("").join(render_attr(name, value) for name, value in attrs.items())


__all__ = ["render_attr", "render_attrs"]
