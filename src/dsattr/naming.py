"""Attribute-name assembly and attribute-map helpers.

Grammar of every name this package emits:

    data-on:{event}{modifiers}          DOM event handlers
    data-{name}{modifiers}              plain and plugin attributes
    data-{name}:{key}{modifiers}        keyed attributes

Modifiers are appended in the order the caller passes them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from dsattr._types import Attributes, Modifier
from dsattr.utils.builder import join_modifiers
from dsattr.utils.constants import PREFIX, PREFIX_ON, SEP_COLON


def on(event: str, modifiers: Sequence[Modifier] = ()) -> str:
    """Build ``data-on:{event}{modifiers}``."""
    return PREFIX_ON + event + join_modifiers(modifiers)


def plugin(name: str, modifiers: Sequence[Modifier] = ()) -> str:
    """Build ``data-{name}{modifiers}`` (hyphenated, no colon)."""
    return PREFIX + name + join_modifiers(modifiers)


def keyed(name: str, key: str, modifiers: Sequence[Modifier] = ()) -> str:
    """Build ``data-{name}:{key}{modifiers}``."""
    return PREFIX + name + SEP_COLON + key + join_modifiers(modifiers)


def value(name: str, val: str) -> Attributes:
    """Single name/value attribute map."""
    return {name: val}


def flag(name: str) -> Attributes:
    """Single valueless attribute map (rendered as a bare name)."""
    return {name: True}


def merge(*attrs: Mapping[str, str | bool]) -> Attributes:
    """Combine attribute maps into a new one; later maps win on collisions.

    Use when an element needs several helpers at once:

        >>> merge(show("$open"), on_click("$open = false"))
        {'data-show': '$open', 'data-on:click': '$open = false'}

    The inputs are not modified.
    """
    result: Attributes = {}
    for a in attrs:
        result.update(a)
    return result


__all__ = ["flag", "keyed", "merge", "on", "plugin", "value"]
