"""Value types shared by the dsattr helpers.

All values are immutable. Helpers never keep them after the call that
consumes them, so they are safe to share across threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

# Attribute name -> value. ``True`` marks a valueless (flag) attribute.
Attributes = dict[str, str | bool]

# A suffix appended verbatim to an attribute name ("__debounce", ".300ms").
Modifier = NewType("Modifier", str)


@dataclass(frozen=True, slots=True)
class Pair:
    """Key/expression binding for the object-literal attributes.

    Used by class_, attr, style and computed. Both fields are inserted
    verbatim: the key is single-quoted, the expression is not touched.
    """

    key: str
    expr: str


@dataclass(frozen=True, slots=True)
class Filter:
    """Include/exclude regex sources for signal filters.

    Values are JavaScript regex literals (``"/^user/"``) and are rendered
    as-is. An empty field is omitted from the rendered object.
    """

    include: str = ""
    exclude: str = ""

    def __bool__(self) -> bool:
        return bool(self.include or self.exclude)


@dataclass(frozen=True, slots=True)
class Signal:
    """A named signal with its value already rendered as a JS literal.

    Build with the typed constructors in :mod:`dsattr.signals`
    (``int_``, ``string``, ``bool_``, ``float_``, ``json_``) rather than
    directly, so the value is guaranteed to be a valid literal.
    """

    key: str
    value: str


def pair(key: str, expr: str) -> Pair:
    """Create a key/expression binding.

    Example:
        >>> class_(pair("hidden", "$isHidden"))
        {'data-class': "{'hidden': $isHidden}"}
    """
    return Pair(key, expr)


# Shorthand for terse template code
p = pair
