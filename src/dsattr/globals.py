"""Template-engine integration.

Registers every helper under one namespace global plus a filter that
turns attribute maps into HTML:

    from jinja2 import Environment
    from dsattr import install

    env = Environment(autoescape=True)
    install(env)

Templates then spread attributes with the filter:

    <button{{ ds.on_click(ds.post("/api/save"), ds.MOD_PREVENT) | ds_attrs }}>Save</button>
    <div{{ ds.merge(ds.show("$open"), ds.ref("panel")) | ds_attrs }}></div>

Any environment whose ``globals`` and ``filters`` behave like dicts
(Jinja2 or any engine built the same way) can be passed to :func:`install`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from dsattr import actions, attributes, events, modifiers, naming, signals
from dsattr._types import Filter, pair
from dsattr.utils.constants import MODIFIERS
from dsattr.utils.html import render_attrs

logger = logging.getLogger(__name__)


class HelperNamespace:
    """Read-only bag of helpers, reachable by attribute or by key.

    Templates call ``ds.on_click(...)``; Python code may also iterate
    over it or look names up with ``ds["on_click"]``. Not a Mapping, so
    ``ds.get`` resolves to the @get action builder.
    """

    __slots__ = ("_helpers",)

    def __init__(self, helpers: Mapping[str, Any]):
        object.__setattr__(self, "_helpers", MappingProxyType(dict(helpers)))

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._helpers[name]
        except KeyError:
            raise AttributeError(f"no Datastar helper named {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("HelperNamespace is read-only")

    def __getitem__(self, name: str) -> Any:
        return self._helpers[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._helpers)

    def __len__(self) -> int:
        return len(self._helpers)

    def __contains__(self, name: object) -> bool:
        return name in self._helpers

    def __repr__(self) -> str:
        return f"<HelperNamespace {len(self._helpers)} helpers>"


def _public(module: Any) -> dict[str, Any]:
    return {name: getattr(module, name) for name in module.__all__}


DATASTAR_GLOBALS: Mapping[str, Any] = MappingProxyType(
    {
        **_public(modifiers),
        **_public(signals),
        **_public(attributes),
        **_public(events),
        **_public(actions),
        **MODIFIERS,
        "Filter": Filter,
        "merge": naming.merge,
        "pair": pair,
        "p": pair,
    }
)


def install(
    env: Any,
    *,
    namespace: str = "ds",
    filter_name: str | None = "ds_attrs",
) -> HelperNamespace:
    """Register the helpers on a template environment.

    Args:
        env: Environment exposing dict-like ``globals`` and ``filters``.
        namespace: Global name the helpers are reachable under.
        filter_name: Name of the attribute-rendering filter, or None to
            skip registering it.

    Returns:
        The namespace object that was registered.
    """
    ns = HelperNamespace(DATASTAR_GLOBALS)
    env.globals[namespace] = ns
    if filter_name is not None:
        env.filters[filter_name] = render_attrs
    logger.debug(
        "Installed %d Datastar helpers as %r (filter: %r)", len(ns), namespace, filter_name
    )
    return ns


__all__ = ["DATASTAR_GLOBALS", "HelperNamespace", "install"]
