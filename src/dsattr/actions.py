"""Backend action expressions (``@get``, ``@post``, ...).

Each builder returns a Datastar expression string, normally used as the
value of an event or init attribute:

    >>> get("/api/todos/%d", 42)
    "@get('/api/todos/42')"
    >>> on_click(post("/api/todos", opt("contentType", "json")))
    {'data-on:click': "@post('/api/todos',{contentType: 'json'})"}

Positional arguments that are not options are ``%``-format arguments
for the URL. Options may appear anywhere among them and render, in
order, as a JavaScript object after the URL. The URL is always
formatted, so a literal percent sign is written ``%%``.

See https://data-star.dev/reference/actions
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dsattr.exceptions import ErrorCode, InvalidArgumentError
from dsattr.utils.builder import build_entries
from dsattr.utils.constants import (
    ACTION_DELETE,
    ACTION_GET,
    ACTION_PATCH,
    ACTION_POST,
    ACTION_PUT,
)

# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class QuotedOption:
    """Option rendered with a single-quoted value: ``key: 'value'``."""

    key: str
    value: str

    def render(self) -> str:
        return f"'{self.value}'"


@dataclass(frozen=True, slots=True)
class RawOption:
    """Option rendered verbatim: ``key: value`` (booleans, numbers, objects)."""

    key: str
    value: str

    def render(self) -> str:
        return self.value


# Only these two variants are recognized as options by the action builders.
Option = QuotedOption | RawOption


def opt(key: str, value: str) -> QuotedOption:
    """Action option with a quoted string value.

        >>> get("/api/updates", opt("requestCancellation", "disabled"))
        "@get('/api/updates',{requestCancellation: 'disabled'})"
    """
    return QuotedOption(key, value)


def opt_raw(key: str, value: str) -> RawOption:
    """Action option with a raw value.

        >>> get("/api/updates", opt_raw("retryMaxCount", "10"))
        "@get('/api/updates',{retryMaxCount: 10})"
    """
    return RawOption(key, value)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def _format_url(url_format: str, args: list[Any]) -> str:
    try:
        return url_format % tuple(args)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(
            f"cannot format URL {url_format!r} with {len(args)} argument(s): {exc}",
            argument="url_format",
            value=url_format,
            suggestion="Use one %-placeholder per non-option argument and %% for a literal %",
            code=ErrorCode.URL_FORMAT,
        ) from exc


def action(verb: str, url_format: str, *args: Any) -> str:
    """Build ``@{verb}('{url}')`` or ``@{verb}('{url}',{options})``.

    Raises:
        InvalidArgumentError: If the format arguments do not match the
            placeholders in ``url_format``.
    """
    fmt_args = [a for a in args if not isinstance(a, Option)]
    options = [a for a in args if isinstance(a, Option)]
    url = _format_url(url_format, fmt_args)
    if not options:
        return f"@{verb}('{url}')"
    return f"@{verb}('{url}',{build_entries([(o.key, o.render()) for o in options])})"


def get(url_format: str, *args: Any) -> str:
    """Build a ``@get`` action expression."""
    return action(ACTION_GET, url_format, *args)


def post(url_format: str, *args: Any) -> str:
    """Build a ``@post`` action expression."""
    return action(ACTION_POST, url_format, *args)


def put(url_format: str, *args: Any) -> str:
    """Build a ``@put`` action expression."""
    return action(ACTION_PUT, url_format, *args)


def patch(url_format: str, *args: Any) -> str:
    """Build a ``@patch`` action expression."""
    return action(ACTION_PATCH, url_format, *args)


def delete(url_format: str, *args: Any) -> str:
    """Build a ``@delete`` action expression."""
    return action(ACTION_DELETE, url_format, *args)


__all__ = [
    "Option",
    "QuotedOption",
    "RawOption",
    "action",
    "delete",
    "get",
    "opt",
    "opt_raw",
    "patch",
    "post",
    "put",
]
