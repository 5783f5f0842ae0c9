"""Pytest configuration and fixtures for dsattr tests."""

import pytest
from jinja2 import DictLoader, Environment

from dsattr import install


@pytest.fixture
def jinja_env():
    """Autoescaping Jinja2 environment with the helpers installed."""
    env = Environment(autoescape=True)
    install(env)
    return env


@pytest.fixture
def jinja_env_with_loader():
    """Jinja2 environment with helpers and a few page templates."""
    loader = DictLoader(
        {
            "base.html": (
                "<html><body>{% block body %}{% endblock %}</body></html>"
            ),
            "counter.html": (
                '{% extends "base.html" %}{% block body %}'
                "<div{{ ds.signals(ds.int_('count', start)) | ds_attrs }}>"
                "<button{{ ds.on_click('$count++') | ds_attrs }}>+</button>"
                "<span{{ ds.text('$count') | ds_attrs }}></span>"
                "</div>{% endblock %}"
            ),
        }
    )
    env = Environment(loader=loader, autoescape=True)
    install(env)
    return env


def assert_single(attrs: dict, name: str, value: object) -> None:
    """Assert an attribute map holds exactly one entry with the given name and value.

    Args:
        attrs: The attribute map returned by a helper.
        name: Expected attribute name.
        value: Expected attribute value (``True`` for flag attributes).
    """
    assert attrs == {name: value}, (
        f"Attribute map mismatch:\n"
        f"  Actual: {attrs!r}\n"
        f"  Expected: {{{name!r}: {value!r}}}"
    )
