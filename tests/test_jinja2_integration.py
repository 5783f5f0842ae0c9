"""Tests for using the helpers from Jinja2 templates."""

import logging

import pytest
from jinja2 import Environment

from dsattr import DATASTAR_GLOBALS, HelperNamespace, get, install, on_click


class TestInstall:
    def test_registers_namespace_and_filter(self):
        env = Environment()
        ns = install(env)
        assert env.globals["ds"] is ns
        assert "ds_attrs" in env.filters

    def test_custom_names(self):
        env = Environment()
        install(env, namespace="star", filter_name="attrs")
        assert "star" in env.globals
        assert "attrs" in env.filters
        assert "ds" not in env.globals

    def test_skip_filter(self):
        env = Environment()
        install(env, filter_name=None)
        assert "ds_attrs" not in env.filters

    def test_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="dsattr.globals"):
            install(Environment())
        assert "Installed" in caplog.text


class TestHelperNamespace:
    def test_attribute_and_key_access(self):
        ns = HelperNamespace(DATASTAR_GLOBALS)
        assert ns.on_click is on_click
        assert ns["on_click"] is on_click
        assert "on_click" in ns
        assert len(ns) == len(DATASTAR_GLOBALS)

    def test_get_is_the_action(self):
        assert HelperNamespace(DATASTAR_GLOBALS).get is get

    def test_unknown_name(self):
        ns = HelperNamespace(DATASTAR_GLOBALS)
        with pytest.raises(AttributeError, match="no Datastar helper"):
            ns.not_a_helper

    def test_read_only(self):
        ns = HelperNamespace(DATASTAR_GLOBALS)
        with pytest.raises(AttributeError):
            ns.show = None

    def test_globals_include_constants_and_types(self):
        for name in ("MOD_DEBOUNCE", "KEBAB", "Filter", "merge", "pair", "p", "on_event"):
            assert name in DATASTAR_GLOBALS


class TestTemplates:
    def test_render_show(self, jinja_env):
        html = jinja_env.from_string('<div{{ ds.show("$open") | ds_attrs }}></div>').render()
        assert html == '<div data-show="$open"></div>'

    def test_not_double_escaped(self, jinja_env):
        tmpl = jinja_env.from_string(
            "<button{{ ds.on_click(ds.post('/api/save')) | ds_attrs }}>Save</button>"
        )
        assert tmpl.render() == (
            '<button data-on:click="@post(&#39;/api/save&#39;)">Save</button>'
        )

    def test_modifiers_from_namespace(self, jinja_env):
        tmpl = jinja_env.from_string(
            "<input{{ ds.merge(ds.bind('q'), ds.on_input('search()', ds.MOD_DEBOUNCE, "
            "ds.ms(300))) | ds_attrs }}>"
        )
        assert tmpl.render() == (
            '<input data-bind:q data-on:input__debounce.300ms="search()">'
        )

    def test_pairs_and_filter(self, jinja_env):
        tmpl = jinja_env.from_string(
            "<pre{{ ds.json_signals(ds.Filter(include='/user/'), ds.MOD_TERSE) | ds_attrs }}>"
            "</pre><p{{ ds.class_(ds.p('hidden', '$h')) | ds_attrs }}></p>"
        )
        assert tmpl.render() == (
            '<pre data-json-signals__terse="{include: /user/}"></pre>'
            '<p data-class="{&#39;hidden&#39;: $h}"></p>'
        )

    def test_user_value_as_signal(self, jinja_env):
        tmpl = jinja_env.from_string("<div{{ ds.signals(ds.string('name', name)) | ds_attrs }}>")
        html = tmpl.render(name='<script>"x"</script>')
        assert "<script>" not in html
        assert html == (
            '<div data-signals="{name: &#34;&lt;script&gt;\\&#34;x\\&#34;&lt;/script&gt;&#34;}">'
        )

    def test_safe_helper_in_template(self, jinja_env, caplog):
        tmpl = jinja_env.from_string(
            "<div{{ ds.on_intersect('load()', ds.MOD_THRESHOLD, "
            "ds.threshold_safe(t)) | ds_attrs }}></div>"
        )
        with caplog.at_level(logging.WARNING, logger="dsattr.exceptions"):
            assert tmpl.render(t=0.25) == '<div data-on-intersect__threshold.25="load()"></div>'
            assert tmpl.render(t=5) == '<div data-on-intersect__threshold="load()"></div>'
        assert "threshold() failed" in caplog.text

    def test_inherited_template(self, jinja_env_with_loader):
        html = jinja_env_with_loader.get_template("counter.html").render(start=3)
        assert html == (
            "<html><body>"
            '<div data-signals="{count: 3}">'
            '<button data-on:click="$count++">+</button>'
            '<span data-text="$count"></span>'
            "</div></body></html>"
        )
