#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for html/injector.py - the runtime global script."""

from __future__ import annotations

import json

from bs4 import BeautifulSoup

from bundlenv.html import finalize_html
from bundlenv.html.injector import build_global_script, inject_global_script, inject_into_html

PREFIX = "window.__BUNDLENV = "

PAGE = (
    "<!DOCTYPE html><html><head><title>x</title>"
    '<script type="module" src="/assets/index.js"></script></head>'
    "<body><script>boot()</script></body></html>"
)


def _payload(script_text: str) -> dict[str, str]:
    assert script_text.startswith(PREFIX)
    assert script_text.endswith(";")
    return json.loads(script_text[len(PREFIX) : -1])


class TestBuildGlobalScript:
    """Test build_global_script."""

    def test_defines_global_with_env(self) -> None:
        env = {"B": "2", "A": "1"}
        assert _payload(build_global_script(env)) == env

    def test_keys_are_sorted(self) -> None:
        script = build_global_script({"B": "2", "A": "1"})
        assert script.index('"A"') < script.index('"B"')

    def test_closing_tag_is_escaped(self) -> None:
        script = build_global_script({"X": "</script><b>"})
        assert "</script>" not in script
        assert _payload(script) == {"X": "</script><b>"}


class TestInjectGlobalScript:
    """Test inject_global_script."""

    def test_script_is_first_in_head(self) -> None:
        document = BeautifulSoup(PAGE, "html.parser")
        inserted = inject_global_script(document, {"A": "1"})

        assert document.head is not None
        assert document.head.contents[0] is inserted
        assert document.find("script") is inserted

    def test_existing_scripts_keep_order(self) -> None:
        html = inject_into_html(PAGE, {"A": "1"})
        scripts = BeautifulSoup(html, "html.parser").find_all("script")

        assert len(scripts) == 3
        assert _payload(scripts[0].string) == {"A": "1"}
        assert scripts[1]["src"] == "/assets/index.js"
        assert scripts[2].string == "boot()"

    def test_exactly_one_global_script(self) -> None:
        html = inject_into_html(PAGE, {"A": "1"})
        assert html.count(PREFIX) == 1

    def test_head_is_created_when_missing(self) -> None:
        html = inject_into_html("<html><body><p>hi</p></body></html>", {"A": "1"})
        document = BeautifulSoup(html, "html.parser")

        assert document.head is not None
        assert _payload(document.head.script.string) == {"A": "1"}
        assert document.body.p.string == "hi"

    def test_fragment_without_html_element(self) -> None:
        html = inject_into_html("<p>hi</p>", {"A": "1"})
        assert html.startswith("<head><script>")
        assert html.endswith("<p>hi</p>")

    def test_doctype_stays_first_without_html_element(self) -> None:
        html = inject_into_html("<!DOCTYPE html><p>hi</p>", {"A": "1"})
        assert html.startswith("<!DOCTYPE html><head><script>")
        assert html.endswith("<p>hi</p>")

    def test_ampersand_is_not_entity_escaped(self) -> None:
        html = inject_into_html(PAGE, {"Q": "a=1&b=2"})
        script = BeautifulSoup(html, "html.parser").find("script")
        assert _payload(script.string) == {"Q": "a=1&b=2"}


class TestFinalizeHtml:
    """Test templating followed by injection."""

    def test_templates_then_injects(self) -> None:
        html = "<html><head><title><%= env.TITLE %></title></head><body></body></html>"
        result = finalize_html(html, {"TITLE": "Shop"})
        document = BeautifulSoup(result, "html.parser")

        assert document.title.string == "Shop"
        assert _payload(document.find("script").string) == {"TITLE": "Shop"}

    def test_deterministic(self) -> None:
        html = "<html><head><title><%= env.TITLE %></title></head></html>"
        env = {"TITLE": "Shop", "API_URL": "https://a"}
        assert finalize_html(html, env) == finalize_html(html, env)


# 🌐🧩🔚
