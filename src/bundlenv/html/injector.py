#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Injection of the runtime global into rendered HTML."""

from __future__ import annotations

from collections.abc import Mapping

from bs4 import BeautifulSoup
from bs4.element import Doctype, Tag
from provide.foundation import logger
from provide.foundation.serialization import json_dumps

from bundlenv.config.defaults import GLOBAL_NAME


def build_global_script(env: Mapping[str, str]) -> str:
    """JavaScript statement defining ``window.__BUNDLENV``.

    Keys are sorted so the output only depends on the env contents. ``</``
    is escaped so no value can terminate the surrounding script element.
    """
    payload = json_dumps(dict(sorted(env.items()))).replace("</", "<\\/")
    return f"window.{GLOBAL_NAME} = {payload};"


def _after_doctype(document: BeautifulSoup) -> int:
    """Index just past a leading doctype, so markup never precedes it."""
    for index, node in enumerate(document.contents):
        if isinstance(node, Doctype):
            return index + 1
        if isinstance(node, Tag):
            break
    return 0


def inject_global_script(document: BeautifulSoup, env: Mapping[str, str]) -> Tag:
    """Insert the global-defining script as the first child of ``<head>``.

    Being first in ``<head>``, it runs before every application script.
    Existing elements keep their order. A ``<head>`` is created when the
    document has none.

    Returns:
        The inserted script element
    """
    head = document.head
    if head is None:
        head = document.new_tag("head")
        if document.html is not None:
            document.html.insert(0, head)
        else:
            document.insert(_after_doctype(document), head)

    script = document.new_tag("script")
    script.string = build_global_script(env)
    head.insert(0, script)

    logger.debug("Injected runtime global", name=GLOBAL_NAME, variables=len(env))
    return script


def inject_into_html(html: str, env: Mapping[str, str]) -> str:
    """Parse ``html``, inject the runtime global and serialize the document."""
    document = BeautifulSoup(html, "html.parser")
    inject_global_script(document, env)
    return str(document)
