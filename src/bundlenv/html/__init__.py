#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""HTML templating and runtime global injection."""

from __future__ import annotations

from collections.abc import Mapping

from bundlenv.html.injector import build_global_script, inject_global_script, inject_into_html
from bundlenv.html.templater import render_html


def finalize_html(html: str, env: Mapping[str, str]) -> str:
    """Template ``html`` with ``env``, then inject the runtime global.

    Templating always runs first, on the untouched directives.
    """
    return inject_into_html(render_html(html, env), env)


__all__ = [
    "build_global_script",
    "finalize_html",
    "inject_global_script",
    "inject_into_html",
    "render_html",
]

# 🌐🧩🔚
