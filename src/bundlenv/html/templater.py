#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""HTML templating against the merged environment.

Directives use EJS-style delimiters so they cannot collide with the host
build tool's own placeholders (``%VITE_X%``) or with client-side template
syntax (``{{ x }}``) left in the page:

- ``<%= env.API_URL %>`` outputs a value, HTML-escaped
- ``<% if env.MODE == "production" %>...<% endif %>`` controls output
- ``<%# note %>`` is dropped

``import.meta.env`` is accepted as an alias of ``env`` inside a directive, so
the same expression reads identically in page markup and in bundled code.
"""

from __future__ import annotations

from collections.abc import Mapping
import re

from jinja2 import Environment, TemplateError

from bundlenv.config.defaults import BUILD_TIME_ENV_ACCESSOR, TEMPLATE_ENV_NAME
from bundlenv.exceptions import TemplateRenderError

_DIRECTIVE = re.compile(r"<%.*?%>", re.DOTALL)

_ENVIRONMENT = Environment(
    block_start_string="<%",
    block_end_string="%>",
    variable_start_string="<%=",
    variable_end_string="%>",
    comment_start_string="<%#",
    comment_end_string="%>",
    autoescape=True,
    keep_trailing_newline=True,
)


def _alias_build_time_accessor(html: str) -> str:
    return _DIRECTIVE.sub(
        lambda match: match.group(0).replace(BUILD_TIME_ENV_ACCESSOR, TEMPLATE_ENV_NAME),
        html,
    )


def render_html(html: str, env: Mapping[str, str]) -> str:
    """Render the directives in ``html`` with ``env`` as context.

    Args:
        html: Raw HTML text of an entry document
        env: Merged environment

    Returns:
        The rendered HTML; text outside directives is unchanged

    Raises:
        TemplateRenderError: If a directive is malformed
    """
    environment = _ENVIRONMENT
    if "\r\n" in html:
        environment = _ENVIRONMENT.overlay(newline_sequence="\r\n")

    try:
        template = environment.from_string(_alias_build_time_accessor(html))
        return template.render({TEMPLATE_ENV_NAME: dict(env)})
    except TemplateError as e:
        raise TemplateRenderError(f"Invalid template directive in HTML: {e}") from e
