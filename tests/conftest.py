#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for bundlenv tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from bundlenv.config import ResolvedBuildConfig

INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title><%= env.TITLE %></title>
<script type="module" src="/src/main.ts"></script>
</head>
<body>
<div id="app" data-api="<%= import.meta.env.API_URL %>">{{ message }}</div>
</body>
</html>
"""


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def index_html() -> str:
    """An entry document using both directive spellings and client-side template syntax."""
    return INDEX_HTML


@pytest.fixture
def app_root(tmp_path: Path) -> Path:
    """An application root with an empty src/ directory."""
    root = tmp_path / "app"
    (root / "src").mkdir(parents=True)
    return root


@pytest.fixture
def write_env_file(app_root: Path) -> Callable[[str, str], Path]:
    """Write an env file (``.env`` or ``.env.local``) into the app root."""

    def _write(name: str, content: str) -> Path:
        path = app_root / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_config(app_root: Path) -> Callable[..., ResolvedBuildConfig]:
    """Build a ResolvedBuildConfig rooted at the app root."""

    def _make(command: str = "build", **env: Any) -> ResolvedBuildConfig:
        base_env: dict[str, Any] = {"BASE_URL": "/", "MODE": "production", "PROD": True}
        base_env.update(env)
        return ResolvedBuildConfig(root=app_root, command=command, env=base_env)

    return _make


# 🌐🧩🔚
