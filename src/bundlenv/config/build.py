#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build-tool inputs and the production/dev-server build variant."""

from __future__ import annotations

import os
from pathlib import Path
import posixpath
from typing import Any

from attrs import Factory, define, field, validators

from bundlenv.config.defaults import (
    COMMAND_BUILD,
    COMMANDS,
    DEFAULT_ASSETS_DIR,
    DEFAULT_BASE_URL,
    DEFAULT_OUT_DIR,
)


def stringify_env_value(value: Any) -> str:
    """Render a build-time env value the way bundled JavaScript would see it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "undefined"
    return str(value)


def absolute_path(value: str | Path) -> Path:
    """Anchor a possibly relative root at the working directory, collapsing ``..``."""
    return Path(os.path.abspath(value))


def default_build_time_env(command: str, base_url: str = DEFAULT_BASE_URL) -> dict[str, Any]:
    """Variables a Vite-like host resolves on its own for ``command``."""
    is_build = command == COMMAND_BUILD
    return {
        "BASE_URL": base_url,
        "MODE": "production" if is_build else "development",
        "DEV": not is_build,
        "PROD": is_build,
        "SSR": False,
    }


@define(frozen=True)
class ResolvedBuildConfig:
    """The host build tool's resolved configuration, as handed to ``config_resolved``."""

    root: Path = field(converter=absolute_path)
    command: str = field(validator=validators.in_(COMMANDS))
    env: dict[str, Any] = Factory(dict)
    out_dir: str = DEFAULT_OUT_DIR
    assets_dir: str = DEFAULT_ASSETS_DIR

    @property
    def is_build(self) -> bool:
        return self.command == COMMAND_BUILD

    @property
    def base_url(self) -> str:
        return stringify_env_value(self.env.get("BASE_URL", DEFAULT_BASE_URL))

    def base_build_time_env(self) -> dict[str, str]:
        return {key: stringify_env_value(value) for key, value in self.env.items()}


@define(frozen=True)
class ProductionBuild:
    """A production build: output lands in ``dist_dir_path`` and a snapshot is written."""

    dist_dir_path: Path
    assets_url_path: str


@define(frozen=True)
class DevServer:
    """A dev-server invocation: nothing is persisted."""


BuildMode = ProductionBuild | DevServer


def build_mode_for(config: ResolvedBuildConfig) -> BuildMode:
    """Select the build variant for a resolved configuration."""
    if not config.is_build:
        return DevServer()

    return ProductionBuild(
        dist_dir_path=config.root / config.out_dir,
        assets_url_path=posixpath.join(config.base_url, config.assets_dir),
    )
