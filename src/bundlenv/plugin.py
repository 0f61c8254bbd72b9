#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build-tool hooks.

The host drives one plugin object per build:

1. ``config_resolved`` once, with the resolved build configuration
2. ``transform`` for every compiled module
3. ``transform_index_html`` for every HTML entry document

``bundlenv_plugin`` picks the plugin before any of that happens. When
``BUNDLENV_UPDATE_TYPES`` is set in the process environment it returns a
``TypingsUpdater`` instead, which writes the type declarations and exits.
"""

from __future__ import annotations

from collections.abc import Mapping
import os
from pathlib import Path
import sys
from typing import NoReturn

from attrs import define
from provide.foundation import logger

from bundlenv.config.build import BuildMode, ResolvedBuildConfig, build_mode_for
from bundlenv.config.defaults import UPDATE_TYPES_ENV_VAR
from bundlenv.env.loader import load_env_files
from bundlenv.env.resolver import ResolvedEnv, resolve_env
from bundlenv.exceptions import ConfigurationError
from bundlenv.html import finalize_html
from bundlenv.snapshot import write_snapshot
from bundlenv.transform.code import rewrite_env_references
from bundlenv.typings import write_type_declarations

PLUGIN_NAME = "bundlenv"


@define(frozen=True)
class PipelineState:
    """Read-only state shared by every hook after ``config_resolved``."""

    app_root: Path
    base_build_time_env: dict[str, str]
    file_env: dict[str, str]
    file_env_local: dict[str, str]
    resolved: ResolvedEnv
    build: BuildMode

    @property
    def merged_env(self) -> dict[str, str]:
        return self.resolved.merged


def resolve_pipeline_state(
    config: ResolvedBuildConfig, process_env: Mapping[str, str | None]
) -> PipelineState:
    """Load env files and resolve the merged environment for ``config``."""
    app_root = config.root
    base_build_time_env = config.base_build_time_env()
    file_env, file_env_local = load_env_files(app_root)

    resolved = resolve_env(base_build_time_env, file_env, file_env_local, process_env)

    return PipelineState(
        app_root=app_root,
        base_build_time_env=base_build_time_env,
        file_env=file_env,
        file_env_local=file_env_local,
        resolved=resolved,
        build=build_mode_for(config),
    )


class EnvsPlugin:
    """The build pipeline: env resolution, source rewriting and HTML finalization."""

    name = PLUGIN_NAME

    def __init__(self, process_env: Mapping[str, str | None] | None = None) -> None:
        self._process_env = os.environ if process_env is None else process_env
        self._state: PipelineState | None = None

    @property
    def state(self) -> PipelineState:
        if self._state is None:
            raise ConfigurationError(
                "Build configuration has not been resolved; config_resolved must run before other hooks"
            )
        return self._state

    def config_resolved(self, config: ResolvedBuildConfig) -> PipelineState:
        """Resolve env state once per build and refresh the type declarations."""
        self._state = resolve_pipeline_state(config, self._process_env)
        write_type_declarations(config.root)

        logger.info(
            "Build configuration resolved",
            root=str(config.root),
            command=config.command,
            variables=len(self._state.merged_env),
        )
        return self._state

    def transform(self, code: str, file_id: str) -> str | None:
        """Rewrite env references in one module; None leaves it untouched."""
        return rewrite_env_references(code, file_id, self.state.app_root)

    def transform_index_html(self, html: str) -> str:
        """Template and inject one HTML entry document, then snapshot its raw form.

        The snapshot is only written once the document has rendered, so a
        malformed directive leaves no artifact behind.
        """
        state = self.state

        final_html = finalize_html(html, state.merged_env)
        write_snapshot(state.build, html, state.file_env, state.base_build_time_env)

        return final_html


class TypingsUpdater:
    """Stand-in plugin for the typing-update mode: scaffold declarations, then exit."""

    name = PLUGIN_NAME

    def config_resolved(self, config: ResolvedBuildConfig) -> NoReturn:
        write_type_declarations(config.root)
        logger.info("Type declarations updated, exiting", root=str(config.root))
        sys.exit(0)


def update_types_requested(process_env: Mapping[str, str | None]) -> bool:
    return UPDATE_TYPES_ENV_VAR in process_env


def bundlenv_plugin(process_env: Mapping[str, str | None] | None = None) -> EnvsPlugin | TypingsUpdater:
    """Create the plugin object the host build tool registers.

    Args:
        process_env: Environment to read overrides from (defaults to os.environ)
    """
    env = os.environ if process_env is None else process_env
    if update_types_requested(env):
        return TypingsUpdater()
    return EnvsPlugin(process_env=env)
