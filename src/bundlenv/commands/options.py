#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared options for commands that stand in for a host build tool."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

import click

from bundlenv.config.build import ResolvedBuildConfig, default_build_time_env
from bundlenv.config.defaults import (
    COMMAND_SERVE,
    COMMANDS,
    DEFAULT_ASSETS_DIR,
    DEFAULT_BASE_URL,
    DEFAULT_OUT_DIR,
)

F = TypeVar("F", bound=Callable[..., Any])


def parse_defines(defines: Sequence[str]) -> dict[str, str]:
    """Turn repeated ``KEY=VALUE`` options into a dict."""
    values: dict[str, str] = {}
    for define in defines:
        key, sep, value = define.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected KEY=VALUE, got '{define}'", param_hint="--define")
        values[key] = value
    return values


def build_config_options(func: F) -> F:
    """Attach the options describing a resolved build configuration."""
    decorators = [
        click.option(
            "--root",
            default=".",
            type=click.Path(exists=True, file_okay=False, resolve_path=True),
            help="Application root directory (holds .env and src/).",
        ),
        click.option(
            "--mode",
            "command",
            default=COMMAND_SERVE,
            type=click.Choice(COMMANDS),
            help="Host command: 'build' writes a snapshot, 'serve' does not.",
        ),
        click.option("--base-url", default=DEFAULT_BASE_URL, help="Public base URL of the app."),
        click.option("--out-dir", default=DEFAULT_OUT_DIR, help="Build output directory, relative to root."),
        click.option("--assets-dir", default=DEFAULT_ASSETS_DIR, help="Assets directory inside the output."),
        click.option(
            "--define",
            "-D",
            "defines",
            multiple=True,
            help="Build-time variable KEY=VALUE (repeatable).",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def make_build_config(
    root: str,
    command: str,
    base_url: str,
    out_dir: str,
    assets_dir: str,
    defines: Sequence[str],
) -> ResolvedBuildConfig:
    """Build the configuration a host would resolve from these options."""
    env: dict[str, Any] = default_build_time_env(command, base_url)
    env.update(parse_defines(defines))
    return ResolvedBuildConfig(
        root=root,
        command=command,
        env=env,
        out_dir=out_dir,
        assets_dir=assets_dir,
    )
