#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Env command for the bundlenv CLI - show the merged environment."""

from __future__ import annotations

from collections.abc import Sequence
import os

import click
from provide.foundation import logger
from provide.foundation.console import perr, pout
from provide.foundation.serialization import json_dumps

from bundlenv.commands.options import build_config_options, make_build_config
from bundlenv.exceptions import BundlenvError
from bundlenv.plugin import resolve_pipeline_state


@click.command("env")
@build_config_options
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output as JSON format",
)
def env_command(
    root: str,
    command: str,
    base_url: str,
    out_dir: str,
    assets_dir: str,
    defines: Sequence[str],
    output_json: bool,
) -> None:
    """Resolve and print the environment the page and bundle would see.

    Names marked * may be overridden from the process environment.
    """
    config = make_build_config(root, command, base_url, out_dir, assets_dir, defines)
    logger.debug("Resolving environment", root=root, command=command)

    try:
        state = resolve_pipeline_state(config, os.environ)
    except BundlenvError as e:
        logger.error("Environment resolution failed", error=str(e), root=root)
        perr(f"❌ Environment resolution failed: {e}")
        raise click.Abort() from e

    merged = state.merged_env
    if output_json:
        pout(json_dumps(dict(sorted(merged.items())), indent=2))
        return

    for name in sorted(merged):
        marker = "*" if name in state.resolved.accepted_names else " "
        pout(f"{marker} {name}={merged[name]}")
