#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Render command for the bundlenv CLI - finalize one HTML entry document."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import click
from provide.foundation import logger
from provide.foundation.console import perr, pout
from provide.foundation.file import atomic_write_text
from provide.foundation.file.directory import ensure_parent_dir

from bundlenv.commands.options import build_config_options, make_build_config
from bundlenv.exceptions import BundlenvError
from bundlenv.plugin import bundlenv_plugin


@click.command("render")
@click.argument(
    "html_file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
)
@build_config_options
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, resolve_path=True),
    help="Write the final HTML here instead of stdout.",
)
def render_command(
    html_file: str,
    root: str,
    command: str,
    base_url: str,
    out_dir: str,
    assets_dir: str,
    defines: Sequence[str],
    output: str | None,
) -> None:
    """Run the HTML hooks on HTML_FILE the way a host build would.

    With --mode build the snapshot is written into the output directory.
    """
    config = make_build_config(root, command, base_url, out_dir, assets_dir, defines)
    log_context = {"html_file": html_file, "root": root, "command": command}
    logger.debug("Rendering HTML entry", **log_context)

    try:
        plugin = bundlenv_plugin()
        plugin.config_resolved(config)
        html = plugin.transform_index_html(Path(html_file).read_text(encoding="utf-8"))

        if output:
            output_path = Path(output)
            ensure_parent_dir(output_path)
            atomic_write_text(output_path, html)
            pout(f"✅ Rendered {html_file} -> {output_path}")
        else:
            pout(html, nl=False)
    except (BundlenvError, OSError) as e:
        logger.error("Render failed", error=str(e), **log_context)
        perr(f"❌ Render failed: {e}")
        raise click.Abort() from e

    logger.info("HTML entry rendered", **log_context)
