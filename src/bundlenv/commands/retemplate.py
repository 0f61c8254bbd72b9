#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Retemplate command for the bundlenv CLI - reconfigure a finished build."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation import logger
from provide.foundation.console import perr, pout

from bundlenv.config.defaults import DEFAULT_HTML_FILE
from bundlenv.exceptions import BundlenvError
from bundlenv.retemplate import retemplate_dist


@click.command("retemplate")
@click.argument(
    "dist_dir",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
)
@click.option(
    "--html-name",
    default=DEFAULT_HTML_FILE,
    help="Entry document inside DIST_DIR to regenerate.",
)
def retemplate_command(dist_dir: str, html_name: str) -> None:
    """Regenerate DIST_DIR's HTML from its snapshot and the current environment."""
    logger.debug("Re-templating build output", dist_dir=dist_dir, html_name=html_name)

    try:
        output_path = retemplate_dist(Path(dist_dir), html_name=html_name)
    except BundlenvError as e:
        logger.error("Re-templating failed", error=str(e), dist_dir=dist_dir)
        perr(f"❌ Re-templating failed: {e}")
        raise click.Abort() from e

    pout(f"✅ Regenerated {output_path}")
