#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Rewrite command for the bundlenv CLI - preview the source transform."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation import logger
from provide.foundation.console import pout

from bundlenv.transform.code import rewrite_env_references


@click.command("rewrite")
@click.argument(
    "source_file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
)
@click.option(
    "--root",
    default=".",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Application root directory (holds src/).",
)
def rewrite_command(source_file: str, root: str) -> None:
    """Print SOURCE_FILE as the build would compile it."""
    code = Path(source_file).read_text(encoding="utf-8")
    rewritten = rewrite_env_references(code, source_file, Path(root))

    if rewritten is None:
        logger.info("File is outside the rewrite scope", file=source_file, root=root)
        rewritten = code

    pout(rewritten, nl=False)
