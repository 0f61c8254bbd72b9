#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Update-types command for the bundlenv CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation import logger
from provide.foundation.console import perr, pout

from bundlenv.exceptions import TypingsWriteError
from bundlenv.typings import write_type_declarations


@click.command("update-types")
@click.option(
    "--root",
    default=".",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Application root directory (holds src/).",
)
def update_types_command(root: str) -> None:
    """Write the window.__BUNDLENV type declarations into src/."""
    try:
        path = write_type_declarations(Path(root))
    except TypingsWriteError as e:
        logger.error("Type declaration update failed", error=str(e), root=root)
        perr(f"❌ Type declaration update failed: {e}")
        raise click.Abort() from e

    pout(f"✅ Type declarations up to date in '{path}'")
