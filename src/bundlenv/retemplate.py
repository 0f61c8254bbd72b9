#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Deploy-time re-templating of a finished build.

Reads the snapshot left in the output directory, resolves the environment
against the current process, and regenerates the entry HTML with the same
templating and injection steps the build used. With an unchanged
environment the result is byte-identical to the build's own output.
"""

from __future__ import annotations

from collections.abc import Mapping
import os
from pathlib import Path

from provide.foundation import logger
from provide.foundation.file import atomic_write_text

from bundlenv.config.defaults import DEFAULT_HTML_FILE
from bundlenv.env.resolver import resolve_env
from bundlenv.exceptions import FilesystemError
from bundlenv.html import finalize_html
from bundlenv.snapshot import BUNDLENV_VERSION, SnapshotArtifact, read_snapshot


def retemplate_html(artifact: SnapshotArtifact, process_env: Mapping[str, str | None]) -> str:
    """Regenerate the final HTML recorded in ``artifact`` for ``process_env``.

    There is no local override file at deploy time; the process environment
    takes its place as the strongest layer.
    """
    resolved = resolve_env(artifact.base_build_time_env, artifact.env, {}, process_env)
    return finalize_html(artifact.html_pre, resolved.merged)


def retemplate_dist(
    dist_dir: Path,
    process_env: Mapping[str, str | None] | None = None,
    html_name: str = DEFAULT_HTML_FILE,
) -> Path:
    """Rewrite ``<dist_dir>/<html_name>`` from the snapshot in ``dist_dir``.

    Args:
        dist_dir: Build output directory containing the snapshot
        process_env: Environment to resolve against (defaults to os.environ)
        html_name: Entry document to regenerate

    Returns:
        Path of the rewritten HTML file

    Raises:
        SnapshotReadError: If the snapshot is missing or malformed
        FilesystemError: If the HTML file cannot be written
    """
    artifact = read_snapshot(dist_dir)

    if artifact.version != BUNDLENV_VERSION:
        logger.warning(
            "Snapshot was written by a different bundlenv version",
            snapshot_version=artifact.version,
            current_version=BUNDLENV_VERSION,
        )

    html = retemplate_html(artifact, os.environ if process_env is None else process_env)
    output_path = dist_dir / html_name

    try:
        atomic_write_text(output_path, html)
    except OSError as e:
        raise FilesystemError(f"Failed to write {output_path}: {e}") from e

    logger.info("HTML re-templated", path=str(output_path))
    return output_path
