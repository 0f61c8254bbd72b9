#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build-time snapshot artifact.

A production build leaves ``bundlenv-meta.json`` beside its output. It holds
the entry HTML as received from the host (directives intact, nothing
injected) and the env maps the build was configured with, so the page can be
re-rendered later against a different process environment without
rebuilding.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from attrs import define
from provide.foundation import logger
from provide.foundation.file.directory import ensure_dir
from provide.foundation.file.formats import read_json, write_json
from provide.foundation.utils import get_version

from bundlenv.config.build import BuildMode, DevServer
from bundlenv.config.defaults import SNAPSHOT_FILE, SNAPSHOT_JSON_INDENT
from bundlenv.exceptions import SnapshotReadError, SnapshotWriteError

BUNDLENV_VERSION = get_version("bundlenv", caller_file=__file__)

_REQUIRED_KEYS = ("version", "assetsUrlPath", "htmlPre", "env", "baseBuildTimeEnv")


@define(frozen=True)
class SnapshotArtifact:
    """Everything a later re-templating pass needs to regenerate the final HTML."""

    version: str
    assets_url_path: str
    html_pre: str
    env: dict[str, str]
    base_build_time_env: dict[str, str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "assetsUrlPath": self.assets_url_path,
            "htmlPre": self.html_pre,
            "env": self.env,
            "baseBuildTimeEnv": self.base_build_time_env,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SnapshotArtifact:
        missing = [key for key in _REQUIRED_KEYS if key not in data]
        if missing:
            raise SnapshotReadError(f"Snapshot is missing required keys: {', '.join(missing)}")

        return cls(
            version=str(data["version"]),
            assets_url_path=str(data["assetsUrlPath"]),
            html_pre=str(data["htmlPre"]),
            env={str(k): str(v) for k, v in data["env"].items()},
            base_build_time_env={str(k): str(v) for k, v in data["baseBuildTimeEnv"].items()},
        )


def snapshot_path(dist_dir: Path) -> Path:
    return dist_dir / SNAPSHOT_FILE


def write_snapshot(
    build: BuildMode,
    html_pre: str,
    file_env: Mapping[str, str],
    base_build_time_env: Mapping[str, str],
) -> Path | None:
    """Persist the snapshot for a production build.

    Args:
        build: The current build variant
        html_pre: Entry HTML before templating and injection
        file_env: Values from ``.env``
        base_build_time_env: Values resolved by the host build tool

    Returns:
        Path of the written artifact, or None for a dev-server run

    Raises:
        SnapshotWriteError: If the output directory or file cannot be written
    """
    if isinstance(build, DevServer):
        logger.debug("Dev server run, skipping snapshot")
        return None

    artifact = SnapshotArtifact(
        version=BUNDLENV_VERSION,
        assets_url_path=build.assets_url_path,
        html_pre=html_pre,
        env=dict(file_env),
        base_build_time_env=dict(base_build_time_env),
    )
    path = snapshot_path(build.dist_dir_path)

    try:
        ensure_dir(build.dist_dir_path)
        write_json(path, artifact.to_dict(), indent=SNAPSHOT_JSON_INDENT)
    except OSError as e:
        raise SnapshotWriteError(f"Failed to write snapshot to {path}: {e}") from e

    logger.info("Snapshot written", path=str(path), version=artifact.version)
    return path


def read_snapshot(dist_dir: Path) -> SnapshotArtifact:
    """Load the snapshot written into ``dist_dir`` by a production build.

    Raises:
        SnapshotReadError: If the file is absent or not a valid snapshot
    """
    path = snapshot_path(dist_dir)
    if not path.is_file():
        raise SnapshotReadError(f"No snapshot found at {path}; was the directory produced by a build?")

    try:
        data = read_json(path)
    except ValueError as e:
        raise SnapshotReadError(f"Snapshot at {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise SnapshotReadError(f"Snapshot at {path} is not a JSON object")

    return SnapshotArtifact.from_dict(data)
