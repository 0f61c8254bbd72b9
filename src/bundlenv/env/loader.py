#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Environment file loading.

Reads ``.env`` and ``.env.local`` from the application root. An absent file is
an empty map; a file python-dotenv cannot parse aborts the build. Values are
taken literally, without ``${VAR}`` interpolation.
"""

from __future__ import annotations

from pathlib import Path

from dotenv.parser import parse_stream
from provide.foundation import logger

from bundlenv.config.defaults import ENV_FILE, ENV_LOCAL_FILE
from bundlenv.exceptions import EnvFileParseError


def read_env_file(path: Path) -> dict[str, str]:
    """Parse one environment file into a name -> value map.

    Args:
        path: Path to the file

    Returns:
        Parsed variables, or an empty dict when the file does not exist

    Raises:
        EnvFileParseError: If a statement in the file is malformed
    """
    if not path.exists():
        logger.debug("Env file not found, using empty map", path=str(path))
        return {}

    values: dict[str, str] = {}
    with path.open(encoding="utf-8") as stream:
        for binding in parse_stream(stream):
            if binding.error:
                raise EnvFileParseError(
                    f"Could not parse {path} at line {binding.original.line}: "
                    f"{binding.original.string.strip()!r}"
                )
            # Blank lines, comments and bare keys without '='
            if binding.key is None or binding.value is None:
                continue
            values[binding.key] = binding.value

    logger.debug("Loaded env file", path=str(path), count=len(values))
    return values


def load_env_files(app_root: Path) -> tuple[dict[str, str], dict[str, str]]:
    """Load the general and local-override env files from ``app_root``.

    Returns:
        Tuple of (file_env, file_env_local)
    """
    file_env = read_env_file(app_root / ENV_FILE)
    file_env_local = read_env_file(app_root / ENV_LOCAL_FILE)
    return file_env, file_env_local
