#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Per-file rewrite of build-time env access to the runtime global."""

from __future__ import annotations

import os
from pathlib import Path

from provide.foundation import logger

from bundlenv.config.defaults import (
    BUILD_TIME_ENV_ACCESSOR,
    GLOBAL_NAME,
    SCRIPT_EXTENSIONS,
    SOURCE_DIR,
)

RUNTIME_ENV_REFERENCE = f"window.{GLOBAL_NAME}"


def is_rewritable(file_id: str, app_root: Path) -> bool:
    """Whether ``file_id`` is a script under ``<app_root>/src``.

    Module ids may carry a query string (``main.ts?v=3``); it is ignored for
    the extension check.
    """
    source_prefix = str(app_root / SOURCE_DIR) + os.sep
    if not file_id.startswith(source_prefix):
        return False

    file_path = file_id.split("?", 1)[0]
    return file_path.endswith(SCRIPT_EXTENSIONS)


def rewrite_env_references(code: str, file_id: str, app_root: Path) -> str | None:
    """Point every ``import.meta.env`` access at ``window.__BUNDLENV``.

    Returns:
        The rewritten code, or None when the file is out of scope
    """
    if not is_rewritable(file_id, app_root):
        return None

    occurrences = code.count(BUILD_TIME_ENV_ACCESSOR)
    if occurrences:
        logger.trace("Rewriting env references", file=file_id, occurrences=occurrences)

    return code.replace(BUILD_TIME_ENV_ACCESSOR, RUNTIME_ENV_REFERENCE)
