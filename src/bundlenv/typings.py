#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Type-declaration scaffolding for the runtime global.

The declarations live in a marked block inside ``src/vite-env.d.ts``. Only
that block is ever rewritten; declarations around it are preserved.
"""

from __future__ import annotations

from pathlib import Path

from provide.foundation import logger
from provide.foundation.file import atomic_write_text
from provide.foundation.file.directory import ensure_parent_dir

from bundlenv.config.defaults import (
    GLOBAL_NAME,
    SOURCE_DIR,
    TYPINGS_BEGIN_MARKER,
    TYPINGS_END_MARKER,
    TYPINGS_FILE,
)
from bundlenv.exceptions import TypingsWriteError

CLIENT_REFERENCE = '/// <reference types="vite/client" />'

DECLARATION_BLOCK = "\n".join(
    [
        TYPINGS_BEGIN_MARKER,
        "interface Window {",
        f"    readonly {GLOBAL_NAME}: ImportMetaEnv;",
        "}",
        TYPINGS_END_MARKER,
    ]
)


def typings_path(app_root: Path) -> Path:
    return app_root / SOURCE_DIR / TYPINGS_FILE


def merge_declarations(existing: str) -> str:
    """Place the managed block into ``existing`` declaration text."""
    begin = existing.find(TYPINGS_BEGIN_MARKER)
    end = existing.find(TYPINGS_END_MARKER, begin + 1) if begin != -1 else -1

    if begin != -1 and end != -1:
        return existing[:begin] + DECLARATION_BLOCK + existing[end + len(TYPINGS_END_MARKER) :]

    if not existing.strip():
        return f"{CLIENT_REFERENCE}\n\n{DECLARATION_BLOCK}\n"

    return f"{existing.rstrip()}\n\n{DECLARATION_BLOCK}\n"


def write_type_declarations(app_root: Path) -> Path:
    """Create or refresh the declaration block under ``app_root``.

    Raises:
        TypingsWriteError: If the file cannot be read or written
    """
    path = typings_path(app_root)

    try:
        existing = path.read_text(encoding="utf-8") if path.exists() else ""
        updated = merge_declarations(existing)
        if updated == existing:
            logger.debug("Type declarations up to date", path=str(path))
            return path

        ensure_parent_dir(path)
        atomic_write_text(path, updated)
    except OSError as e:
        raise TypingsWriteError(f"Failed to write type declarations to {path}: {e}") from e

    logger.info("Type declarations written", path=str(path))
    return path
