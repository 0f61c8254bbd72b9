#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for typings.py - type-declaration scaffolding."""

from __future__ import annotations

from pathlib import Path

from bundlenv.typings import DECLARATION_BLOCK, merge_declarations, typings_path, write_type_declarations


class TestMergeDeclarations:
    """Test merge_declarations."""

    def test_empty_file_gets_reference_and_block(self) -> None:
        merged = merge_declarations("")
        assert merged.startswith('/// <reference types="vite/client" />\n')
        assert DECLARATION_BLOCK in merged

    def test_other_declarations_are_kept(self) -> None:
        existing = '/// <reference types="vite/client" />\n\ndeclare const __APP_VERSION__: string;\n'
        merged = merge_declarations(existing)

        assert merged.startswith(existing.rstrip())
        assert "declare const __APP_VERSION__: string;" in merged
        assert merged.endswith(DECLARATION_BLOCK + "\n")

    def test_existing_block_is_replaced_in_place(self) -> None:
        existing = (
            "declare const A: string;\n"
            "// bundlenv:begin\ninterface Window { old: true }\n// bundlenv:end\n"
            "declare const B: string;\n"
        )
        merged = merge_declarations(existing)

        assert merged == f"declare const A: string;\n{DECLARATION_BLOCK}\ndeclare const B: string;\n"

    def test_merge_is_stable(self) -> None:
        once = merge_declarations("declare const A: string;\n")
        assert merge_declarations(once) == once


class TestWriteTypeDeclarations:
    """Test write_type_declarations."""

    def test_creates_file(self, app_root: Path) -> None:
        path = write_type_declarations(app_root)

        assert path == app_root / "src" / "vite-env.d.ts"
        assert "readonly __BUNDLENV: ImportMetaEnv;" in path.read_text()

    def test_creates_missing_src_directory(self, tmp_path: Path) -> None:
        path = write_type_declarations(tmp_path)
        assert path.exists()

    def test_rewrite_keeps_user_declarations(self, app_root: Path) -> None:
        path = typings_path(app_root)
        path.write_text("interface ImportMetaEnv {\n    readonly VITE_API: string;\n}\n")

        write_type_declarations(app_root)
        write_type_declarations(app_root)
        content = path.read_text()

        assert "readonly VITE_API: string;" in content
        assert content.count("// bundlenv:begin") == 1


# 🌐🧩🔚
