#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for config/build.py and config/runtime.py."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from bundlenv.config import (
    BundlenvRuntimeConfig,
    DevServer,
    ProductionBuild,
    ResolvedBuildConfig,
    build_mode_for,
    default_build_time_env,
    stringify_env_value,
)
from bundlenv.config.runtime import parse_log_level


class TestStringifyEnvValue:
    """Test build-time value stringification."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("/", "/"), (True, "true"), (False, "false"), (3, "3"), (None, "undefined")],
    )
    def test_values(self, value: object, expected: str) -> None:
        assert stringify_env_value(value) == expected


class TestResolvedBuildConfig:
    """Test ResolvedBuildConfig."""

    def test_root_is_converted_to_path(self, tmp_path: Path) -> None:
        config = ResolvedBuildConfig(root=str(tmp_path), command="serve")
        assert config.root == tmp_path

    def test_relative_root_is_made_absolute(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        config = ResolvedBuildConfig(root="app/../web", command="serve")
        assert config.root == tmp_path / "web"

    def test_invalid_command(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            ResolvedBuildConfig(root=tmp_path, command="preview")

    def test_base_build_time_env_is_stringified(self, tmp_path: Path) -> None:
        config = ResolvedBuildConfig(root=tmp_path, command="build", env={"PROD": True, "BASE_URL": "/"})
        assert config.base_build_time_env() == {"PROD": "true", "BASE_URL": "/"}

    def test_default_build_time_env(self) -> None:
        env = default_build_time_env("build", "/app/")
        assert env["BASE_URL"] == "/app/"
        assert env["MODE"] == "production"
        assert env["PROD"] is True
        assert env["DEV"] is False


class TestBuildModeFor:
    """Test the build variant selection."""

    def test_build_is_production(self, tmp_path: Path) -> None:
        config = ResolvedBuildConfig(root=tmp_path, command="build", env={"BASE_URL": "/app/"})
        assert build_mode_for(config) == ProductionBuild(
            dist_dir_path=tmp_path / "dist", assets_url_path="/app/assets"
        )

    def test_custom_directories(self, tmp_path: Path) -> None:
        config = ResolvedBuildConfig(
            root=tmp_path, command="build", env={}, out_dir="build", assets_dir="static"
        )
        assert build_mode_for(config) == ProductionBuild(
            dist_dir_path=tmp_path / "build", assets_url_path="/static"
        )

    def test_serve_is_dev_server(self, tmp_path: Path) -> None:
        config = ResolvedBuildConfig(root=tmp_path, command="serve", env={"BASE_URL": "/"})
        assert isinstance(build_mode_for(config), DevServer)


class TestRuntimeConfig:
    """Test CLI runtime configuration."""

    def test_parse_log_level_normalizes(self) -> None:
        assert parse_log_level(" debug ") == "DEBUG"

    def test_parse_log_level_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            parse_log_level("loud")

    def test_defaults(self) -> None:
        config = BundlenvRuntimeConfig()
        assert config.log_level == "WARNING"
        assert config.setup_log_level == "WARNING"

    @patch.dict(os.environ, {"BUNDLENV_LOG_LEVEL": "info"})
    def test_log_level_from_env(self) -> None:
        config = BundlenvRuntimeConfig.from_env()
        assert config.log_level == "INFO"


# 🌐🧩🔚
