#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""bundlenv configuration: build-tool inputs, build variants and CLI runtime settings."""

from __future__ import annotations

from bundlenv.config.build import (
    BuildMode,
    DevServer,
    ProductionBuild,
    ResolvedBuildConfig,
    build_mode_for,
    default_build_time_env,
    stringify_env_value,
)
from bundlenv.config.runtime import BundlenvRuntimeConfig

__all__ = [
    "BuildMode",
    "BundlenvRuntimeConfig",
    "DevServer",
    "ProductionBuild",
    "ResolvedBuildConfig",
    "build_mode_for",
    "default_build_time_env",
    "stringify_env_value",
]

# 🌐🧩🔚
