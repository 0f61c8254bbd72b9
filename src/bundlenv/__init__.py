#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""bundlenv: build once, configure the static bundle many times."""

from __future__ import annotations

from provide.foundation.utils import get_version

from bundlenv.config import DevServer, ProductionBuild, ResolvedBuildConfig
from bundlenv.exceptions import (
    BundlenvError,
    ConfigurationError,
    EnvFileParseError,
    SnapshotReadError,
    SnapshotWriteError,
)
from bundlenv.plugin import EnvsPlugin, TypingsUpdater, bundlenv_plugin
from bundlenv.retemplate import retemplate_dist

__version__ = get_version("bundlenv", caller_file=__file__)

__all__ = [
    "BundlenvError",
    "ConfigurationError",
    "DevServer",
    "EnvFileParseError",
    "EnvsPlugin",
    "ProductionBuild",
    "ResolvedBuildConfig",
    "SnapshotReadError",
    "SnapshotWriteError",
    "TypingsUpdater",
    "__version__",
    "bundlenv_plugin",
    "retemplate_dist",
]

# 🌐🧩🔚
