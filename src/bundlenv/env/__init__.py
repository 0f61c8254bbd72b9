#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Environment sources and precedence resolution."""

from __future__ import annotations

from bundlenv.env.loader import load_env_files, read_env_file
from bundlenv.env.resolver import ResolvedEnv, resolve_env

__all__ = [
    "ResolvedEnv",
    "load_env_files",
    "read_env_file",
    "resolve_env",
]

# 🌐🧩🔚
