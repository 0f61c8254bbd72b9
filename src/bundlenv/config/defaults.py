#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for bundlenv."""

from __future__ import annotations

# =================================
# Runtime global
# =================================
GLOBAL_NAME = "__BUNDLENV"  # window.__BUNDLENV holds the merged environment
BUILD_TIME_ENV_ACCESSOR = "import.meta.env"
TEMPLATE_ENV_NAME = "env"  # name of the merged environment inside HTML directives

# =================================
# Environment files
# =================================
ENV_FILE = ".env"
ENV_LOCAL_FILE = ".env.local"

# =================================
# Source transform policy
# =================================
SOURCE_DIR = "src"
SCRIPT_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx")

# =================================
# Artifacts
# =================================
SNAPSHOT_FILE = "bundlenv-meta.json"
SNAPSHOT_JSON_INDENT = 4
TYPINGS_FILE = "vite-env.d.ts"
TYPINGS_BEGIN_MARKER = "// bundlenv:begin"
TYPINGS_END_MARKER = "// bundlenv:end"
DEFAULT_HTML_FILE = "index.html"

# =================================
# Signals
# =================================
UPDATE_TYPES_ENV_VAR = "BUNDLENV_UPDATE_TYPES"

# =================================
# Host build tool defaults
# =================================
COMMAND_BUILD = "build"
COMMAND_SERVE = "serve"
COMMANDS = (COMMAND_BUILD, COMMAND_SERVE)
DEFAULT_BASE_URL = "/"
DEFAULT_OUT_DIR = "dist"
DEFAULT_ASSETS_DIR = "assets"

# 🌐🧩🔚
