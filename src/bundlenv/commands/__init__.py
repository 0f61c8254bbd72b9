#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the bundlenv CLI."""

from __future__ import annotations

from bundlenv.commands.env import env_command
from bundlenv.commands.render import render_command
from bundlenv.commands.retemplate import retemplate_command
from bundlenv.commands.rewrite import rewrite_command
from bundlenv.commands.update_types import update_types_command

__all__ = [
    "env_command",
    "render_command",
    "retemplate_command",
    "rewrite_command",
    "update_types_command",
]

# 🌐🧩🔚
