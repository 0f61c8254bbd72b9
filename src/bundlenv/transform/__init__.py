#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Source transforms applied during the host build's module-transform phase."""

from __future__ import annotations

from bundlenv.transform.code import RUNTIME_ENV_REFERENCE, is_rewritable, rewrite_env_references

__all__ = [
    "RUNTIME_ENV_REFERENCE",
    "is_rewritable",
    "rewrite_env_references",
]

# 🌐🧩🔚
