#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for bundlenv."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class BundlenvError(FoundationError):
    """Base exception for all bundlenv errors."""

    pass


class ConfigurationError(BundlenvError):
    """Raised when pipeline state is read before the build configuration was resolved."""

    pass


class EnvFileParseError(BundlenvError):
    """Raised when an environment file exists but cannot be parsed."""

    pass


class TemplateRenderError(BundlenvError):
    """Raised when an HTML document contains an invalid template directive."""

    pass


class FilesystemError(BundlenvError):
    """Raised when an output directory or file cannot be written."""

    pass


class SnapshotWriteError(FilesystemError):
    """Raised when the snapshot artifact cannot be written beside the build output."""

    pass


class TypingsWriteError(FilesystemError):
    """Raised when the type-declaration scaffolding cannot be written."""

    pass


class SnapshotReadError(BundlenvError):
    """Raised when a snapshot artifact is missing or malformed."""

    pass


# 🌐🧩🔚
