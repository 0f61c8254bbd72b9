#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Precedence resolution for the merged environment.

Layers, weakest first:

1. variables the build tool resolved on its own
2. ``.env``
3. ``.env.local``
4. the invoking process environment, restricted to accepted names

Only names declared by the build tool or by ``.env`` are accepted, so an
unrelated process variable such as ``PATH`` never reaches the client bundle.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from attrs import define
from provide.foundation import logger


@define(frozen=True)
class ResolvedEnv:
    """Merged environment plus the names allowed to flow through from the process."""

    merged: dict[str, str]
    accepted_names: frozenset[str]


def accepted_names_for(base_build_time_env: Mapping[str, str], file_env: Mapping[str, str]) -> frozenset[str]:
    return frozenset(base_build_time_env) | frozenset(file_env)


def filter_process_env(
    process_env: Mapping[str, str | None], accepted_names: frozenset[str]
) -> dict[str, str]:
    """Keep set process variables whose names are accepted."""
    return {
        name: value for name, value in process_env.items() if value is not None and name in accepted_names
    }


def overlay(layers: Iterable[Mapping[str, str]]) -> dict[str, str]:
    """Apply ``layers`` left to right; later layers overwrite earlier keys."""
    merged: dict[str, str] = {}
    for layer in layers:
        merged.update(layer)
    return merged


def resolve_env(
    base_build_time_env: Mapping[str, str],
    file_env: Mapping[str, str],
    file_env_local: Mapping[str, str],
    process_env: Mapping[str, str | None],
) -> ResolvedEnv:
    """Merge every env source in ascending precedence order.

    Args:
        base_build_time_env: Values resolved by the host build tool
        file_env: Values from ``.env``
        file_env_local: Values from ``.env.local``
        process_env: The invoking process environment (unfiltered)

    Returns:
        ResolvedEnv with the merged map and the accepted name set
    """
    accepted_names = accepted_names_for(base_build_time_env, file_env)
    process_overrides = filter_process_env(process_env, accepted_names)

    merged = overlay([base_build_time_env, file_env, file_env_local, process_overrides])

    logger.debug(
        "Resolved environment",
        accepted=len(accepted_names),
        process_overrides=sorted(process_overrides),
        total=len(merged),
    )
    return ResolvedEnv(merged=merged, accepted_names=accepted_names)
