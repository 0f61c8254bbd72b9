#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""bundlenv command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from bundlenv.commands.env import env_command
from bundlenv.commands.render import render_command
from bundlenv.commands.retemplate import retemplate_command
from bundlenv.commands.rewrite import rewrite_command
from bundlenv.commands.update_types import update_types_command
from bundlenv.config import BundlenvRuntimeConfig

__version__ = get_version("bundlenv", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="bundlenv",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Configure a static web bundle with environment variables after it is built.

    Configure logging via environment variables:
    - BUNDLENV_LOG_LEVEL: Set log level for bundlenv (trace, debug, info, warning, error)
    - BUNDLENV_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    runtime_config = BundlenvRuntimeConfig.from_env()
    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()

    telemetry_config = evolve(
        base_telemetry,
        service_name="bundlenv",
        logging=evolve(
            base_telemetry.logging,
            default_level=runtime_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(env_command, name="env")
cli.add_command(render_command, name="render")
cli.add_command(rewrite_command, name="rewrite")
cli.add_command(retemplate_command, name="retemplate")
cli.add_command(update_types_command, name="update-types")

main = cli

if __name__ == "__main__":
    cli()

# 🌐🧩🔚
