# -*- coding: utf-8 -*-
"""claude-model CLI entrypoint."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..constant import CLAUDE_CONFIG_DIR, CONFIG_DIR_ENV, LOG_LEVEL_ENV
from ..providers import ProviderSettingsStore
from .models_cmd import register_commands
from .providers_cmd import providers_group

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    # MalformedSettingsWarning and friends go through logging.
    logging.captureWarnings(True)


@click.group()
@click.version_option(version=__version__, prog_name="claude-model")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=CONFIG_DIR_ENV,
    default=None,
    help="Claude config directory (default: ~/.claude)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    envvar=LOG_LEVEL_ENV,
    default="warning",
    show_default=True,
)
@click.pass_context
def cli(ctx: click.Context, config_dir: Optional[Path], log_level: str) -> None:
    """Claude Code Model Switcher — manage provider settings and models."""
    setup_logging(log_level)
    config_dir = (config_dir or CLAUDE_CONFIG_DIR).expanduser()
    ctx.obj = {
        "config_dir": config_dir,
        "store": ProviderSettingsStore(config_dir),
    }


cli.add_command(providers_group)
register_commands(cli)


if __name__ == "__main__":
    cli()
