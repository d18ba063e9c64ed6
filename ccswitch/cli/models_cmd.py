# -*- coding: utf-8 -*-
"""CLI commands for the default model and launching Claude Code."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from ..config import (
    clear_default_model,
    get_default_model,
    load_switcher_config,
    save_switcher_config,
    set_default_model,
)
from ..launcher import launch
from ..providers import (
    ConfigError,
    ProviderSettingsStore,
    SwitcherConfig,
    list_aliases,
    resolve_alias,
)
from .utils import fail


def _print_alias_table(config_dir: Path) -> None:
    current = get_default_model(config_dir)
    click.echo(f"\n{click.style('Available Model Presets:', bold=True)}\n")
    for alias in list_aliases():
        mark = ""
        if alias.model == current:
            mark = click.style(" [CURRENT]", fg="green")
        color = "green" if alias.name == "claude" else "blue"
        click.echo(
            f"  {click.style(alias.name, fg=color)} → {alias.model}{mark}",
        )
    click.echo()
    click.echo(f"Current default model: {click.style(current, bold=True)}")
    click.echo()


@click.command("current")
@click.pass_obj
def current_cmd(obj: dict) -> None:
    """Show the current default model."""
    current = get_default_model(obj["config_dir"])
    click.echo(f"Current default model: {click.style(current, bold=True)}")


@click.command("list")
@click.pass_obj
def list_cmd(obj: dict) -> None:
    """List all model presets."""
    _print_alias_table(obj["config_dir"])


@click.command("set")
@click.argument("model")
@click.pass_obj
def set_cmd(obj: dict, model: str) -> None:
    """Set the default model without launching Claude Code."""
    try:
        set_default_model(resolve_alias(model).model, obj["config_dir"])
    except (ConfigError, ValueError) as exc:
        fail(str(exc))
    current = get_default_model(obj["config_dir"])
    click.echo(
        click.style("✓", fg="green")
        + f" Default model set to: {click.style(current, bold=True)}",
    )


@click.command("reset")
@click.pass_obj
def reset_cmd(obj: dict) -> None:
    """Remove defaultModel from Claude settings (a .bak copy is kept)."""
    try:
        backup = clear_default_model(obj["config_dir"])
    except ConfigError as exc:
        fail(str(exc))
    if backup is None:
        click.echo(
            click.style("⚠", fg="yellow") + " Claude settings file not found",
        )
        return
    click.echo(
        click.style("✓", fg="green")
        + " Removed defaultModel from settings.json",
    )
    click.echo(f"  Backup: {backup}")


@click.command(
    "use",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("alias_or_model")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def use_cmd(obj: dict, alias_or_model: str, args: tuple) -> None:
    """Run Claude Code with a model alias or a custom model name.

    \b
    Examples:
      claude-model use claude-opus
      claude-model use claude-glm -- --resume
      claude-model use glm-4.7
    """
    config_dir: Path = obj["config_dir"]
    store: ProviderSettingsStore = obj["store"]
    alias = resolve_alias(alias_or_model)

    try:
        provider_config = None
        if alias.provider_id:
            provider_config = store.load(alias.provider_id)
            if provider_config is None:
                fail(
                    f"{alias.provider_id} is not configured "
                    f"(run: claude-model providers config {alias.provider_id})",
                )
        set_default_model(alias.model, config_dir)
        click.echo(
            click.style("ℹ", fg="blue")
            + " Starting Claude Code with model: "
            + click.style(alias.model, bold=True),
        )
        launch(
            list(args),
            config=provider_config,
            dangerous=load_switcher_config(config_dir).auto_dangerous_mode,
        )
    except (ConfigError, ValueError) as exc:
        fail(str(exc))


@click.command("safety")
@click.argument(
    "mode",
    required=False,
    type=click.Choice(["on", "off"], case_sensitive=False),
)
@click.pass_obj
def safety_cmd(obj: dict, mode: Optional[str]) -> None:
    """Show or set auto --dangerously-skip-permissions."""
    config_dir: Path = obj["config_dir"]
    if mode is not None:
        try:
            save_switcher_config(
                SwitcherConfig(auto_dangerous_mode=mode.lower() == "on"),
                config_dir,
            )
        except ConfigError as exc:
            fail(str(exc))
    enabled = load_switcher_config(config_dir).auto_dangerous_mode
    state = (
        click.style("ENABLED", fg="yellow")
        if enabled
        else click.style("DISABLED", fg="green")
    )
    click.echo(f"Auto --dangerously-skip-permissions: {state}")


def register_commands(group: click.Group) -> None:
    """Attach the model commands to the top-level group."""
    for cmd in (
        current_cmd,
        list_cmd,
        set_cmd,
        reset_cmd,
        use_cmd,
        safety_cmd,
    ):
        group.add_command(cmd)
