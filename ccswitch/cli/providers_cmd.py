# -*- coding: utf-8 -*-
"""CLI commands for managing provider settings files."""
from __future__ import annotations

from typing import Optional

import click

from ..providers import (
    AUTH_KEY_NAMES,
    ConfigError,
    NoTokenProvidedError,
    ProviderSettingsStore,
    get_provider,
    list_providers,
    mask_token,
)
from .utils import fail, prompt_choice


# ---------------------------------------------------------------------------
# Reusable interactive helpers
# ---------------------------------------------------------------------------


def _select_provider_interactive(
    store: ProviderSettingsStore,
    prompt_text: str = "Select provider to configure:",
) -> str:
    """Prompt user to pick a provider. Returns provider_id.

    Each option is annotated with ✓ (configured) or ✗ (not configured).
    """
    labels: list[str] = []
    ids: list[str] = []
    for d in list_providers():
        mark = "✓" if store.is_configured(d.id) else "✗"
        labels.append(f"{d.name} ({d.id}) [{mark}]")
        ids.append(d.id)
    chosen_label = prompt_choice(prompt_text, options=labels)
    return ids[labels.index(chosen_label)]


def configure_provider_interactive(
    store: ProviderSettingsStore,
    provider_id: Optional[str] = None,
    *,
    token: Optional[str] = None,
    base_url: Optional[str] = None,
    model: Optional[str] = None,
    skip_empty: bool = False,
) -> Optional[str]:
    """Configure one provider, prompting for whatever was not given.

    Returns the canonical provider_id. With *skip_empty*, a provider left
    without a token is skipped (returns ``None``) instead of failing.
    """
    if provider_id is None:
        provider_id = _select_provider_interactive(store)
    try:
        defn = get_provider(provider_id)
    except ConfigError as exc:
        fail(str(exc))

    click.echo(
        f"Configuring {click.style(defn.name, fg='blue', bold=True)}",
    )
    if token is None:
        current = store.read_existing_token(defn.id)
        if current:
            click.echo(f"Current API key: {mask_token(current)}")
            click.echo("  Press Enter to keep, or type a new key:")
        token = click.prompt(
            "API key",
            default="",
            hide_input=True,
            show_default=False,
        )

    try:
        config = store.configure(
            defn.id,
            token=token,
            base_url=base_url,
            model=model,
        )
    except NoTokenProvidedError as exc:
        if not skip_empty:
            fail(str(exc))
        click.echo(click.style("⚠", fg="yellow") + f" Skipped {defn.name}")
        return None
    except ConfigError as exc:
        fail(str(exc))

    click.echo(
        click.style("✓", fg="green")
        + f" {defn.name} — API Key: {mask_token(config.auth_token)}"
        + f", Base URL: {config.base_url}, Model: {config.model_name}",
    )
    command = click.style(f"claude-{defn.id}", fg="blue")
    click.echo(f"Now you can run: {command}")
    return defn.id


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


@click.group("providers")
def providers_group() -> None:
    """Manage per-provider API settings."""


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


@providers_group.command("list")
@click.pass_obj
def list_cmd(obj: dict) -> None:
    """Show all providers and their current configuration."""
    store: ProviderSettingsStore = obj["store"]

    click.echo("\n=== Providers ===")
    for defn in list_providers():
        config = store.load(defn.id)

        click.echo(f"\n{'─' * 44}")
        click.echo(f"  {defn.name} ({defn.id})")
        click.echo(f"{'─' * 44}")
        if config is None:
            click.echo(f"  {'api_key':16s}: (not set)")
            click.echo(f"  {'base_url':16s}: {defn.default_base_url}")
            click.echo(f"  {'model':16s}: {defn.default_model}")
            continue
        click.echo(f"  {'api_key':16s}: {mask_token(config.auth_token)}")
        click.echo(f"  {'base_url':16s}: {config.base_url}")
        click.echo(f"  {'model':16s}: {config.model_name}")
        click.echo(
            f"  {'models':16s}: {', '.join(config.available_models)}",
        )
    click.echo()


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------


@providers_group.command("config")
@click.argument("provider_id", required=False, default=None)
@click.option("--token", default=None, help="API token (prompted if omitted)")
@click.option("--base-url", default=None, help="Override the endpoint URL")
@click.option("--model", default=None, help="Override the default model")
@click.option(
    "--all",
    "all_providers",
    is_flag=True,
    help="Walk through every provider (Enter skips or keeps a key)",
)
@click.pass_obj
def config_cmd(
    obj: dict,
    provider_id: Optional[str],
    token: Optional[str],
    base_url: Optional[str],
    model: Optional[str],
    all_providers: bool,
) -> None:
    """Configure a provider's API token, endpoint and model."""
    if all_providers:
        if provider_id or token or base_url or model:
            fail("--all cannot be combined with a provider or other options")
        configured = []
        for defn in list_providers():
            click.echo()
            pid = configure_provider_interactive(
                obj["store"],
                defn.id,
                skip_empty=True,
            )
            if pid:
                configured.append(pid)
        click.echo(
            f"\nConfigured: {', '.join(configured) if configured else '(none)'}",
        )
        return
    configure_provider_interactive(
        obj["store"],
        provider_id,
        token=token,
        base_url=base_url,
        model=model,
    )


# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------


@providers_group.command("show")
@click.argument("provider_id")
@click.argument("field", required=False, default=None)
@click.pass_obj
def show_cmd(obj: dict, provider_id: str, field: Optional[str]) -> None:
    """Print a provider's settings, or one env FIELD of them."""
    store: ProviderSettingsStore = obj["store"]
    try:
        path = store.resolve_path(provider_id)
        if field is not None:
            value = store.get_field(provider_id, field)
        else:
            config = store.load(provider_id)
    except ConfigError as exc:
        fail(str(exc))

    if field is not None:
        if value is None:
            fail(f"{field} is not set for {provider_id}")
        click.echo(mask_token(value) if field in AUTH_KEY_NAMES else value)
        return

    if config is None:
        fail(
            f"{provider_id} is not configured "
            f"(run: claude-model providers config {provider_id})",
        )
    click.echo(f"  {'file':16s}: {path}")
    for key, value in config.to_env().items():
        shown = mask_token(value) if key in AUTH_KEY_NAMES else value
        click.echo(f"  {key:32s}: {shown}")


# ---------------------------------------------------------------------------
# remove
# ---------------------------------------------------------------------------


@providers_group.command("remove")
@click.argument("provider_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_obj
def remove_cmd(obj: dict, provider_id: str, yes: bool) -> None:
    """Delete a provider's settings file."""
    store: ProviderSettingsStore = obj["store"]
    try:
        path = store.resolve_path(provider_id)
        if not yes and path.exists():
            click.confirm(f"Remove {path}?", abort=True)
        removed = store.remove(provider_id)
    except ConfigError as exc:
        fail(str(exc))
    if removed:
        click.echo(click.style("✓", fg="green") + f" Removed: {path}")
    else:
        click.echo(click.style("⚠", fg="yellow") + f" Not found: {path}")
