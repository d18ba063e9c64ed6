# -*- coding: utf-8 -*-
"""Interactive helpers shared by CLI commands."""
from __future__ import annotations

from typing import Optional, Sequence

import click


def prompt_choice(
    prompt_text: str,
    options: Sequence[str],
    default: Optional[str] = None,
) -> str:
    """Show a numbered menu and return the chosen option."""
    click.echo(prompt_text)
    for idx, label in enumerate(options, start=1):
        click.echo(f"  {click.style(str(idx), fg='green')}. {label}")
    default_idx = options.index(default) + 1 if default in options else None
    choice = click.prompt(
        f"Select option (1-{len(options)})",
        type=click.IntRange(1, len(options)),
        default=default_idx,
    )
    return options[choice - 1]


def fail(message: str) -> None:
    """Print *message* in red to stderr and exit with status 1."""
    click.echo(click.style(f"✗ {message}", fg="red"), err=True)
    raise SystemExit(1)
