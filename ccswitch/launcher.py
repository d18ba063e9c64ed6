# -*- coding: utf-8 -*-
"""Locate the real ``claude`` binary and exec it with a provider config."""
from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from .constant import CLAUDE_BINARY_LOCATIONS, DANGEROUS_FLAG, WRAPPER_MARKER
from .providers.errors import ClaudeNotFoundError
from .providers.models import ProviderConfig

logger = logging.getLogger(__name__)


def _npm_global_binary() -> Optional[Path]:
    if shutil.which("npm") is None:
        return None
    try:
        result = subprocess.run(
            ["npm", "prefix", "-g"],
            capture_output=True,
            text=True,
            timeout=10,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("npm prefix -g failed: %s", exc)
        return None
    prefix = result.stdout.strip()
    if result.returncode != 0 or not prefix:
        return None
    candidate = Path(prefix) / "bin" / "claude"
    return candidate if candidate.is_file() else None


def is_wrapper_script(path: Path) -> bool:
    """True if *path* is a shell script installed by this tool."""
    try:
        with open(path, "rb") as fh:
            head = fh.read(4096)
    except OSError:
        return False
    if not head.startswith(b"#!"):
        return False
    return WRAPPER_MARKER.encode() in head


def find_claude_binary(
    locations: Sequence[str] = CLAUDE_BINARY_LOCATIONS,
) -> Optional[str]:
    """Return the path of the real Claude Code binary, or ``None``."""
    npm_bin = _npm_global_binary()
    if npm_bin is not None:
        return str(npm_bin)
    for location in locations:
        path = Path(location).expanduser()
        if not path.is_file():
            continue
        if is_wrapper_script(path):
            logger.debug("Skipping wrapper script %s", path)
            continue
        return str(path)
    return None


def build_launch_env(
    config: Optional[ProviderConfig],
    base_env: Optional[Mapping[str, str]] = None,
) -> dict:
    """Return a copy of *base_env* with *config*'s variables applied."""
    env = dict(os.environ if base_env is None else base_env)
    if config is not None:
        env.update(config.to_env())
    return env


def build_argv(
    binary: str,
    args: Sequence[str] = (),
    dangerous: bool = False,
) -> List[str]:
    argv = [binary, *args]
    if dangerous and DANGEROUS_FLAG not in args:
        argv.insert(1, DANGEROUS_FLAG)
    return argv


def launch(
    args: Sequence[str] = (),
    config: Optional[ProviderConfig] = None,
    dangerous: bool = False,
    binary: Optional[str] = None,
) -> None:
    """Replace the current process with Claude Code."""
    binary = binary or find_claude_binary()
    if not binary:
        raise ClaudeNotFoundError(
            "Claude Code not found. Install it with: "
            "npm install -g @anthropic-ai/claude-code",
        )
    argv = build_argv(binary, args, dangerous=dangerous)
    env = build_launch_env(config)
    logger.info(
        "Starting %s%s",
        binary,
        f" via {config.provider_id} ({config.model_name})" if config else "",
    )
    os.execvpe(binary, argv, env)
