# -*- coding: utf-8 -*-
"""Shared Claude Code settings (settings.json) and switcher preferences."""
from __future__ import annotations

import logging
import shutil
import warnings
from pathlib import Path
from typing import Optional

from ..constant import (
    CLAUDE_CONFIG_DIR,
    DEFAULT_MODEL,
    SETTINGS_FILE,
    SWITCHER_CONFIG_FILE,
)
from ..providers.errors import MalformedSettingsWarning, WriteError
from ..providers.models import SwitcherConfig
from ..utils import atomic_write_json, load_json

logger = logging.getLogger(__name__)


def get_settings_path(config_dir: Optional[Path] = None) -> Path:
    return (config_dir or CLAUDE_CONFIG_DIR) / SETTINGS_FILE


# ---------------------------------------------------------------------------
# defaultModel
# ---------------------------------------------------------------------------


def get_default_model(config_dir: Optional[Path] = None) -> str:
    """Return ``defaultModel`` from settings.json, or ``"default"``."""
    path = get_settings_path(config_dir)
    try:
        raw = load_json(path)
    except (OSError, ValueError) as exc:
        warnings.warn(
            f"Ignoring malformed settings file {path}: {exc}",
            MalformedSettingsWarning,
            stacklevel=2,
        )
        return DEFAULT_MODEL
    value = (raw or {}).get("defaultModel")
    if isinstance(value, str) and value:
        return value
    return DEFAULT_MODEL


def _load_for_update(path: Path) -> dict:
    """Load settings.json for a read-modify-write; refuse to clobber junk."""
    try:
        return load_json(path) or {}
    except (OSError, ValueError) as exc:
        raise WriteError(path, f"existing file is not valid JSON ({exc})") from exc


def set_default_model(model_name: str, config_dir: Optional[Path] = None) -> None:
    """Set ``defaultModel``; every other key of settings.json is preserved."""
    model_name = (model_name or "").strip()
    if not model_name:
        raise ValueError("model name is required")
    path = get_settings_path(config_dir)
    data = _load_for_update(path)
    data["defaultModel"] = model_name
    try:
        atomic_write_json(path, data, mode=None)
    except OSError as exc:
        raise WriteError(path, str(exc)) from exc
    logger.info("Default model set to %s", model_name)


def clear_default_model(config_dir: Optional[Path] = None) -> Optional[Path]:
    """Remove ``defaultModel`` after backing settings.json up to ``.bak``.

    Returns the backup path, or ``None`` when there is no settings file.
    """
    path = get_settings_path(config_dir)
    if not path.is_file():
        logger.warning("Claude settings file not found: %s", path)
        return None
    data = _load_for_update(path)
    backup = path.with_name(f"{path.name}.bak")
    try:
        shutil.copy2(path, backup)
        if "defaultModel" in data:
            del data["defaultModel"]
            atomic_write_json(path, data, mode=None)
    except OSError as exc:
        raise WriteError(path, str(exc)) from exc
    logger.info("Removed defaultModel from %s (backup: %s)", path, backup)
    return backup


# ---------------------------------------------------------------------------
# .model-switcher-config (KEY=value lines)
# ---------------------------------------------------------------------------

_TRUE_VALUES = ("1", "true", "yes", "on")


def get_switcher_config_path(config_dir: Optional[Path] = None) -> Path:
    return (config_dir or CLAUDE_CONFIG_DIR) / SWITCHER_CONFIG_FILE


def load_switcher_config(config_dir: Optional[Path] = None) -> SwitcherConfig:
    path = get_switcher_config_path(config_dir)
    if not path.is_file():
        return SwitcherConfig()
    values: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        values[key.strip()] = value.strip().strip("\"'")
    return SwitcherConfig(
        auto_dangerous_mode=values.get("AUTO_DANGEROUS_MODE", "").lower()
        in _TRUE_VALUES,
    )


def save_switcher_config(
    config: SwitcherConfig,
    config_dir: Optional[Path] = None,
) -> Path:
    path = get_switcher_config_path(config_dir)
    content = (
        "# Claude Code Model Switcher Configuration\n"
        f"AUTO_DANGEROUS_MODE={'true' if config.auto_dangerous_mode else 'false'}\n"
    )
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        path.chmod(0o600)
    except OSError as exc:
        raise WriteError(path, str(exc)) from exc
    return path
