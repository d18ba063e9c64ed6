# -*- coding: utf-8 -*-
"""Reading and writing per-provider settings files (<name>_settings.json).

Each known provider owns exactly one JSON document under the Claude config
directory::

    {"env": {"ANTHROPIC_BASE_URL": ..., "ANTHROPIC_AUTH_TOKEN": ..., ...}}

Reconfiguring a provider overwrites its document. Only the token (when the
user gives an empty one) and the base URL carry over from the previous file.
"""

from __future__ import annotations

import logging
import warnings
from pathlib import Path
from typing import Optional

from ..constant import CLAUDE_CONFIG_DIR, SETTINGS_SUFFIX
from ..utils import atomic_write_json, load_json
from .errors import (
    MalformedSettingsWarning,
    NoTokenProvidedError,
    WriteError,
)
from .models import AUTH_KEY_NAMES, ProviderConfig, ProviderDefinition
from .registry import get_provider

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _token_from_env(env: Optional[dict]) -> tuple[Optional[str], str]:
    """Return ``(token, key_name)``; ``ANTHROPIC_API_KEY`` wins over
    ``ANTHROPIC_AUTH_TOKEN`` when both are set."""
    if not env:
        return None, ""
    for key in AUTH_KEY_NAMES:
        value = env.get(key)
        if isinstance(value, str) and value.strip():
            return value, key
    return None, ""


def _migrate_base_url(defn: ProviderDefinition, base_url: str) -> str:
    """Replace a deprecated endpoint with the provider's current default."""
    for marker in defn.legacy_base_url_markers:
        if marker in base_url:
            logger.debug(
                "Replacing legacy %s endpoint %s with %s",
                defn.id,
                base_url,
                defn.default_base_url,
            )
            return defn.default_base_url
    return base_url


def build_provider_config(
    defn: ProviderDefinition,
    auth_token: str,
    base_url: str = "",
    model: str = "",
) -> ProviderConfig:
    """Build the full config for *defn*, filling gaps with its defaults."""
    model_name = model or defn.default_model
    available = defn.model_ids or [model_name]
    if model_name not in available:
        available = available + [model_name]
    if defn.fast_model:
        fast_model, opus_model = defn.fast_model, defn.default_model
    else:
        fast_model = opus_model = model_name
    return ProviderConfig(
        provider_id=defn.id,
        base_url=base_url or defn.default_base_url,
        model_name=model_name,
        auth_key_name=defn.auth_key_name,
        auth_token=auth_token,
        available_models=available,
        fast_model=fast_model,
        opus_model=opus_model,
    )


def carry_forward_on_empty_input(
    existing: Optional[str],
    new_input: Optional[str],
    provider_id: str = "",
) -> str:
    """Return *new_input*, or *existing* when the input is blank.

    Raises :class:`NoTokenProvidedError` when both are empty.
    """
    if new_input is not None and new_input.strip():
        return new_input.strip()
    if existing:
        return existing
    raise NoTokenProvidedError(provider_id)


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class ProviderSettingsStore:
    """Durable mapping provider_id -> :class:`ProviderConfig`."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else CLAUDE_CONFIG_DIR

    def resolve_path(self, provider_id: str) -> Path:
        """Return the settings file of *provider_id*."""
        defn = get_provider(provider_id)
        return self.config_dir / f"{defn.settings_name}{SETTINGS_SUFFIX}"

    def _read_env(self, provider_id: str) -> Optional[dict]:
        """Return the ``env`` mapping, or ``None`` if absent or malformed."""
        path = self.resolve_path(provider_id)
        try:
            raw = load_json(path)
        except (OSError, ValueError) as exc:
            warnings.warn(
                f"Ignoring malformed settings file {path}: {exc}",
                MalformedSettingsWarning,
                stacklevel=3,
            )
            return None
        if raw is None:
            return None
        env = raw.get("env")
        if not isinstance(env, dict):
            warnings.warn(
                f"Settings file {path} has no 'env' mapping",
                MalformedSettingsWarning,
                stacklevel=3,
            )
            return None
        return env

    # -- reads --------------------------------------------------------------

    def read_existing_token(self, provider_id: str) -> Optional[str]:
        """Return the stored token, or ``None``."""
        token, _ = _token_from_env(self._read_env(provider_id))
        return token

    def read_existing_field(
        self,
        provider_id: str,
        field_name: str,
    ) -> Optional[str]:
        """Return ``env[field_name]`` as a string, or ``None``."""
        env = self._read_env(provider_id)
        if not env or field_name not in env:
            return None
        value = env[field_name]
        if value is None or isinstance(value, (dict, list)):
            return None
        return str(value)

    get_token = read_existing_token
    get_field = read_existing_field

    def is_configured(self, provider_id: str) -> bool:
        return self.read_existing_token(provider_id) is not None

    def load(self, provider_id: str) -> Optional[ProviderConfig]:
        """Rebuild the stored :class:`ProviderConfig`, or ``None``."""
        defn = get_provider(provider_id)
        env = self._read_env(defn.id)
        token, key_name = _token_from_env(env)
        if token is None:
            return None
        config = build_provider_config(
            defn,
            token,
            base_url=str(env.get("ANTHROPIC_BASE_URL") or ""),
            model=str(env.get("ANTHROPIC_MODEL") or ""),
        )
        update: dict = {"auth_key_name": key_name}
        available = env.get("CLAUDE_CODE_AVAILABLE_MODELS")
        if isinstance(available, str) and available.strip():
            update["available_models"] = [
                m.strip() for m in available.split(",") if m.strip()
            ]
        for field, key in (
            ("fast_model", "ANTHROPIC_DEFAULT_SONNET_MODEL"),
            ("opus_model", "ANTHROPIC_DEFAULT_OPUS_MODEL"),
            ("timeout_ms", "API_TIMEOUT_MS"),
        ):
            if env.get(key):
                update[field] = str(env[key])
        return config.model_copy(update=update)

    # -- writes -------------------------------------------------------------

    def write(self, provider_id: str, config: ProviderConfig) -> Path:
        """Atomically write *config* as the settings file of *provider_id*."""
        path = self.resolve_path(provider_id)
        try:
            atomic_write_json(path, config.to_settings(), mode=0o600)
        except OSError as exc:
            raise WriteError(path, str(exc)) from exc
        logger.info(
            "Wrote %s settings to %s (token %s)",
            provider_id,
            path,
            mask_token(config.auth_token),
        )
        return path

    def configure(
        self,
        provider_id: str,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
    ) -> ProviderConfig:
        """Create or overwrite the settings of *provider_id*.

        An empty *token* keeps the stored one. The base URL falls back to
        the stored value (with deprecated endpoints migrated), then to the
        provider default. Nothing is written when an error is raised.
        """
        defn = get_provider(provider_id)
        env = self._read_env(defn.id)
        existing_token, _ = _token_from_env(env)
        auth_token = carry_forward_on_empty_input(
            existing_token,
            token,
            provider_id=defn.id,
        )

        resolved_url = (base_url or "").strip()
        if not resolved_url and env:
            stored = env.get("ANTHROPIC_BASE_URL")
            if isinstance(stored, str) and stored.strip():
                resolved_url = _migrate_base_url(defn, stored.strip())

        config = build_provider_config(
            defn,
            auth_token,
            base_url=resolved_url,
            model=(model or "").strip(),
        )
        self.write(defn.id, config)
        return config

    def remove(self, provider_id: str) -> bool:
        """Delete the settings file of *provider_id*.

        Returns ``False`` if there was nothing to delete.
        """
        path = self.resolve_path(provider_id)
        if not path.exists():
            return False
        try:
            path.unlink()
        except OSError as exc:
            raise WriteError(path, str(exc)) from exc
        logger.info("Removed %s", path)
        return True


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------


def mask_token(token: Optional[str], visible_chars: int = 6) -> str:
    """Mask a token for safe display, keeping only a short prefix.

    At most half of the token is ever shown.
    Example: ``"sk-abcdefghijk"`` → ``"sk-abc****"``
    """
    if not token:
        return ""
    if len(token) <= visible_chars:
        return "*" * len(token)
    visible = min(visible_chars, len(token) // 2)
    return f"{token[:visible]}****"
