# -*- coding: utf-8 -*-
"""Pydantic data models for providers and their settings files."""

from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import BaseModel, Field

from ..constant import DEFAULT_TIMEOUT_MS

AuthKeyName = Literal["ANTHROPIC_AUTH_TOKEN", "ANTHROPIC_API_KEY"]

AUTH_KEY_NAMES: tuple[str, ...] = ("ANTHROPIC_API_KEY", "ANTHROPIC_AUTH_TOKEN")


class ModelInfo(BaseModel):
    """A single model offered by a provider."""

    id: str = Field(..., description="Model identifier used in API calls")
    name: str = Field(..., description="Human-readable model name")


class ProviderDefinition(BaseModel):
    """Static definition of a known provider."""

    id: str = Field(..., description="Provider identifier")
    name: str = Field(..., description="Human-readable provider name")
    settings_name: str = Field(
        ...,
        description="Stem of the settings file (<stem>_settings.json)",
    )
    default_base_url: str = Field(..., description="Default API base URL")
    default_model: str = Field(..., description="Model used when none given")
    fast_model: str = Field(
        default="",
        description="Model mapped to the sonnet/haiku/subagent tiers",
    )
    auth_key_name: AuthKeyName = Field(
        default="ANTHROPIC_AUTH_TOKEN",
        description="env key that carries the token",
    )
    models: List[ModelInfo] = Field(
        default_factory=list,
        description="Selectable models, in display order",
    )
    legacy_base_url_markers: List[str] = Field(
        default_factory=list,
        description="Substrings of deprecated endpoints to migrate away from",
    )

    @property
    def model_ids(self) -> List[str]:
        return [m.id for m in self.models]


class ProviderConfig(BaseModel):
    """Resolved configuration of one provider, as stored on disk."""

    provider_id: str
    base_url: str
    model_name: str
    auth_key_name: AuthKeyName = "ANTHROPIC_AUTH_TOKEN"
    auth_token: str = Field(..., repr=False)
    available_models: List[str] = Field(default_factory=list)
    fast_model: str = ""
    opus_model: str = ""
    timeout_ms: str = DEFAULT_TIMEOUT_MS

    def to_env(self) -> Dict[str, str]:
        """Return the environment variables Claude Code reads."""
        fast = self.fast_model or self.model_name
        opus = self.opus_model or self.model_name
        available = self.available_models or [self.model_name]
        return {
            "ANTHROPIC_BASE_URL": self.base_url,
            self.auth_key_name: self.auth_token,
            "API_TIMEOUT_MS": self.timeout_ms,
            "ANTHROPIC_MODEL": self.model_name,
            "ANTHROPIC_SMALL_FAST_MODEL": fast,
            "ANTHROPIC_DEFAULT_SONNET_MODEL": fast,
            "ANTHROPIC_DEFAULT_OPUS_MODEL": opus,
            "ANTHROPIC_DEFAULT_HAIKU_MODEL": fast,
            "CLAUDE_CODE_SUBAGENT_MODEL": fast,
            "CLAUDE_CODE_AVAILABLE_MODELS": ",".join(available),
        }

    def to_settings(self) -> dict:
        """Return the per-provider settings document."""
        return {"env": self.to_env()}


class ModelAlias(BaseModel):
    """Short command name mapped to a model (and optionally a provider)."""

    name: str
    model: str
    provider_id: str = ""
    description: str = ""


class SwitcherConfig(BaseModel):
    """Tool-level preferences (.model-switcher-config)."""

    auto_dangerous_mode: bool = False
