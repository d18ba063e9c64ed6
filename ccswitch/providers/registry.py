# -*- coding: utf-8 -*-
"""Built-in provider definitions, model aliases and registry."""

from __future__ import annotations

from typing import List

from .errors import UnknownProviderError
from .models import ModelAlias, ModelInfo, ProviderDefinition

# ---------------------------------------------------------------------------
# Provider definitions
# ---------------------------------------------------------------------------

PROVIDER_GLM = ProviderDefinition(
    id="glm",
    name="GLM (Z.ai)",
    settings_name="zai",
    default_base_url="https://api.z.ai/api/anthropic",
    default_model="glm-5",
    fast_model="glm-4.7",
    models=[
        ModelInfo(id="glm-4.7", name="GLM 4.7"),
        ModelInfo(id="glm-5", name="GLM 5"),
    ],
    # Old OpenAI-style coding endpoint written by earlier releases.
    legacy_base_url_markers=["/api/coding/paas/v4"],
)

PROVIDER_KIMI = ProviderDefinition(
    id="kimi",
    name="Kimi (Moonshot)",
    settings_name="kimi",
    default_base_url="https://api.kimi.com/coding/",
    default_model="kimi-k2.5",
    auth_key_name="ANTHROPIC_API_KEY",
    models=[ModelInfo(id="kimi-k2.5", name="Kimi K2.5")],
)

PROVIDER_DEEPSEEK = ProviderDefinition(
    id="deepseek",
    name="DeepSeek",
    settings_name="deepseek",
    default_base_url="https://api.deepseek.com/anthropic",
    default_model="deepseek-chat",
    models=[
        ModelInfo(id="deepseek-chat", name="DeepSeek Chat"),
        ModelInfo(id="deepseek-reasoner", name="DeepSeek Reasoner"),
    ],
)

PROVIDER_QWEN = ProviderDefinition(
    id="qwen",
    name="Qwen (Alibaba)",
    settings_name="qwen",
    default_base_url="https://dashscope-intl.aliyuncs.com/apps/anthropic",
    default_model="qwen-plus",
    models=[
        ModelInfo(id="qwen-plus", name="Qwen Plus"),
        ModelInfo(id="qwen-max", name="Qwen Max"),
        ModelInfo(id="qwen-coder", name="Qwen Coder"),
    ],
)

PROVIDER_MINIMAX = ProviderDefinition(
    id="minimax",
    name="MiniMax",
    settings_name="minimax",
    default_base_url="https://api.minimax.io/anthropic",
    default_model="MiniMax-M2",
    models=[ModelInfo(id="MiniMax-M2", name="MiniMax M2")],
)

PROVIDER_OPENROUTER = ProviderDefinition(
    id="openrouter",
    name="OpenRouter",
    settings_name="openrouter",
    default_base_url="https://openrouter.ai/api",
    default_model="anthropic/claude-sonnet-4.5",
    models=[
        ModelInfo(
            id="anthropic/claude-sonnet-4.5",
            name="Claude Sonnet 4.5 (OpenRouter)",
        ),
    ],
)

# Registry: provider_id -> ProviderDefinition
PROVIDERS: dict[str, ProviderDefinition] = {
    p.id: p
    for p in (
        PROVIDER_GLM,
        PROVIDER_KIMI,
        PROVIDER_DEEPSEEK,
        PROVIDER_QWEN,
        PROVIDER_MINIMAX,
        PROVIDER_OPENROUTER,
    )
}

# Alternate ids accepted on input.
PROVIDER_ALIASES: dict[str, str] = {"zai": "glm"}

# ---------------------------------------------------------------------------
# Model aliases (command names)
# ---------------------------------------------------------------------------

_ANTHROPIC_ALIASES: List[ModelAlias] = [
    ModelAlias(
        name="claude",
        model="claude-sonnet-4-5-20250515",
        description="Claude Sonnet 4.5",
    ),
    ModelAlias(
        name="claude-opus",
        model="claude-opus-4-5-20251101",
        description="Claude Opus 4.5",
    ),
    ModelAlias(
        name="claude-sonnet",
        model="claude-sonnet-4-5-20250515",
        description="Claude Sonnet 4.5",
    ),
    ModelAlias(
        name="claude-haiku",
        model="claude-haiku-4-5-20250114",
        description="Claude Haiku 4.5",
    ),
]

MODEL_ALIASES: dict[str, ModelAlias] = {
    a.name: a
    for a in _ANTHROPIC_ALIASES
    + [
        ModelAlias(
            name=f"claude-{p.id}",
            model=p.fast_model or p.default_model,
            provider_id=p.id,
            description=p.name,
        )
        for p in PROVIDERS.values()
    ]
}


def normalize_provider_id(provider_id: str) -> str:
    """Return the canonical id for *provider_id* (lowercased, de-aliased)."""
    pid = (provider_id or "").strip().lower()
    return PROVIDER_ALIASES.get(pid, pid)


def get_provider(provider_id: str) -> ProviderDefinition:
    """Return a provider definition by id.

    Raises :class:`UnknownProviderError` for ids outside the registry.
    """
    defn = PROVIDERS.get(normalize_provider_id(provider_id))
    if defn is None:
        raise UnknownProviderError(provider_id, PROVIDERS)
    return defn


def list_providers() -> List[ProviderDefinition]:
    """Return all registered provider definitions."""
    return list(PROVIDERS.values())


def list_aliases() -> List[ModelAlias]:
    return list(MODEL_ALIASES.values())


def resolve_alias(name: str) -> ModelAlias:
    """Map a command alias to its model; unknown names are custom models."""
    alias = MODEL_ALIASES.get(name)
    if alias is not None:
        return alias
    return ModelAlias(name=name, model=name)
