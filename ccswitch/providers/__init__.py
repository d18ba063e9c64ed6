# -*- coding: utf-8 -*-
"""Provider management — models, registry + per-provider settings store."""

from .errors import (
    ClaudeNotFoundError,
    ConfigError,
    MalformedSettingsWarning,
    NoTokenProvidedError,
    UnknownProviderError,
    WriteError,
)
from .models import (
    AUTH_KEY_NAMES,
    ModelAlias,
    ModelInfo,
    ProviderConfig,
    ProviderDefinition,
    SwitcherConfig,
)
from .registry import (
    MODEL_ALIASES,
    PROVIDERS,
    get_provider,
    list_aliases,
    list_providers,
    normalize_provider_id,
    resolve_alias,
)
from .store import (
    ProviderSettingsStore,
    build_provider_config,
    carry_forward_on_empty_input,
    mask_token,
)

__all__ = [
    # errors
    "ClaudeNotFoundError",
    "ConfigError",
    "MalformedSettingsWarning",
    "NoTokenProvidedError",
    "UnknownProviderError",
    "WriteError",
    # models
    "AUTH_KEY_NAMES",
    "ModelAlias",
    "ModelInfo",
    "ProviderConfig",
    "ProviderDefinition",
    "SwitcherConfig",
    # registry
    "MODEL_ALIASES",
    "PROVIDERS",
    "get_provider",
    "list_aliases",
    "list_providers",
    "normalize_provider_id",
    "resolve_alias",
    # store
    "ProviderSettingsStore",
    "build_provider_config",
    "carry_forward_on_empty_input",
    "mask_token",
]
