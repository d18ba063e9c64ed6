# -*- coding: utf-8 -*-
"""Error types raised by the provider settings store."""
from __future__ import annotations

from typing import Iterable


class ConfigError(Exception):
    """Base error for all configuration failures."""


class UnknownProviderError(ConfigError):
    """The provider id is not one of the known providers."""

    def __init__(self, provider_id: str, known: Iterable[str] = ()) -> None:
        self.provider_id = provider_id
        self.known = tuple(known)
        msg = f"Unknown provider: {provider_id}"
        if self.known:
            msg += f" (known: {', '.join(self.known)})"
        super().__init__(msg)


class NoTokenProvidedError(ConfigError):
    """No token was supplied and none is stored for the provider."""

    def __init__(self, provider_id: str) -> None:
        self.provider_id = provider_id
        super().__init__(f"No API token provided for {provider_id}")


class WriteError(ConfigError):
    """A settings file could not be written."""

    def __init__(self, path, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        super().__init__(
            f"Failed to write {path}" + (f": {detail}" if detail else ""),
        )


class ClaudeNotFoundError(ConfigError):
    """The real Claude Code binary could not be located."""


class MalformedSettingsWarning(UserWarning):
    """An existing settings file is not valid JSON and is treated as absent."""
