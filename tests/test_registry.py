"""Tests for the provider registry and model aliases."""

import pytest

from ccswitch.providers import (
    MODEL_ALIASES,
    PROVIDERS,
    UnknownProviderError,
    get_provider,
    normalize_provider_id,
    resolve_alias,
)


class TestProviders:
    def test_known_ids(self) -> None:
        assert set(PROVIDERS) == {
            "glm",
            "kimi",
            "deepseek",
            "qwen",
            "minimax",
            "openrouter",
        }

    def test_settings_names_are_unique(self) -> None:
        names = [p.settings_name for p in PROVIDERS.values()]
        assert len(names) == len(set(names))

    def test_zai_is_alias_for_glm(self) -> None:
        assert normalize_provider_id("ZAI") == "glm"
        assert get_provider("zai") is PROVIDERS["glm"]

    def test_unknown_provider(self) -> None:
        with pytest.raises(UnknownProviderError) as exc_info:
            get_provider("nope")
        assert exc_info.value.provider_id == "nope"
        assert "glm" in exc_info.value.known

    def test_kimi_uses_api_key_header(self) -> None:
        assert PROVIDERS["kimi"].auth_key_name == "ANTHROPIC_API_KEY"
        assert PROVIDERS["glm"].auth_key_name == "ANTHROPIC_AUTH_TOKEN"

    def test_glm_publishes_both_variants(self) -> None:
        glm = PROVIDERS["glm"]
        assert glm.model_ids == ["glm-4.7", "glm-5"]
        assert glm.default_model == "glm-5"
        assert glm.fast_model == "glm-4.7"


class TestAliases:
    def test_anthropic_alias(self) -> None:
        alias = resolve_alias("claude-opus")
        assert alias.model == "claude-opus-4-5-20251101"
        assert alias.provider_id == ""

    def test_provider_alias(self) -> None:
        alias = resolve_alias("claude-glm")
        assert alias.model == "glm-4.7"
        assert alias.provider_id == "glm"

    def test_every_provider_has_alias(self) -> None:
        for pid in PROVIDERS:
            assert MODEL_ALIASES[f"claude-{pid}"].provider_id == pid

    def test_unknown_name_is_custom_model(self) -> None:
        alias = resolve_alias("my-custom-model")
        assert alias.model == "my-custom-model"
        assert alias.provider_id == ""
