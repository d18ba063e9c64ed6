"""Tests for the ``claude-model`` CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from ccswitch.cli import models_cmd
from ccswitch.cli.main import cli
from ccswitch.providers import ProviderSettingsStore


def _invoke(config_dir: Path, *args: str, input: str | None = None):
    runner = CliRunner()
    return runner.invoke(cli, ["--config-dir", str(config_dir), *args], input=input)


class TestProvidersConfig:
    def test_config_with_token(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "providers", "config", "kimi", "--token", "sk-abcdefghijkl")

        assert result.exit_code == 0, result.output
        assert "sk-abc****" in result.output
        assert "sk-abcdefghijkl" not in result.output
        env = json.loads((config_dir / "kimi_settings.json").read_text())["env"]
        assert env["ANTHROPIC_API_KEY"] == "sk-abcdefghijkl"

    def test_prompted_token(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "providers", "config", "glm", input="glm-secret\n")

        assert result.exit_code == 0, result.output
        store = ProviderSettingsStore(config_dir)
        assert store.read_existing_token("glm") == "glm-secret"

    def test_enter_keeps_existing(self, config_dir: Path) -> None:
        ProviderSettingsStore(config_dir).configure("glm", token="secret123")

        result = _invoke(config_dir, "providers", "config", "glm", input="\n")

        assert result.exit_code == 0, result.output
        assert "Press Enter to keep" in result.output
        assert ProviderSettingsStore(config_dir).read_existing_token("glm") == "secret123"

    def test_empty_token_without_existing_fails(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "providers", "config", "kimi", input="\n")

        assert result.exit_code == 1
        assert "No API token provided" in result.output
        assert not (config_dir / "kimi_settings.json").exists()

    def test_interactive_provider_choice(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "providers", "config", input="2\nsk-kimi\n")

        assert result.exit_code == 0, result.output
        assert ProviderSettingsStore(config_dir).read_existing_token("kimi") == "sk-kimi"

    def test_unknown_provider(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "providers", "config", "gpt", "--token", "x")

        assert result.exit_code == 1
        assert "Unknown provider: gpt" in result.output

    def test_config_all_skips_empty(self, config_dir: Path) -> None:
        ProviderSettingsStore(config_dir).configure("kimi", token="sk-kimi-kept")

        result = _invoke(
            config_dir,
            "providers",
            "config",
            "--all",
            input="glm-secret\n" + "\n" * 5,
        )

        assert result.exit_code == 0, result.output
        assert "Skipped DeepSeek" in result.output
        assert "Configured: glm, kimi" in result.output
        store = ProviderSettingsStore(config_dir)
        assert store.read_existing_token("glm") == "glm-secret"
        assert store.read_existing_token("kimi") == "sk-kimi-kept"
        assert not (config_dir / "deepseek_settings.json").exists()

    def test_config_all_rejects_provider(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "providers", "config", "glm", "--all")
        assert result.exit_code == 1
        assert "--all cannot be combined" in result.output


class TestProvidersShowListRemove:
    def test_show_masks_token(self, config_dir: Path) -> None:
        ProviderSettingsStore(config_dir).configure("glm", token="sk-1234567890")

        result = _invoke(config_dir, "providers", "show", "glm")

        assert result.exit_code == 0, result.output
        assert "sk-123****" in result.output
        assert "sk-1234567890" not in result.output
        assert "https://api.z.ai/api/anthropic" in result.output

    def test_show_field(self, config_dir: Path) -> None:
        ProviderSettingsStore(config_dir).configure("glm", token="sk-1234567890")

        result = _invoke(config_dir, "providers", "show", "glm", "ANTHROPIC_MODEL")

        assert result.exit_code == 0
        assert result.output.strip() == "glm-5"

    def test_show_unconfigured(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "providers", "show", "qwen")
        assert result.exit_code == 1
        assert "not configured" in result.output

    def test_list(self, config_dir: Path) -> None:
        ProviderSettingsStore(config_dir).configure("kimi", token="sk-abcdefghijkl")

        result = _invoke(config_dir, "providers", "list")

        assert result.exit_code == 0
        assert "Kimi (Moonshot) (kimi)" in result.output
        assert "sk-abc****" in result.output
        assert "(not set)" in result.output

    def test_remove(self, config_dir: Path) -> None:
        ProviderSettingsStore(config_dir).configure("kimi", token="sk-abcdefghijkl")

        result = _invoke(config_dir, "providers", "remove", "kimi", "--yes")

        assert result.exit_code == 0
        assert not (config_dir / "kimi_settings.json").exists()


class TestModelCommands:
    def test_current_default(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "current")
        assert result.exit_code == 0
        assert "Current default model: default" in result.output

    def test_set_alias(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "set", "claude-opus")

        assert result.exit_code == 0, result.output
        data = json.loads((config_dir / "settings.json").read_text())
        assert data["defaultModel"] == "claude-opus-4-5-20251101"

    def test_list_marks_current(self, config_dir: Path) -> None:
        _invoke(config_dir, "set", "glm-4.7")

        result = _invoke(config_dir, "list")

        assert result.exit_code == 0
        assert "claude-glm → glm-4.7 [CURRENT]" in result.output

    def test_reset(self, config_dir: Path) -> None:
        _invoke(config_dir, "set", "glm-4.7")

        result = _invoke(config_dir, "reset")

        assert result.exit_code == 0
        assert (config_dir / "settings.json.bak").exists()
        assert "defaultModel" not in json.loads((config_dir / "settings.json").read_text())

    def test_safety_toggle(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "safety", "on")
        assert "ENABLED" in result.output
        result = _invoke(config_dir, "safety")
        assert "ENABLED" in result.output
        result = _invoke(config_dir, "safety", "off")
        assert "DISABLED" in result.output


class TestUse:
    @pytest.fixture
    def launches(self, monkeypatch: pytest.MonkeyPatch) -> list:
        calls: list = []

        def _launch(args, config=None, dangerous=False):
            calls.append({"args": args, "config": config, "dangerous": dangerous})

        monkeypatch.setattr(models_cmd, "launch", _launch)
        return calls

    def test_use_provider_alias(self, config_dir: Path, launches: list) -> None:
        ProviderSettingsStore(config_dir).configure("glm", token="sk-glm")

        result = _invoke(config_dir, "use", "claude-glm", "--resume")

        assert result.exit_code == 0, result.output
        call = launches[0]
        assert call["args"] == ["--resume"]
        assert call["config"].auth_token == "sk-glm"
        assert call["dangerous"] is False
        data = json.loads((config_dir / "settings.json").read_text())
        assert data["defaultModel"] == "glm-4.7"

    def test_use_unconfigured_provider(self, config_dir: Path, launches: list) -> None:
        result = _invoke(config_dir, "use", "claude-kimi")

        assert result.exit_code == 1
        assert "kimi is not configured" in result.output
        assert launches == []

    def test_use_custom_model_with_dangerous_mode(
        self,
        config_dir: Path,
        launches: list,
    ) -> None:
        _invoke(config_dir, "safety", "on")

        result = _invoke(config_dir, "use", "my-model")

        assert result.exit_code == 0, result.output
        assert launches[0]["config"] is None
        assert launches[0]["dangerous"] is True

    def test_use_empty_model_fails_cleanly(self, config_dir: Path, launches: list) -> None:
        result = _invoke(config_dir, "use", "")

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "model name is required" in result.output
        assert launches == []
