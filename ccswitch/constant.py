# -*- coding: utf-8 -*-
import os
from pathlib import Path

# Env key for the Claude Code config directory (shared with Claude Code).
CONFIG_DIR_ENV = "CLAUDE_CONFIG_DIR"

CLAUDE_CONFIG_DIR = Path(
    os.environ.get(CONFIG_DIR_ENV, "~/.claude"),
).expanduser()

# Shared Claude Code settings holding ``defaultModel``.
SETTINGS_FILE = "settings.json"

SETTINGS_SUFFIX = "_settings.json"

SWITCHER_CONFIG_FILE = ".model-switcher-config"

DEFAULT_MODEL = "default"

DEFAULT_TIMEOUT_MS = "3000000"

# Env key for the CLI log level.
LOG_LEVEL_ENV = "CCSWITCH_LOG_LEVEL"

DANGEROUS_FLAG = "--dangerously-skip-permissions"

# Marker present in the wrapper scripts this tool installs next to ``claude``.
WRAPPER_MARKER = "claude-model"

# Locations checked for the real ``claude`` binary after the npm prefix.
CLAUDE_BINARY_LOCATIONS = (
    "/usr/local/bin/claude",
    "/usr/bin/claude",
    "~/.npm-global/bin/claude",
    "~/.local/bin/claude",
)
