# -*- coding: utf-8 -*-
from .config import (
    clear_default_model,
    get_default_model,
    get_settings_path,
    load_switcher_config,
    save_switcher_config,
    set_default_model,
)

__all__ = [
    "clear_default_model",
    "get_default_model",
    "get_settings_path",
    "load_switcher_config",
    "save_switcher_config",
    "set_default_model",
]
