# -*- coding: utf-8 -*-
"""Small filesystem helpers shared by the settings stores."""
from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Optional


def load_json(path: Path) -> Optional[dict]:
    """Load a JSON object from *path*.

    Returns ``None`` when the file does not exist. Raises ``ValueError``
    (``json.JSONDecodeError`` included) when the content is not a JSON
    object.
    """
    if not path.is_file():
        return None
    with open(path, "r", encoding="utf-8") as fh:
        raw = json.load(fh)
    if not isinstance(raw, dict):
        raise ValueError(f"{path} does not contain a JSON object")
    return raw


def dump_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def atomic_write_json(
    path: Path,
    data: Any,
    mode: Optional[int] = 0o600,
) -> None:
    """Write *data* to *path* through a temp file and ``os.replace``.

    The temp file lives in the target directory so the rename never crosses
    filesystems. With ``mode=None`` the permissions of an existing file are
    kept (``0o644`` for a new one). Readers see either the old or the new
    document, never a partial one.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if mode is None:
        mode = path.stat().st_mode & 0o777 if path.exists() else 0o644

    fd, tmp = tempfile.mkstemp(
        prefix=f".{path.name}.",
        suffix=".tmp",
        dir=str(path.parent),
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(dump_json(data))
            fh.flush()
            os.fsync(fh.fileno())
        os.chmod(tmp, mode)
        os.replace(tmp, path)
    finally:
        if os.path.exists(tmp):
            os.remove(tmp)
