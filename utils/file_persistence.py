#!/usr/bin/env python3
"""Write helpers for settings, log files and the generated changelog (atomic, durable)."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional, Union

from configs.config import Config


def write_text_atomic(path: Union[str, Path], text: str, atomic: Optional[bool] = None) -> None:
    """Overwrite ``path`` with ``text`` in full.

    Uses fsync + atomic replace unless atomic writes are disabled.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if atomic is None:
        atomic = Config.ATOMIC_WRITES
    if not atomic:
        path.write_text(text, encoding="utf-8")
        return
    tmp = path.with_suffix(path.suffix + ".tmp")
    with open(tmp, "w", encoding="utf-8") as f:
        f.write(text)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, path)


def write_json(path: Union[str, Path], data: Any) -> None:
    write_text_atomic(path, json.dumps(data, indent=Config.JSON_INDENT, ensure_ascii=False))


def read_text(path: Union[str, Path]) -> str:
    return Path(path).read_text(encoding="utf-8")
