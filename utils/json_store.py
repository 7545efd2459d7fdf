# -*- coding: utf-8 -*-
# utils/json_store.py
import json
import logging
import os
import shutil
import tempfile
import time
from typing import Any, Optional

from bilingual.errors import ArtifactError, ConfigError

logger = logging.getLogger(__name__)

BACKUP_STYLES = ("bak", "backup", "timestamp")


def dumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


def load_json(path: str, expect: Optional[type] = None) -> Any:
    """Read a whole JSON file; any failure becomes an ArtifactError naming the file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ArtifactError(path, "file not found", e) from e
    except json.JSONDecodeError as e:
        raise ArtifactError(path, f"invalid JSON ({e.msg} at line {e.lineno} column {e.colno})", e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ArtifactError(path, f"cannot read file ({e})", e) from e
    if expect is not None and not isinstance(data, expect):
        raise ArtifactError(path, f"expected a JSON {_json_type(expect)}, got {_json_type(type(data))}")
    return data


def _json_type(t: type) -> str:
    return {dict: "object", list: "array"}.get(t, t.__name__)


def backup_path(path: str, style: str = "bak", now_ms: Optional[int] = None) -> str:
    if style == "bak":
        return path + ".bak"
    if style == "backup":
        stem, ext = os.path.splitext(path)
        return f"{stem}-backup{ext}"
    if style == "timestamp":
        ms = now_ms if now_ms is not None else int(time.time() * 1000)
        return f"{path}.bak.{ms}"
    raise ConfigError(f"unknown backup style {style!r} (expected one of: {', '.join(BACKUP_STYLES)})")


def make_backup(path: str, style: str = "bak") -> Optional[str]:
    """Copy ``path`` aside before it is rewritten. A ``.bak`` that already exists is kept."""
    if not os.path.exists(path):
        return None
    target = backup_path(path, style)
    if style == "bak" and os.path.exists(target):
        logger.info("backup %s already exists, keeping it", target)
        return target
    shutil.copyfile(path, target)
    logger.info("backup written to %s", target)
    return target


def save_json(path: str, data: Any, backup: Optional[str] = None) -> Optional[str]:
    """Write ``data`` to ``path`` (temp file + rename). Returns the backup path, if any."""
    saved = make_backup(path, backup) if backup else None
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".tmp-", suffix=".json", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(dumps(data))
        if os.path.exists(path):
            shutil.copymode(path, tmp)
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise
    logger.info("wrote %s (%.2f KB)", path, os.path.getsize(path) / 1024)
    return saved
