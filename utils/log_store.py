#!/usr/bin/env python3
"""Contributor log files: one JSON array of entries per user in the logs folder."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from configs.config import Config
from utils.changelog_models import InvalidEntryCollectionError, LogEntry
from utils.file_persistence import read_text, write_json

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def log_file_path(folder: PathLike, username: str) -> Path:
    return Path(folder) / f"{username}{Config.LOG_FILE_SUFFIX}"


def list_log_files(folder: PathLike) -> List[Path]:
    """Regular ``*.json`` files directly inside ``folder``, sorted by name."""
    root = Path(folder)
    return sorted(p for p in root.iterdir() if p.is_file() and p.suffix == Config.LOG_FILE_SUFFIX)


def read_log_file(path: PathLike) -> List[LogEntry]:
    """Read one log file; a missing file has no entries."""
    try:
        raw = read_text(path)
    except FileNotFoundError:
        return []
    data = json.loads(raw)
    if not isinstance(data, list):
        raise InvalidEntryCollectionError(f"{path} must contain an array of logs")
    try:
        return [LogEntry.model_validate(item) for item in data]
    except ValidationError as e:
        raise InvalidEntryCollectionError(f"{path} contains an invalid log entry: {e}")


def write_log_file(path: PathLike, entries: List[LogEntry]) -> None:
    write_json(path, [e.to_json_dict() for e in entries])


def read_all_entries(folder: PathLike) -> List[LogEntry]:
    entries: List[LogEntry] = []
    for path in list_log_files(folder):
        file_entries = read_log_file(path)
        logger.debug(f"Read {len(file_entries)} entries from {path.name}")
        entries.extend(file_entries)
    return entries


def append_entry(folder: PathLike, username: str, entry: LogEntry) -> Path:
    path = log_file_path(folder, username)
    entries = read_log_file(path)
    entries.append(entry)
    write_log_file(path, entries)
    logger.info(f"Appended entry {entry.title!r} to {path}")
    return path


def publish_version(folder: PathLike, version: str) -> int:
    """Assign ``version`` to every entry that has none; return how many changed."""
    updated = 0
    for path in list_log_files(folder):
        entries = read_log_file(path)
        for entry in entries:
            if not entry.version:
                entry.version = version
                updated += 1
        write_log_file(path, entries)
    logger.info(f"Assigned version {version!r} to {updated} entries")
    return updated
