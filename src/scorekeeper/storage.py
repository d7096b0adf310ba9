"""JSON files holding one player's record each."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Mapping

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Reading or writing a record file failed."""


def record_path(name: str, data_dir: str) -> str:
    return os.path.join(data_dir, f"{name}.json")


def list_records(data_dir: str) -> List[str]:
    """Return the saved record files in `data_dir`, sorted by file name."""
    if not os.path.isdir(data_dir):
        return []
    return sorted(
        os.path.join(data_dir, entry)
        for entry in os.listdir(data_dir)
        if entry.lower().endswith(".json") and os.path.isfile(os.path.join(data_dir, entry))
    )


def write_record(payload: Mapping[str, Any], data_dir: str) -> str:
    if not os.path.isdir(data_dir):
        try:
            os.makedirs(data_dir, exist_ok=True)
        except OSError as exc:
            logger.error('Failed to create a directory named "%s".', data_dir)
            raise StorageError(f"cannot create {data_dir}: {exc}") from exc
        logger.info('Create a directory named "%s".', data_dir)

    path = record_path(str(payload["name"]), data_dir)
    try:
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(payload, fh, indent=2, ensure_ascii=False)
    except (OSError, TypeError, ValueError) as exc:
        logger.error('Failed to write a JSON file named "%s".', os.path.basename(path))
        raise StorageError(f"cannot write {path}: {exc}") from exc
    logger.info('Create a JSON file named "%s".', os.path.basename(path))
    return path


def read_record(path: str) -> Dict[str, Any]:
    file_name = os.path.basename(path)
    logger.info('Reading a JSON file named "%s".', file_name)
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except OSError as exc:
        logger.error('Failed to read a JSON file named "%s".', file_name)
        raise StorageError(f"cannot read {path}: {exc}") from exc
    except ValueError as exc:
        logger.error('Failed to decode "%s".', file_name)
        raise StorageError(f"cannot decode {path}: {exc}") from exc
    if not isinstance(data, dict):
        logger.error('Failed to decode "%s".', file_name)
        raise StorageError(f"{path} does not hold a record")
    return data
