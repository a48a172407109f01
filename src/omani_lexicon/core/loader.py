from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .errors import LoadError
from .store import RecordStore

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path("lexicon-data.json")


def load_records_json(path: Path = DEFAULT_DATA_FILE) -> List[Dict[str, Any]]:
    """Read the lexicon dataset: a UTF-8 JSON array of entry objects.

    Raises:
        LoadError: If the file is missing, is not valid JSON, or its top level
            is not an array.
    """
    if not path.exists():
        logger.error("Error loading data: %s not found", path)
        raise LoadError(f"Dataset not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("Error loading data from %s: %s", path, e)
        raise LoadError(f"Could not parse dataset {path}: {e}") from e
    if not isinstance(data, list):
        logger.error("Error loading data: %s top level is %s", path, type(data).__name__)
        raise LoadError(f"Dataset {path} must contain a JSON array, got {type(data).__name__}")
    return data


def load_store_json(path: Path = DEFAULT_DATA_FILE) -> RecordStore:
    """Read ``path`` and return a loaded RecordStore."""
    return RecordStore.from_records(load_records_json(path))


__all__ = ["DEFAULT_DATA_FILE", "load_records_json", "load_store_json"]
