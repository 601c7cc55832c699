"""
Persistence for the workout log.

The log lives in a single string blob under a fixed key, the way a browser
keeps it in local storage. A BlobStore holds such blobs; the
WorkoutRepository serializes the ordered list of records into one of them.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from treino_core.constants import STORAGE_KEY
from treino_core.models import WorkoutRecord
from treino_core.utils import load_json_file, save_json_file

logger = logging.getLogger(__name__)


class BlobStore:
    """Interface of a string-keyed blob store."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def clear(self, key: str) -> None:
        raise NotImplementedError


class MemoryBlobStore(BlobStore):
    """Blob store kept in memory only."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._blobs: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._blobs.get(key)

    def set(self, key: str, value: str) -> None:
        self._blobs[key] = value

    def clear(self, key: str) -> None:
        self._blobs.pop(key, None)


class JsonFileBlobStore(BlobStore):
    """
    Blob store backed by a JSON object on disk.

    The file maps each key to its blob string. A missing or unreadable file
    behaves as an empty store.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        data = load_json_file(self.path)
        if not isinstance(data, dict):
            if data is not None:
                logger.error(f"Storage file '{self.path}' does not hold a JSON object. Ignoring it.")
            return {}
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        if value is not None and not isinstance(value, str):
            # Blobs are always strings; re-encode anything written by hand
            value = json.dumps(value)
        return value

    def set(self, key: str, value: str) -> None:
        blobs = self._read()
        blobs[key] = value
        if not save_json_file(self.path, blobs):
            raise OSError(f"Could not write storage file '{self.path}'")
        logger.debug(f"Saved blob '{key}' to {self.path}")

    def clear(self, key: str) -> None:
        blobs = self._read()
        if key not in blobs:
            return
        del blobs[key]
        if not save_json_file(self.path, blobs):
            raise OSError(f"Could not write storage file '{self.path}'")
        logger.debug(f"Removed blob '{key}' from {self.path}")


def sort_entries(entries: List[WorkoutRecord]) -> List[WorkoutRecord]:
    """Order records most recent first by (date, start)."""
    return sorted(entries, key=lambda e: e.sort_key, reverse=True)


class WorkoutRepository:
    """Reads and writes the ordered workout log through a BlobStore."""

    def __init__(self, store: BlobStore, key: str = STORAGE_KEY):
        self.store = store
        self.key = key

    def load_entries(self) -> List[WorkoutRecord]:
        """
        Load all records.

        Malformed data is logged and treated as an empty log.
        """
        data = self.store.get(self.key)
        if not data:
            return []
        try:
            raw = json.loads(data)
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing stored entries: {e}")
            return []
        if not isinstance(raw, list):
            logger.error("Stored entries are not a list. Treating the log as empty.")
            return []

        entries = []
        for item in raw:
            if not isinstance(item, dict):
                logger.warning(f"Skipping malformed entry: {item!r}")
                continue
            entries.append(WorkoutRecord.from_dict(item))
        logger.debug(f"Loaded {len(entries)} entries")
        return entries

    def save_entries(self, entries: List[WorkoutRecord]) -> None:
        """Persist the records as given."""
        self.store.set(self.key, json.dumps([e.to_dict() for e in entries], ensure_ascii=False))

    def add_entry(self, entry: WorkoutRecord) -> List[WorkoutRecord]:
        """
        Append a record and keep the log sorted.

        Args:
            entry: The new record

        Returns:
            The full log after insertion, most recent first
        """
        entries = self.load_entries()
        entries.append(entry)
        entries = sort_entries(entries)
        self.save_entries(entries)
        logger.debug(f"Added entry: {entry.exercise} on {entry.date} {entry.start}")
        return entries

    def clear(self) -> None:
        """Remove every record."""
        self.store.clear(self.key)
        logger.info("Cleared all entries")
