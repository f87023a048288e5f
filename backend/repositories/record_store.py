"""
File-based implementation of StoreProtocol.
Keeps one collection of records as a JSON array in a single file.
"""

import json
import logging
import threading
from pathlib import Path

from .base import StoreParseError

logger = logging.getLogger(__name__)


class RecordStore:
    """JSON-array persistence for a flat collection of records."""

    def __init__(self, data_dir: Path, filename: str):
        self.data_dir = Path(data_dir)
        self.filename = filename
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self.data_dir / self.filename

    def load(self) -> list[dict]:
        """Read the collection. Missing or unreadable file -> empty list."""
        path = self.path
        try:
            with open(path, "rb") as f:
                raw = f.read()
        except FileNotFoundError:
            logger.debug("No data file at %s, starting empty", path)
            return []
        except OSError as e:
            logger.warning("Cannot read %s (%s), starting empty", path, e)
            return []

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise StoreParseError(path, f"not valid UTF-8 at byte {e.start}") from e
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise StoreParseError(path, f"malformed JSON at line {e.lineno} column {e.colno}") from e
        if not isinstance(data, list):
            raise StoreParseError(path, f"expected a JSON array, got {type(data).__name__}")
        return data

    def save(self, collection: list[dict]) -> None:
        """Replace the file with the full collection. OSError propagates."""
        records = list(collection)
        with self._lock:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            path = self.path
            tmp = path.with_suffix(path.suffix + ".tmp")
            try:
                with open(tmp, "w", encoding="utf-8") as f:
                    json.dump(records, f, ensure_ascii=False, indent=2)
                tmp.replace(path)
            except BaseException:
                tmp.unlink(missing_ok=True)
                raise
        logger.debug("Saved %d records to %s", len(records), path)
