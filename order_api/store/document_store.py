"""
JSON document store for the order collection

The whole collection lives in one file shaped ``{"orders": [...]}``. Writes go
to a temp file in the same directory and are committed with ``os.replace``,
so readers only ever see a complete document. Read-modify-write cycles are
serialized through ``transaction()``.
"""
import json
import os
import tempfile
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import structlog

from order_api.core.exceptions import StorageError

logger = structlog.get_logger()


class MalformedDocument(ValueError):
    """The stored file is not a valid orders document."""


@dataclass
class DocumentInfo:
    path: str
    size_bytes: int
    orders_count: int


class DocumentStore:
    """Durable storage for the order collection."""

    def __init__(self, path, backup_corrupt: bool = True, fsync: bool = True):
        self.path = Path(path)
        self.backup_corrupt = backup_corrupt
        self.fsync = fsync
        # Reentrant so corruption recovery can run inside a transaction
        self._lock = threading.RLock()

    def load(self) -> List[Dict[str, Any]]:
        """Return the stored orders, newest first.

        A missing file is created empty. An unreadable one is treated as an
        empty collection.
        """
        try:
            return self._read()
        except FileNotFoundError:
            with self._lock:
                if not self.path.exists():
                    logger.info("Initializing orders file", path=str(self.path))
                    self.save([])
                    return []
                return self._read_or_recover()
        except MalformedDocument as e:
            logger.warning("Orders file is malformed", path=str(self.path), error=str(e))
            with self._lock:
                return self._read_or_recover()

    def save(self, orders: List[Dict[str, Any]]) -> None:
        """Atomically replace the stored document with ``orders``."""
        try:
            # NaN/Infinity are not JSON; writing them would corrupt the document
            content = json.dumps({"orders": orders}, indent=2, ensure_ascii=False, allow_nan=False)
        except ValueError as e:
            raise StorageError(f"Refusing to write {self.path}: {e}") from e
        with self._lock:
            self._atomic_write(content)

    @contextmanager
    def transaction(self) -> Iterator[List[Dict[str, Any]]]:
        """Hold the store lock across load, in-place mutation and save.

        Nothing is written if the block raises.
        """
        with self._lock:
            orders = self.load()
            yield orders
            self.save(orders)

    def stat(self) -> DocumentInfo:
        """Size and order count of the stored file, for diagnostics."""
        try:
            if not self.path.exists():
                self.load()
            size = self.path.stat().st_size
            try:
                count = len(self._read())
            except (MalformedDocument, FileNotFoundError):
                count = 0
        except OSError as e:
            raise StorageError(f"Failed to stat {self.path}: {e}") from e
        return DocumentInfo(path=str(self.path.resolve()), size_bytes=size, orders_count=count)

    def _read(self) -> List[Dict[str, Any]]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise
        except OSError as e:
            raise StorageError(f"Failed to read {self.path}: {e}") from e
        return parse_document(raw)

    def _read_or_recover(self) -> List[Dict[str, Any]]:
        # Caller holds the lock; re-read in case a writer fixed the file meanwhile
        try:
            return self._read()
        except MalformedDocument:
            pass
        except FileNotFoundError:
            self.save([])
            return []

        if self.backup_corrupt:
            backup = self._backup_path()
            try:
                os.replace(self.path, backup)
            except OSError as e:
                raise StorageError(f"Failed to move corrupt file aside: {e}") from e
            logger.warning("Moved corrupt orders file aside", path=str(self.path), backup=str(backup))
            self.save([])
        else:
            logger.warning("Ignoring corrupt orders file", path=str(self.path))
        return []

    def _backup_path(self) -> Path:
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        return self.path.with_name(f"{self.path.name}.corrupt-{stamp}")

    def _atomic_write(self, content: str) -> None:
        temp_path: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                if self.fsync:
                    f.flush()
                    os.fsync(f.fileno())
            os.replace(temp_path, self.path)
        except OSError as e:
            if temp_path is not None:
                try:
                    os.unlink(temp_path)
                except OSError as cleanup_error:
                    logger.debug("Failed to remove temp file", path=temp_path, error=str(cleanup_error))
            raise StorageError(f"Failed to write {self.path}: {e}") from e


def parse_document(raw: str) -> List[Dict[str, Any]]:
    """Parse the stored JSON text into the order list."""
    try:
        parsed = json.loads(raw)
    except ValueError as e:
        raise MalformedDocument(f"invalid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise MalformedDocument("top level is not an object")
    orders = parsed.get("orders", [])
    if not isinstance(orders, list):
        raise MalformedDocument("'orders' is not a list")
    if not all(isinstance(order, dict) for order in orders):
        raise MalformedDocument("'orders' contains a non-object entry")
    return orders
