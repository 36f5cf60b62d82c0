"""
JSON-file persistence adapter.

The whole database is one JSON document. Every query reads the file in full and
every mutation rewrites it in full, so a single reader/writer lock guarding the
document is all the concurrency control needed. Mutations go through
``JsonStore.update`` which holds the write lock across the read-modify-write.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, TypeVar

from filelock import FileLock

from chirpy.domain.models import Document

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Process umask, read once; new database files get the usual 0666 & ~umask mode.
_UMASK = os.umask(0)
os.umask(_UMASK)


class StoreError(Exception):
    """Base class for persistence failures."""


class StoreNotFoundError(StoreError):
    """Raised when opening a store whose backing file does not exist."""


class StoreIOError(StoreError):
    """Raised when the backing file cannot be read or written."""


class StoreDecodeError(StoreError):
    """Raised when the backing file is not a valid document."""


class StoreEncodeError(StoreError):
    """Raised when the document cannot be serialized."""


class _ReadWriteLock:
    """Many readers or one writer. Waiting writers block new readers."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class JsonStore:
    """Serialized access to a single JSON document on disk."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._lock = _ReadWriteLock()
        # Cross-process guard for writers (e.g. several uvicorn workers).
        self._file_lock = FileLock(str(self.path) + ".lock")

    @classmethod
    def open(cls, path: Path | str) -> "JsonStore":
        """Open an existing store. The backing file must already exist."""
        location = Path(path)
        if not location.is_file():
            raise StoreNotFoundError(f"No database file at {location}")
        return cls(location)

    @classmethod
    def create(cls, path: Path | str, *, overwrite: bool = False) -> "JsonStore":
        """Write an empty document at ``path`` (unless one exists) and open it."""
        location = Path(path)
        store = cls(location)
        if overwrite or not location.exists():
            try:
                location.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise StoreIOError(f"Cannot create {location.parent}: {exc}") from exc
            store.save(Document())
            logger.info("Initialized empty database at %s", location)
        return store

    # ------------------------------------------------------------------ read
    def load(self) -> Document:
        with self._lock.read_locked():
            return self._read()

    # ----------------------------------------------------------------- write
    def save(self, document: Document) -> None:
        with self._lock.write_locked(), self._file_lock:
            self._write(document)

    def update(self, fn: Callable[[Document], T]) -> T:
        """
        Run ``fn`` against the current document under the write lock and persist it.

        ``fn`` mutates the document in place and returns whatever the caller needs
        back. If it raises, nothing is written.
        """
        with self._lock.write_locked(), self._file_lock:
            document = self._read()
            result = fn(document)
            self._write(document)
            return result

    # --------------------------------------------------------------- helpers
    def _read(self) -> Document:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise StoreDecodeError(f"Malformed JSON in {self.path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise StoreDecodeError(f"Invalid encoding in {self.path}: {exc}") from exc
        except OSError as exc:
            raise StoreIOError(f"Cannot read {self.path}: {exc}") from exc
        try:
            return Document.from_dict(raw)
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise StoreDecodeError(f"Unexpected document shape in {self.path}: {exc}") from exc

    def _file_mode(self) -> int:
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            return 0o666 & ~_UMASK

    def _write(self, document: Document) -> None:
        try:
            payload = json.dumps(document.to_dict(), ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as exc:
            raise StoreEncodeError(f"Cannot serialize document: {exc}") from exc

        directory = self.path.parent
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StoreIOError(f"Cannot write {self.path}: {exc}") from exc
        logger.debug("Saved %d posts and %d users to %s", len(document.posts), len(document.users), self.path)
