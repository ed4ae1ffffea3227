"""
Note repositories for Checknote
Storage port for the notes list plus the JSON key-value file backend
"""

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..models.note import Note, NoteStorageError, decode_notes, encode_notes
from ..utils.logger import log_warning


DEFAULT_SLOT = "notes"


class NoteRepository(ABC):
    """Storage port used by the notes store.

    load() returns None when nothing has been persisted yet. Both methods
    raise NoteError subclasses on failure and leave error reporting to
    the caller.
    """

    @abstractmethod
    def load(self) -> Optional[List[Note]]:
        """Read the persisted notes list"""

    @abstractmethod
    def save(self, notes: Iterable[Note]) -> None:
        """Overwrite the persisted notes list"""


class KeyValueStore:
    """A JSON file holding named string slots.

    Every set() rewrites the file through a temporary sibling and
    os.replace(), so a reader sees either the old or the new file.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    @property
    def corrupt_path(self) -> Path:
        return self.path.with_name(self.path.name + ".corrupt")

    def _read_all(self, strict: bool = True) -> Dict[str, str]:
        """Parse the whole file.

        With strict=False an unparsable file is moved aside to
        corrupt_path and reads as empty, so writers can start over.
        """
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise NoteStorageError(f"Cannot read {self.path}: {e}") from e
        except ValueError as e:
            problem = f"Storage file {self.path} is corrupt: {e}"
        else:
            if isinstance(data, dict):
                return data
            problem = f"Storage file {self.path} must hold a JSON object"

        if strict:
            raise NoteStorageError(problem)
        self._set_aside(problem)
        return {}

    def _set_aside(self, problem: str) -> None:
        try:
            os.replace(self.path, self.corrupt_path)
            log_warning(f"{problem}; moved to {self.corrupt_path}")
        except OSError as e:
            log_warning(f"{problem}; overwriting it ({e})")

    def get(self, key: str) -> Optional[str]:
        """Value stored under `key`, or None if the slot is empty"""
        value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            raise NoteStorageError(f"Slot '{key}' does not hold a string")
        return value

    def set(self, key: str, value: str) -> None:
        """Store `value` under `key`, keeping every other readable slot"""
        data = self._read_all(strict=False)
        data[key] = value
        self._write_all(data)

    def delete(self, key: str) -> None:
        data = self._read_all(strict=False)
        if key in data:
            del data[key]
            self._write_all(data)

    def _write_all(self, data: Dict[str, str]) -> None:
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp",
                dir=str(self.path.parent)
            )
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            raise NoteStorageError(f"Cannot write {self.path}: {e}") from e
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)


class JsonNoteRepository(NoteRepository):
    """Keeps the notes list as one JSON-encoded blob in a key-value slot"""

    def __init__(self, store: KeyValueStore, slot: str = DEFAULT_SLOT):
        self.store = store
        self.slot = slot

    @classmethod
    def from_path(cls, path: Path, slot: str = DEFAULT_SLOT) -> 'JsonNoteRepository':
        return cls(KeyValueStore(path), slot)

    def load(self) -> Optional[List[Note]]:
        blob = self.store.get(self.slot)
        if blob is None:
            return None
        return decode_notes(blob)

    def save(self, notes: Iterable[Note]) -> None:
        self.store.set(self.slot, encode_notes(notes))


class InMemoryNoteRepository(NoteRepository):
    """Holds the encoded blob in memory; nothing touches the disk"""

    def __init__(self, blob: Optional[str] = None):
        self.blob = blob
        self.save_count = 0

    def load(self) -> Optional[List[Note]]:
        if self.blob is None:
            return None
        return decode_notes(self.blob)

    def save(self, notes: Iterable[Note]) -> None:
        self.blob = encode_notes(notes)
        self.save_count += 1
