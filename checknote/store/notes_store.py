"""
Notes Store
Sole owner of the notes list. Every mutation rewrites the whole list
through the injected repository.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from checknote.database.note_repository import NoteRepository
from checknote.models.note import Note, NoteList, generate_note_id
from checknote.utils.logger import Logger


class NotesStore:
    """In-memory notes list with write-through persistence.

    Storage failures are logged and swallowed; the in-memory list stays
    authoritative for the rest of the process. Operations that name an
    unknown note id do nothing.
    """

    def __init__(self, repository: NoteRepository, logger=None):
        self.logger = logger or Logger()
        self._repository = repository
        self._notes = NoteList()
        self._ready = False
        self.load()

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def notes(self) -> List[Note]:
        """Snapshot of the list for rendering"""
        return self._notes.snapshot()

    def get_note(self, note_id: str) -> Optional[Note]:
        note = self._notes.get_note(note_id)
        return note.copy() if note else None

    def index_of(self, note_id: str) -> Optional[int]:
        return self._notes.index_of(note_id)

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    def add(self, title: str, content: str) -> Note:
        note_id = generate_note_id()
        while self._notes.contains_id(note_id):
            note_id = generate_note_id()

        note = Note(id=note_id, title=title, content=content)
        self._notes.append(note)
        self.logger.debug(f"Added note {note_id}")
        self._persist()
        return note.copy()

    def update(self, note_id: str, title: str, content: str) -> None:
        note = self._notes.get_note(note_id)
        if note is None:
            self.logger.debug(f"update: no note with id {note_id}")
        else:
            note.update(title, content)
        self._persist()

    def toggle_completion(self, note_id: str) -> None:
        note = self._notes.get_note(note_id)
        if note is None:
            self.logger.debug(f"toggle_completion: no note with id {note_id}")
        else:
            note.toggle()
        self._persist()

    def delete(self, positions: Iterable[int]) -> None:
        """Remove notes by position, all positions taken from the list as it
        is before the call."""
        removed = self._notes.remove_positions(positions)
        self.logger.debug(f"Deleted {len(removed)} note(s) by position")
        self._persist()

    def delete_note(self, note_id: str) -> None:
        if not self._notes.remove_note(note_id):
            self.logger.debug(f"delete_note: no note with id {note_id}")
        self._persist()

    def load(self) -> None:
        """Replace the list with the persisted one, if any.

        A missing blob leaves the list empty; a failed read or decode leaves
        it as it was.
        """
        try:
            loaded = self._repository.load()
            if loaded is not None:
                self._notes.replace_all(loaded)
            self.logger.info(f"Loaded {len(self._notes)} note(s)")
        except Exception as e:
            self.logger.error(f"Error. Could not load notes: {e}")
        self._ready = True

    def _persist(self) -> None:
        try:
            self._repository.save(self._notes)
        except Exception as e:
            self.logger.error(f"Error. Could not save notes: {e}")
