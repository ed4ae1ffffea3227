### Note Class
import json
import uuid
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union


class NoteError(Exception):
    """Base class for note model and storage errors"""


class NoteDecodeError(NoteError):
    """Raised when a persisted notes payload cannot be decoded"""


class NoteStorageError(NoteError):
    """Raised when the notes storage cannot be read or written"""


def generate_note_id() -> str:
    return str(uuid.uuid4())


class Note:
    def __init__(self, id=None, title="", content="", is_completed=False):
        # Generate ID if not provided
        self.id = id if id else generate_note_id()
        self.title = title
        self.content = content
        self.is_completed = is_completed

    def update(self, title: str, content: str) -> None:
        self.title = title
        self.content = content

    def toggle(self) -> None:
        self.is_completed = not self.is_completed

    def copy(self) -> 'Note':
        return Note(
            id=self.id,
            title=self.title,
            content=self.content,
            is_completed=self.is_completed
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted record layout."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "isCompleted": self.is_completed,
        }

    @classmethod
    def from_dict(cls, data: Any) -> 'Note':
        """Build a Note from a persisted record.

        Every field is required and type-checked; a record that does not
        match the layout raises NoteDecodeError.
        """
        if not isinstance(data, dict):
            raise NoteDecodeError(
                f"Expected a note object, got {type(data).__name__}"
            )

        for key in ("id", "title", "content"):
            if key not in data:
                raise NoteDecodeError(f"Note record is missing '{key}'")
            if not isinstance(data[key], str):
                raise NoteDecodeError(f"Note field '{key}' must be a string")

        if "isCompleted" not in data:
            raise NoteDecodeError("Note record is missing 'isCompleted'")
        if not isinstance(data["isCompleted"], bool):
            raise NoteDecodeError("Note field 'isCompleted' must be a boolean")

        if not data["id"]:
            raise NoteDecodeError("Note field 'id' must not be empty")

        return cls(
            id=data["id"],
            title=data["title"],
            content=data["content"],
            is_completed=data["isCompleted"]
        )

    def __eq__(self, other):
        if not isinstance(other, Note):
            return NotImplemented
        return (
            self.id == other.id
            and self.title == other.title
            and self.content == other.content
            and self.is_completed == other.is_completed
        )

    def __repr__(self):
        return (
            f"Note(id={self.id!r}, title={self.title!r}, "
            f"is_completed={self.is_completed})"
        )

    def __str__(self):
        status = ", completed" if self.is_completed else ""
        return f"Note(id={self.id}, title='{self.title}'{status})"


class NoteList:
    """An ordered collection of notes; insertion order is display order"""

    def __init__(self, notes: Optional[Iterable[Note]] = None):
        self.notes: List[Note] = []
        for note in notes or []:
            self.append(note)

    def append(self, note: Note) -> None:
        """Add a note to the end of the collection"""
        if self.contains_id(note.id):
            raise ValueError(f"Duplicate note id: {note.id}")
        self.notes.append(note)

    def contains_id(self, note_id: str) -> bool:
        return self.index_of(note_id) is not None

    def index_of(self, note_id: str) -> Optional[int]:
        """Position of the first note with this id, or None"""
        for index, note in enumerate(self.notes):
            if note.id == note_id:
                return index
        return None

    def get_note(self, note_id: str) -> Optional[Note]:
        """Get a note by ID"""
        index = self.index_of(note_id)
        return self.notes[index] if index is not None else None

    def remove_note(self, note_id: str) -> bool:
        """Remove a note by ID"""
        index = self.index_of(note_id)
        if index is None:
            return False
        del self.notes[index]
        return True

    def remove_positions(self, positions: Iterable[int]) -> List[Note]:
        """Remove the notes at the given positions in one batch.

        Positions refer to the list as it is before the call. Indices out
        of range are ignored. Returns the removed notes in list order.
        """
        size = len(self.notes)
        valid = sorted({p for p in positions if 0 <= p < size}, reverse=True)
        removed = []
        for position in valid:
            removed.append(self.notes.pop(position))
        removed.reverse()
        return removed

    def snapshot(self) -> List[Note]:
        """Copies of all notes, safe to hand to readers"""
        return [note.copy() for note in self.notes]

    def replace_all(self, notes: Iterable[Note]) -> None:
        self.notes = NoteList(notes).notes

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    def __getitem__(self, index: int) -> Note:
        return self.notes[index]

    def __len__(self):
        return len(self.notes)

    def __str__(self):
        return f"NoteList({len(self.notes)} notes)"


def encode_notes(notes: Iterable[Note]) -> str:
    """Encode notes as the JSON array stored in the notes slot"""
    return json.dumps([note.to_dict() for note in notes], ensure_ascii=False)


def decode_notes(blob: Union[str, bytes]) -> List[Note]:
    """Decode a JSON array of note records.

    Raises NoteDecodeError for malformed JSON, a non-array payload, an
    invalid record, or duplicate ids.
    """
    if isinstance(blob, bytes):
        try:
            blob = blob.decode('utf-8')
        except UnicodeDecodeError as e:
            raise NoteDecodeError(f"Notes payload is not UTF-8: {e}") from e

    try:
        data = json.loads(blob)
    except json.JSONDecodeError as e:
        raise NoteDecodeError(f"Notes payload is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise NoteDecodeError(
            f"Notes payload must be a JSON array, got {type(data).__name__}"
        )

    notes = [Note.from_dict(item) for item in data]

    seen = set()
    for note in notes:
        if note.id in seen:
            raise NoteDecodeError(f"Duplicate note id in payload: {note.id}")
        seen.add(note.id)

    return notes
