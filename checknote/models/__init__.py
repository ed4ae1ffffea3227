"""
Models Package - Data models and the notes JSON codec
Contains Note, NoteList, and the note error types
"""

from .note import (
    Note, NoteList, NoteError, NoteDecodeError, NoteStorageError,
    encode_notes, decode_notes
)

__all__ = [
    'Note', 'NoteList', 'NoteError', 'NoteDecodeError', 'NoteStorageError',
    'encode_notes', 'decode_notes'
]
