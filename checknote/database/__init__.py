"""
Database Package - Persistence for the notes list
Contains the repository port and its key-value file implementation
"""

from .note_repository import (
    NoteRepository, KeyValueStore, JsonNoteRepository, InMemoryNoteRepository
)

__all__ = [
    'NoteRepository', 'KeyValueStore', 'JsonNoteRepository',
    'InMemoryNoteRepository'
]
