"""
Store Package - The notes store owning the in-memory list
"""

from .notes_store import NotesStore

__all__ = ['NotesStore']
