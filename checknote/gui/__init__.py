"""
GUI Package - lightweight initializer

Purpose:
- Export `MainWindow` without importing every component at import time.

Consumers should import specific components directly, e.g.:
    from checknote.gui.components.note_list_widget import NoteListWidget
    from checknote.gui.pages.notes_page import NotesPage
"""

from .main_window import MainWindow

__all__ = [
    'MainWindow',
]
