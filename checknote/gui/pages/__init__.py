"""
GUI Pages Package - lightweight initializer

Import pages explicitly where needed, e.g.:
    from checknote.gui.pages.notes_page import NotesPage
"""

__all__ = []
