"""
GUI Components Package - lightweight initializer

Import specific components directly from their modules, e.g.:
    from checknote.gui.components.note_editor import NoteEditorDialog
"""

__all__ = []
