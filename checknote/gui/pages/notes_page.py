"""
Notes Page - List/detail navigation over the notes store.
Provides the toolbar actions and wires NoteListWidget, NoteDetailView and
NoteEditorDialog to NotesStore.
"""

from typing import Optional, Tuple
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QToolBar, QLabel, QStackedWidget
)
from PySide6.QtGui import QAction, QKeySequence

from checknote.models.note import Note
from checknote.store.notes_store import NotesStore
from checknote.gui.components.note_editor import NoteEditorDialog
from checknote.gui.components.note_list_widget import NoteListWidget
from checknote.gui.components.note_detail_view import NoteDetailView


class NotesPage(QWidget):
    """Notes page: a list screen and a detail screen in a stack."""

    LIST_SCREEN = 0
    DETAIL_SCREEN = 1

    def __init__(self, store: NotesStore, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.store = store
        self._build_ui()
        self.refresh()
        self.show_list()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)

        toolbar = QToolBar()
        self.new_action = QAction("New", self)
        self.new_action.setShortcut(QKeySequence.StandardKey.New)
        self.new_action.triggered.connect(self._create_new_note)
        toolbar.addAction(self.new_action)

        self.delete_action = QAction("Delete", self)
        self.delete_action.triggered.connect(self._delete_selected)
        toolbar.addAction(self.delete_action)
        layout.addWidget(toolbar)
        self.toolbar = toolbar

        self.stack = QStackedWidget()

        self.note_list = NoteListWidget()
        self.note_list.note_selected.connect(self._open_detail)
        self.note_list.delete_requested.connect(self._delete_rows)
        self.stack.addWidget(self.note_list)

        self.detail_view = NoteDetailView()
        self.detail_view.toggle_requested.connect(self._toggle_note)
        self.detail_view.edit_requested.connect(self._edit_note)
        self.detail_view.back_requested.connect(self.show_list)
        self.stack.addWidget(self.detail_view)

        layout.addWidget(self.stack)

        self.count_label = QLabel("0 notes")
        layout.addWidget(self.count_label)

    def refresh(self) -> None:
        """Re-render both screens from the store."""
        self.note_list.load_notes(self.store.notes)
        self._update_note_count()

        note_id = self.detail_view.current_note_id
        if note_id is not None:
            note = self.store.get_note(note_id)
            if note is None:
                self.show_list()
            else:
                self.detail_view.show_note(note)

    def _update_note_count(self) -> None:
        count = len(self.store)
        self.count_label.setText(f"{count} note{'s' if count != 1 else ''}")

    def show_list(self) -> None:
        self.stack.setCurrentIndex(self.LIST_SCREEN)
        self.toolbar.setVisible(True)

    def current_screen(self) -> int:
        return self.stack.currentIndex()

    def _open_detail(self, note_id: str) -> None:
        note = self.store.get_note(note_id)
        if note is None:
            return
        self.detail_view.show_note(note)
        self.stack.setCurrentIndex(self.DETAIL_SCREEN)
        self.toolbar.setVisible(False)

    def _run_editor(self, note: Optional[Note] = None) -> Optional[Tuple[str, str]]:
        """Show the editor dialog; returns (title, content) when saved."""
        dialog = NoteEditorDialog(note, self)
        if dialog.exec():
            return dialog.get_values()
        return None

    def _create_new_note(self) -> None:
        values = self._run_editor()
        if values is None:
            return
        title, content = values
        self.store.add(title, content)
        self.refresh()

    def _edit_note(self, note_id: str) -> None:
        note = self.store.get_note(note_id)
        if note is None:
            return
        values = self._run_editor(note)
        if values is None:
            return
        title, content = values
        self.store.update(note_id, title, content)
        self.refresh()

    def _toggle_note(self, note_id: str) -> None:
        self.store.toggle_completion(note_id)
        self.refresh()

    def _delete_rows(self, rows: list) -> None:
        self.store.delete(rows)
        self.refresh()

    def _delete_selected(self) -> None:
        self.note_list.request_delete_selected()
