"""
Note Detail View Component - Read-only view of a note with completion toggle
"""

from typing import Optional
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton
)
from PySide6.QtCore import Signal
from PySide6.QtGui import QFont

from ...utils.colors import NoteColors
from ...models.note import Note


class NoteDetailView(QWidget):
    """Shows one note.

    The view never changes the note itself; it asks the page through
    toggle_requested / edit_requested and is re-shown with fresh data.
    """

    # Signals
    toggle_requested = Signal(str)  # note id
    edit_requested = Signal(str)  # note id
    back_requested = Signal()

    def __init__(self):
        super().__init__()
        self._note: Optional[Note] = None
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        self.back_button = QPushButton("‹ Notes")
        self.back_button.setFlat(True)
        self.back_button.clicked.connect(self.back_requested)
        header.addWidget(self.back_button)
        header.addStretch()

        self.heading_label = QLabel("Note Details")
        header.addWidget(self.heading_label)
        header.addStretch()

        self.edit_button = QPushButton("✎")
        self.edit_button.setFlat(True)
        self.edit_button.setToolTip("Edit note")
        self.edit_button.clicked.connect(self._on_edit_clicked)
        header.addWidget(self.edit_button)
        layout.addLayout(header)

        self.title_label = QLabel()
        self.title_label.setWordWrap(True)
        layout.addWidget(self.title_label)

        self.content_label = QLabel()
        self.content_label.setWordWrap(True)
        layout.addWidget(self.content_label)

        layout.addStretch()

        self.toggle_button = QPushButton()
        self.toggle_button.clicked.connect(self._on_toggle_clicked)
        layout.addWidget(self.toggle_button)

    @property
    def current_note_id(self) -> Optional[str]:
        return self._note.id if self._note else None

    def show_note(self, note: Note):
        """Render the given note."""
        self._note = note

        title_font = QFont()
        title_font.setPointSize(26)
        title_font.setBold(True)
        title_font.setStrikeOut(note.is_completed)
        self.title_label.setFont(title_font)
        self.title_label.setText(note.title)
        self.content_label.setText(note.content)

        self.toggle_button.setText(
            "Mark as Incomplete" if note.is_completed else "Mark as Completed"
        )
        self.toggle_button.setStyleSheet(
            NoteColors.toggle_button_style(note.is_completed)
        )

    def _on_toggle_clicked(self):
        if self._note is not None:
            self.toggle_requested.emit(self._note.id)

    def _on_edit_clicked(self):
        if self._note is not None:
            self.edit_requested.emit(self._note.id)
