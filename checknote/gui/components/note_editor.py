"""
Note Editor Component - Dialog for creating and editing a note
"""

from typing import Optional, Tuple
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLineEdit, QTextEdit,
    QPushButton, QWidget
)
from PySide6.QtCore import Signal

from ...utils.colors import NoteColors
from ...models.note import Note


class NoteEditorDialog(QDialog):
    """Editor dialog used for both "New Note" and "Edit Note".

    Save is refused while the title is blank; the dialog then stays open.
    After acceptance the entered values are available from get_values().
    """

    # Signals
    note_submitted = Signal(str, str)  # title, content

    def __init__(self, note: Optional[Note] = None,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.note = note
        self.setWindowTitle("New Note" if note is None else "Edit Note")
        self.setModal(True)
        self._setup_ui()

        if note is not None:
            self.title_input.setText(note.title)
            self.content_input.setPlainText(note.content)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        self.setStyleSheet(NoteColors.get_stylesheet("input_field"))

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("Title")
        layout.addWidget(self.title_input)

        self.content_input = QTextEdit()
        self.content_input.setAcceptRichText(False)
        self.content_input.setMinimumHeight(200)
        layout.addWidget(self.content_input)

        buttons = QHBoxLayout()
        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)
        buttons.addWidget(self.cancel_button)
        buttons.addStretch()

        self.save_button = QPushButton("Save")
        self.save_button.setDefault(True)
        self.save_button.clicked.connect(self._on_save_clicked)
        buttons.addWidget(self.save_button)
        layout.addLayout(buttons)

    @property
    def is_editing(self) -> bool:
        return self.note is not None

    def get_values(self) -> Tuple[str, str]:
        return self.title_input.text(), self.content_input.toPlainText()

    def _on_save_clicked(self):
        title, content = self.get_values()
        if not title.strip():
            self.title_input.setFocus()
            return
        self.note_submitted.emit(title, content)
        self.accept()
