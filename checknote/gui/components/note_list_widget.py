"""
Note List Widget Component - Displays list of notes with custom items
"""

from typing import List, Optional
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QListWidget, QListWidgetItem,
    QLabel, QHBoxLayout, QAbstractItemView
)
from PySide6.QtCore import Signal, Qt, QSize, QEvent
from PySide6.QtGui import QFont, QKeyEvent

from ...utils.colors import NoteColors
from ...models.note import Note


CHECK_MARK = "✔"


class NoteListItem(QWidget):
    """Custom widget for displaying a note in the list."""

    def __init__(self, note: Note):
        """Initialize the note list item.

        Args:
            note: The Note object to display
        """
        super().__init__()
        self.note = note
        self._setup_ui()

    def _setup_ui(self):
        """Setup the item UI."""
        row = QHBoxLayout(self)
        row.setContentsMargins(12, 8, 12, 8)

        text_column = QVBoxLayout()
        text_column.setSpacing(2)

        # Title
        self.title_label = QLabel(self.note.title)
        title_font = QFont()
        title_font.setBold(True)
        title_font.setPointSize(13)
        title_font.setStrikeOut(self.note.is_completed)
        self.title_label.setFont(title_font)
        title_color = (NoteColors.SECONDARY_TEXT if self.note.is_completed
                       else NoteColors.PRIMARY_TEXT)
        self.title_label.setStyleSheet(f"color: {title_color};")
        text_column.addWidget(self.title_label)

        # One-line preview
        self.preview_label = QLabel(self._get_preview_text())
        self.preview_label.setWordWrap(False)
        self.preview_label.setStyleSheet(
            f"color: {NoteColors.SECONDARY_TEXT}; font-size: 12px;"
        )
        text_column.addWidget(self.preview_label)

        row.addLayout(text_column)
        row.addStretch()

        self.check_label = QLabel(CHECK_MARK)
        self.check_label.setStyleSheet(
            f"color: {NoteColors.COMPLETE_GREEN}; font-size: 18px;"
        )
        self.check_label.setVisible(self.note.is_completed)
        row.addWidget(self.check_label)

    def _get_preview_text(self) -> str:
        """First line of the note content."""
        if not self.note.content:
            return ""
        return self.note.content.splitlines()[0]


class NoteListWidget(QWidget):
    """Widget for displaying the notes list.

    Rows follow list order. Activating a row (double-click or Enter) emits
    note_selected with the note id. The Delete key emits delete_requested
    with the selected rows.
    """

    # Signals
    note_selected = Signal(str)  # note id
    delete_requested = Signal(list)  # row positions

    def __init__(self):
        """Initialize the note list widget."""
        super().__init__()
        self._notes: List[Note] = []
        self._setup_ui()

    def _setup_ui(self):
        """Setup the widget UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.list_widget = QListWidget()
        self.list_widget.setSelectionMode(
            QAbstractItemView.SelectionMode.ExtendedSelection
        )
        self.list_widget.setStyleSheet(NoteColors.get_stylesheet("list"))
        self.list_widget.installEventFilter(self)

        self.empty_text = QLabel("No notes yet")
        self.empty_text.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_text.setStyleSheet(
            f"color: {NoteColors.SECONDARY_TEXT}; font-size: 16px;"
        )

        layout.addWidget(self.list_widget)
        layout.addWidget(self.empty_text)
        self.empty_text.hide()

        self.list_widget.itemActivated.connect(self._on_item_activated)

    def load_notes(self, notes: List[Note]):
        """Render the given notes in order.

        Args:
            notes: List of Note objects to display
        """
        self.list_widget.clear()
        self._notes = list(notes)

        self.list_widget.setVisible(bool(self._notes))
        self.empty_text.setVisible(not self._notes)

        for note in self._notes:
            item_widget = NoteListItem(note)
            list_item = QListWidgetItem(self.list_widget)
            list_item.setSizeHint(QSize(0, 60))
            list_item.setData(Qt.ItemDataRole.UserRole, note.id)
            self.list_widget.addItem(list_item)
            self.list_widget.setItemWidget(list_item, item_widget)

    def item_widget(self, row: int) -> Optional[NoteListItem]:
        item = self.list_widget.item(row)
        if item is None:
            return None
        return self.list_widget.itemWidget(item)

    def selected_rows(self) -> List[int]:
        """Rows of the selected items, ascending."""
        return sorted(
            self.list_widget.row(item)
            for item in self.list_widget.selectedItems()
        )

    def get_note_count(self) -> int:
        return len(self._notes)

    def request_delete_selected(self):
        rows = self.selected_rows()
        if rows:
            self.delete_requested.emit(rows)

    def _on_item_activated(self, item: QListWidgetItem):
        """Handle row activation."""
        note_id = item.data(Qt.ItemDataRole.UserRole)
        if note_id:
            self.note_selected.emit(note_id)

    def eventFilter(self, watched, event):
        if (watched is self.list_widget and isinstance(event, QKeyEvent)
                and event.type() == QEvent.Type.KeyPress
                and event.key() in (Qt.Key.Key_Delete, Qt.Key.Key_Backspace)):
            self.request_delete_selected()
            return True
        return super().eventFilter(watched, event)
