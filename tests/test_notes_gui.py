"""
Unit tests for the notes GUI components.
Tests NoteListWidget, NoteEditorDialog, NoteDetailView and NotesPage
against an in-memory notes store.
"""

import pytest
from unittest.mock import Mock

from checknote.database.note_repository import InMemoryNoteRepository
from checknote.models.note import Note, encode_notes
from checknote.store.notes_store import NotesStore
from checknote.gui.components.note_editor import NoteEditorDialog
from checknote.gui.components.note_list_widget import NoteListWidget
from checknote.gui.components.note_detail_view import NoteDetailView
from checknote.gui.pages.notes_page import NotesPage


class TestNoteListWidget:
    """Test suite for NoteListWidget component."""

    @pytest.fixture
    def note_list(self, app):
        return NoteListWidget()

    def test_initial_state(self, note_list):
        assert note_list.get_note_count() == 0
        assert note_list.list_widget.count() == 0

    def test_load_notes_keeps_order(self, note_list, sample_notes):
        note_list.load_notes(sample_notes)

        assert note_list.list_widget.count() == 3
        titles = [note_list.item_widget(i).title_label.text() for i in range(3)]
        assert titles == ["Milk", "Call", "Read"]

    def test_completed_row_is_struck_through(self, note_list, sample_notes):
        note_list.load_notes(sample_notes)

        done = note_list.item_widget(1)
        open_row = note_list.item_widget(0)
        assert done.title_label.font().strikeOut() is True
        assert done.check_label.isHidden() is False
        assert open_row.title_label.font().strikeOut() is False
        assert open_row.check_label.isHidden() is True

    def test_preview_is_first_line(self, note_list, sample_notes):
        note_list.load_notes(sample_notes)

        assert note_list.item_widget(1).preview_label.text() == "Call the bank"
        assert note_list.item_widget(2).preview_label.text() == ""

    def test_empty_state(self, note_list, sample_notes):
        note_list.load_notes([])
        assert note_list.empty_text.isHidden() is False

        note_list.load_notes(sample_notes)
        assert note_list.empty_text.isHidden() is True

    def test_note_selected_signal(self, note_list, sample_notes):
        signal_spy = Mock()
        note_list.note_selected.connect(signal_spy)
        note_list.load_notes(sample_notes)

        note_list._on_item_activated(note_list.list_widget.item(2))

        signal_spy.assert_called_once_with("c")

    def test_delete_requested_with_selected_rows(self, note_list, sample_notes):
        signal_spy = Mock()
        note_list.delete_requested.connect(signal_spy)
        note_list.load_notes(sample_notes)

        note_list.list_widget.item(2).setSelected(True)
        note_list.list_widget.item(0).setSelected(True)
        note_list.request_delete_selected()

        signal_spy.assert_called_once_with([0, 2])

    def test_delete_without_selection_does_nothing(self, note_list, sample_notes):
        signal_spy = Mock()
        note_list.delete_requested.connect(signal_spy)
        note_list.load_notes(sample_notes)

        note_list.request_delete_selected()

        signal_spy.assert_not_called()


class TestNoteEditorDialog:
    """Test suite for NoteEditorDialog."""

    def test_new_note_dialog(self, app):
        dialog = NoteEditorDialog()

        assert dialog.windowTitle() == "New Note"
        assert dialog.is_editing is False
        assert dialog.get_values() == ("", "")

    def test_edit_dialog_is_prefilled(self, app):
        dialog = NoteEditorDialog(Note(id="1", title="Milk", content="Buy milk"))

        assert dialog.windowTitle() == "Edit Note"
        assert dialog.get_values() == ("Milk", "Buy milk")

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title_is_refused(self, app, title):
        dialog = NoteEditorDialog()
        signal_spy = Mock()
        dialog.note_submitted.connect(signal_spy)

        dialog.title_input.setText(title)
        dialog.content_input.setPlainText("content")
        dialog.save_button.click()

        signal_spy.assert_not_called()
        assert dialog.result() == 0

    def test_save_submits_values(self, app):
        dialog = NoteEditorDialog()
        signal_spy = Mock()
        dialog.note_submitted.connect(signal_spy)

        dialog.title_input.setText("T")
        dialog.content_input.setPlainText("C")
        dialog.save_button.click()

        signal_spy.assert_called_once_with("T", "C")
        assert dialog.result() == 1

    def test_cancel(self, app):
        dialog = NoteEditorDialog()
        signal_spy = Mock()
        dialog.note_submitted.connect(signal_spy)

        dialog.title_input.setText("T")
        dialog.cancel_button.click()

        signal_spy.assert_not_called()
        assert dialog.result() == 0


class TestNoteDetailView:
    """Test suite for NoteDetailView."""

    @pytest.fixture
    def detail(self, app):
        return NoteDetailView()

    def test_open_note(self, detail):
        detail.show_note(Note(id="1", title="Milk", content="Buy milk"))

        assert detail.current_note_id == "1"
        assert detail.title_label.text() == "Milk"
        assert detail.content_label.text() == "Buy milk"
        assert detail.toggle_button.text() == "Mark as Completed"
        assert detail.title_label.font().strikeOut() is False

    def test_completed_note(self, detail):
        detail.show_note(Note(id="1", title="Milk", is_completed=True))

        assert detail.toggle_button.text() == "Mark as Incomplete"
        assert detail.title_label.font().strikeOut() is True

    def test_buttons_emit_note_id(self, detail):
        toggle_spy, edit_spy, back_spy = Mock(), Mock(), Mock()
        detail.toggle_requested.connect(toggle_spy)
        detail.edit_requested.connect(edit_spy)
        detail.back_requested.connect(back_spy)
        detail.show_note(Note(id="1", title="Milk"))

        detail.toggle_button.click()
        detail.edit_button.click()
        detail.back_button.click()

        toggle_spy.assert_called_once_with("1")
        edit_spy.assert_called_once_with("1")
        back_spy.assert_called_once()

    def test_buttons_without_note(self, detail):
        toggle_spy = Mock()
        detail.toggle_requested.connect(toggle_spy)

        detail.toggle_button.click()

        toggle_spy.assert_not_called()


class TestNotesPage:
    """Test suite for NotesPage wired to a real store."""

    @pytest.fixture
    def repository(self, sample_notes):
        return InMemoryNoteRepository(encode_notes(sample_notes))

    @pytest.fixture
    def store(self, repository):
        return NotesStore(repository, logger=Mock())

    @pytest.fixture
    def notes_page(self, app, store):
        return NotesPage(store)

    def test_initial_state(self, notes_page):
        assert notes_page.current_screen() == NotesPage.LIST_SCREEN
        assert notes_page.note_list.get_note_count() == 3
        assert notes_page.count_label.text() == "3 notes"

    def test_create_new_note(self, notes_page, store, repository):
        notes_page._run_editor = Mock(return_value=("Eggs", "A dozen"))

        notes_page.new_action.trigger()

        assert [n.title for n in store.notes][-1] == "Eggs"
        assert notes_page.note_list.get_note_count() == 4
        assert notes_page.count_label.text() == "4 notes"
        assert repository.load()[-1].title == "Eggs"

    def test_cancelled_new_note(self, notes_page, store, repository):
        notes_page._run_editor = Mock(return_value=None)

        notes_page.new_action.trigger()

        assert len(store) == 3
        assert repository.save_count == 0

    def test_open_detail_and_back(self, notes_page):
        notes_page.note_list.note_selected.emit("b")

        assert notes_page.current_screen() == NotesPage.DETAIL_SCREEN
        assert notes_page.detail_view.title_label.text() == "Call"

        notes_page.detail_view.back_button.click()
        assert notes_page.current_screen() == NotesPage.LIST_SCREEN

    def test_toggle_from_detail(self, notes_page, store):
        notes_page.note_list.note_selected.emit("a")

        notes_page.detail_view.toggle_button.click()

        assert store.get_note("a").is_completed is True
        assert notes_page.detail_view.toggle_button.text() == "Mark as Incomplete"
        assert notes_page.note_list.item_widget(0).title_label.font().strikeOut()

    def test_edit_from_detail(self, notes_page, store):
        notes_page._run_editor = Mock(return_value=("Oat milk", "Two cartons"))
        notes_page.note_list.note_selected.emit("a")

        notes_page.detail_view.edit_button.click()

        edited_note = notes_page._run_editor.call_args[0][0]
        assert edited_note.id == "a"
        assert store.get_note("a") == Note(id="a", title="Oat milk",
                                           content="Two cartons")
        assert notes_page.detail_view.title_label.text() == "Oat milk"

    def test_delete_rows(self, notes_page, store):
        notes_page.note_list.delete_requested.emit([0, 2])

        assert [n.id for n in store.notes] == ["b"]
        assert notes_page.count_label.text() == "1 note"

    def test_delete_action_uses_selection(self, notes_page, store):
        notes_page.note_list.list_widget.item(1).setSelected(True)

        notes_page.delete_action.trigger()

        assert [n.id for n in store.notes] == ["a", "c"]
