#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Checknote GUI - Main Window
Single-screen window hosting the notes page.
"""

from typing import Optional
from PySide6.QtWidgets import QMainWindow
from PySide6.QtGui import QCloseEvent

from .pages.notes_page import NotesPage
from checknote.store.notes_store import NotesStore
from checknote.utils.config_loader import ConfigLoader
from checknote.utils.colors import NoteColors
from checknote.utils.logger import Logger


class MainWindow(QMainWindow):
    """Main window of the notes application."""

    def __init__(self, store: NotesStore,
                 config_loader: Optional[ConfigLoader] = None):
        super().__init__()
        self.logger = Logger()
        self.config_loader = config_loader or ConfigLoader()
        self.store = store

        self.setWindowTitle(self.config_loader.get("app.name", "Notes"))
        self.resize(
            int(self.config_loader.get("ui.window_width", 420)),
            int(self.config_loader.get("ui.window_height", 720))
        )

        self.notes_page = NotesPage(store)
        self.notes_page.setStyleSheet(
            NoteColors.get_stylesheet("main_background")
        )
        self.setCentralWidget(self.notes_page)

        self.statusBar().showMessage(f"{len(store)} notes loaded", 3000)

    def closeEvent(self, event: QCloseEvent):
        # Every mutation is already persisted; nothing to flush here
        self.logger.info("Main window closed")
        event.accept()
