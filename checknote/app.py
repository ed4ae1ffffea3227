"""
Checknote - Application bootstrap
Wires configuration, logging, storage and the main window together
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from checknote import __version__
from checknote.database.note_repository import JsonNoteRepository
from checknote.store.notes_store import NotesStore
from checknote.utils.config_loader import ConfigLoader
from checknote.utils.logger import Logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="checknote",
        description="Single-screen note-taking application"
    )
    parser.add_argument(
        "--data-dir", type=Path, default=None,
        help="directory holding app_config.json and storage.json"
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="log at DEBUG level"
    )
    parser.add_argument(
        "--version", action="version", version=f"checknote {__version__}"
    )
    return parser.parse_args(argv)


def build_store(config: ConfigLoader, logger: Optional[Logger] = None) -> NotesStore:
    """Create the notes store backed by the configured storage file."""
    repository = JsonNoteRepository.from_path(
        config.storage_path,
        slot=config.get("storage.slot", "notes")
    )
    return NotesStore(repository, logger=logger)


class ChecknoteApp:
    """Main application class"""

    def __init__(self, data_dir: Optional[Path] = None, debug: bool = False):
        self.app = None
        self.main_window = None
        self.store = None

        config_path = data_dir / "app_config.json" if data_dir else None
        self.config = ConfigLoader(config_path)
        if data_dir:
            self.config.set("storage.data_dir", str(data_dir), save=False)

        if debug or self.config.get("app.debug", False):
            level = logging.DEBUG
        else:
            level = self.config.get("logging.level", "INFO")
        self.logger = Logger.configure(self.config.log_dir, level)

    def initialize_app(self):
        """Initialize the Qt application"""
        from PySide6.QtWidgets import QApplication

        self.app = QApplication.instance() or QApplication(sys.argv)
        self.app.setApplicationName(self.config.get("app.name", "Notes"))
        self.app.setApplicationVersion(self.config.get("app.version", __version__))

    def initialize_store(self):
        """Load the notes store; storage problems are logged by the store"""
        self.store = build_store(self.config, self.logger)
        self.logger.info(f"Notes storage: {self.config.storage_path}")

    def create_main_window(self):
        """Create and show the main window"""
        from checknote.gui.main_window import MainWindow

        self.main_window = MainWindow(self.store, self.config)
        self.main_window.show()

    def run(self) -> int:
        """Run the application"""
        self.logger.info(f"Starting Checknote {__version__}...")

        self.initialize_app()
        self.initialize_store()
        self.create_main_window()

        self.logger.info("Application started successfully")
        return self.app.exec()

    def cleanup(self):
        """Cleanup before exit"""
        self.logger.info("Application shutdown complete")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = parse_args(argv)
    app = ChecknoteApp(data_dir=args.data_dir, debug=args.debug)

    try:
        exit_code = app.run()
    except KeyboardInterrupt:
        print("\nApplication interrupted by user")
        exit_code = 0
    finally:
        app.cleanup()

    return exit_code
