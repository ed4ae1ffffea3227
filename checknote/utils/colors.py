#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Checknote Color Configuration
Centralized color scheme for the notes GUI.
"""


class NoteColors:
    """Color constants for the notes screen."""

    # Accent Colors
    ACCENT_BLUE = "#0A84FF"         # Toolbar and link accents
    COMPLETE_GREEN = "#34C759"      # Check mark and "Mark as Completed"
    INCOMPLETE_ORANGE = "#FF9500"   # "Mark as Incomplete"

    # Background Colors
    MAIN_BACKGROUND = "#FFFFFF"
    PANEL_BACKGROUND = "#F2F2F7"    # Grouped list background
    ROW_SELECTED = "#D1D1D6"

    # Text Colors
    PRIMARY_TEXT = "#000000"
    SECONDARY_TEXT = "#8E8E93"      # Previews and completed titles
    BUTTON_TEXT = "#FFFFFF"

    BORDER_COLOR = "#C6C6C8"

    @classmethod
    def get_stylesheet(cls, element_type="default"):
        """Get common stylesheets for different element types."""
        if element_type == "main_background":
            return f"background-color: {cls.MAIN_BACKGROUND};"

        elif element_type == "list":
            return f"""
                QListWidget {{
                    background-color: {cls.MAIN_BACKGROUND};
                    border: none;
                    outline: none;
                }}
                QListWidget::item {{
                    border-bottom: 1px solid {cls.BORDER_COLOR};
                    padding: 0px;
                }}
                QListWidget::item:selected {{
                    background-color: {cls.ROW_SELECTED};
                }}
            """

        elif element_type == "input_field":
            return f"""
                QLineEdit, QTextEdit {{
                    border: 1px solid {cls.BORDER_COLOR};
                    border-radius: 6px;
                    padding: 6px;
                    font-size: 14px;
                    background-color: {cls.MAIN_BACKGROUND};
                    color: {cls.PRIMARY_TEXT};
                }}
                QLineEdit:focus, QTextEdit:focus {{
                    border-color: {cls.ACCENT_BLUE};
                }}
            """

        return ""

    @classmethod
    def toggle_button_style(cls, is_completed: bool) -> str:
        """Stylesheet for the completion toggle button."""
        background = cls.INCOMPLETE_ORANGE if is_completed else cls.COMPLETE_GREEN
        return f"""
            QPushButton {{
                background-color: {background};
                color: {cls.BUTTON_TEXT};
                border: none;
                border-radius: 10px;
                padding: 12px;
                font-weight: bold;
                letter-spacing: 1px;
            }}
        """
