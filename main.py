"""
Checknote - Main Application Entry Point
Single-screen note-taking application
"""

import sys

from checknote.app import main


if __name__ == "__main__":
    sys.exit(main())
