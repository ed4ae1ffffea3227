"""
Checknote - Main Source Package
Single-screen note-taking application with local JSON storage
"""

__version__ = "1.0.0"
__author__ = "Checknote Development Team"

# Avoid package-wide re-exports to reduce import-time side effects.
# Import modules/classes explicitly at call sites.

__all__: list[str] = []
