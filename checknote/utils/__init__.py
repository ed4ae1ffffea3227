"""
Utils Package - Core utilities for Checknote
Contains configuration, logging, and color utilities
"""

from .config_loader import ConfigLoader
from .logger import Logger

__all__ = ['ConfigLoader', 'Logger']
