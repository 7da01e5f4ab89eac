"""
kodic - clipboard-watching English-Korean dictionary
"""

__version__ = "1.0.0"
__description__ = "Show dictionary definitions for words copied to the clipboard"

# Export main factory function for easy access
from .core.factory import create_watcher

__all__ = ["create_watcher"]
