"""
Hi-Lo Game Package

This package contains the Hi-Lo number guessing game including:
- The game-flow driver and its input validation
- The text channel the players talk through
- Configuration and logging utilities

Version: 1.0.0
"""

__version__ = "1.0.0"

# Package imports for easier access
from .main import main
from .utils.config import get_settings

__all__ = ["main", "get_settings"]
