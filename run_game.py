#!/usr/bin/env python3
"""
Game Runner Script

Simple script to run the Hi-Lo game from a checkout.

Usage:
    python run_game.py
"""

import sys
import os

# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from hilo.main import main


def warn_missing_env_file(env_path: str = ".env") -> bool:
    """
    Tell the user on stderr when no .env file is present.

    stdout is kept for the game itself.

    Returns:
        bool: True if the notice was printed
    """
    if os.path.exists(env_path):
        return False
    print(
        "No .env file found, using default limits (copy env.example to .env to change them)",
        file=sys.stderr,
    )
    return True


if __name__ == "__main__":
    warn_missing_env_file()
    main()
