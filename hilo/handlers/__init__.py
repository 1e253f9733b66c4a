"""
Handlers Package

This package contains the input/output side of the game:
- The text channel interface and its console implementation
- Error handlers for unexpected exceptions
"""
