"""
Tests Package

This package contains all test files for the Hi-Lo game:
- Unit tests for validation, models and the phase state machine
- Game flow tests driven through a scripted text channel
- Configuration and console channel tests

Run tests with: pytest tests/
"""
