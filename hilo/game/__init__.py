"""
Game Package

This package contains the Hi-Lo game logic:
- Game models (options, game info, players)
- Input validation predicates
- Phase state machine
- The HiLoGame driver
"""
