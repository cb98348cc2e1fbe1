"""
Presentation services: rendering game snapshots and hosting the game window.
"""
