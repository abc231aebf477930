"""
gridsnake Package
=================

Deterministic Snake on a fixed 16x16 grid. The engine in ``snake_core`` is
pure: every call takes a game state and returns the next one, leaving timing,
input and drawing to the host (see ``tools/play_human.py``).

All fixed parameters (grid size, tick period, start length, RNG constants)
live in game_config.yaml next to this file.
"""
