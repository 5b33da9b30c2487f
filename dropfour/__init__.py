"""
dropfour - Two-player column-drop game engine

This package provides the game state model, move validation, token placement
and win/draw detection for a Connect Four style game, plus a Gymnasium
environment and a text interface built on top of it.
"""

__version__ = '0.1.0'
