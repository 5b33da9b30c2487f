"""
dropfour.interfaces - User-facing front ends for DropFour
"""

from dropfour.interfaces.cli import SimpleCLI, main

__all__ = ['SimpleCLI', 'main']
