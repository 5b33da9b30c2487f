#!/usr/bin/env python3
"""
run.py - Entry point for DropFour

Usage:
    python run.py play [--rows 6] [--cols 7] [--connect 4] [--no-color]
    python run.py benchmark [--iterations 200] [--seed 0]

Both commands accept --debug LEVEL and --log-file PATH.
"""

import sys

from dropfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
