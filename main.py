#!/usr/bin/env python3
"""
Text Minesweeper - Main entry point.

Usage:
    python main.py [--rows N] [--columns N] [--mines N] [--seed S] [--verbose]

Commands during play:
    f <row> <col>   flag or unflag a cell
    r <row> <col>   reveal a cell
"""
import sys

from src.minesweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
