#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--level {easy,normal,hard}] [--mode {cursor,prompt}]
    python main.py --row 12 --column 30 --n-mine 50
"""
from src.minesweeper.cli import main


if __name__ == "__main__":
    main()
