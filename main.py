#!/usr/bin/env python3
"""
List Manager - Main entry point
"""
import sys
import os

# Add the parent directory to sys.path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from list_manager.cli import main


if __name__ == "__main__":
    sys.exit(main())
