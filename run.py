#!/usr/bin/env python3
"""Run the token wizard."""
import sys

from src.main import main

if __name__ == "__main__":
    sys.exit(main())
