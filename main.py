#!/usr/bin/env python3
"""
Chemistry Lab entry point.
"""

import sys
from pathlib import Path

# Allow running from repo root without installing package
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from chemistry_lab.app import main


if __name__ == "__main__":
    main()
