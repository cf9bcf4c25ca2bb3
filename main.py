#!/usr/bin/env python3
"""
Tea Tree Gully Development Application Scraper - Entry Point

Retrieves development applications lodged with the City of Tea Tree Gully
in the last month and stores new ones in data.sqlite.

Usage:
    python main.py [--database PATH] [--log-file PATH] [-v]
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from teatree_scraper.scraper import main

if __name__ == "__main__":
    sys.exit(main())
