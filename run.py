#!/usr/bin/env python3
"""Convenience runner for the GPX route animation tool.

Usage:
    python run.py data/route.gpx [more.gpx ...]
"""
import logging
from gpx_animate.main import main

if __name__ == "__main__":
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    raise SystemExit(main())
