#!/usr/bin/env python3
"""
Run the sheep metrics scraper from the repo root:

    python scrape_sheep_metrics.py --output sheepmetrics.json
"""
import sys

from sheep_metrics.scraper import main

if __name__ == "__main__":
    sys.exit(main())
