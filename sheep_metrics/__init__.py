"""
Sheep Market Metrics Scraper
Pulls the weekly sheep sale metrics table out of the embedded Power BI report
and keeps a single JSON snapshot of it up to date.
"""

__version__ = "1.0.0"
