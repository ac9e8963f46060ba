"""
Sheep Metrics Scraper
Reads the weekly sheep sale metrics from the Power BI report on the sheep
comments page and writes them to a JSON snapshot when they change.

Run with ``python -m sheep_metrics.scraper`` or the ``sheep-metrics`` command.
"""

import json
import logging
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional

from playwright.sync_api import Error as PlaywrightError

from .browser import fetch_report_text
from .config import ScraperConfig
from .errors import NoRowsFoundError, SheepMetricsError
from .models import MetricsSnapshot
from .parser import build_snapshot, count_markers, parse_rows, split_lines
from .storage import has_changed, load_previous_snapshot, save_snapshot
from .utils import setup_logging

logger = logging.getLogger(__name__)


@dataclass
class ScrapeResult:
    """Outcome of one successful run"""
    snapshot: MetricsSnapshot
    output_file: Path
    written: bool
    row_count: int


def run_scrape(config: ScraperConfig,
               fetch_text: Callable[[ScraperConfig], str] = fetch_report_text,
               now: Optional[Callable[[], datetime]] = None) -> ScrapeResult:
    """Fetch, parse and (if changed) store the weekly metrics.

    Raises a ``SheepMetricsError`` subclass on any fatal condition; nothing is
    written in that case.
    """
    previous = load_previous_snapshot(config.output_file)

    all_text = fetch_text(config)

    logger.info("=== RAW SCRAPED TEXT START ===")
    logger.info(all_text)
    logger.info("=== RAW SCRAPED TEXT END ===")

    lines = split_lines(all_text)
    logger.info(f"→ Found {len(lines)} non-empty lines")
    logger.info(f'→ Found {count_markers(lines)} "Select Row" markers')

    rows = parse_rows(lines)
    logger.info(f"→ Successfully parsed {len(rows)} rows")

    if not rows:
        logger.error("❌ ERROR: No rows found!")
        logger.error("This usually means:")
        logger.error("  1. Power BI content didn't fully load")
        logger.error("  2. The table structure has changed")
        logger.error("  3. The iframe is empty or showing an error")
        logger.error("Check the raw scraped text above for clues.")
        raise NoRowsFoundError("No \"Select Row\" blocks found in the report text")

    if len(rows) != config.expected_rows:
        logger.warning(f"⚠️  WARNING: Expected {config.expected_rows} rows but found {len(rows)}")
        logger.warning("Proceeding anyway, but verify the data is correct.")

    captured_at = now() if now is not None else datetime.now(timezone.utc)
    snapshot = build_snapshot(rows, updated_at=captured_at)

    logger.info("✓ FINAL METRICS:")
    logger.info(json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False))

    if not has_changed(previous, snapshot):
        logger.info("→ No metric changes detected; skipping file write")
        return ScrapeResult(snapshot=snapshot, output_file=config.output_file,
                            written=False, row_count=len(rows))

    logger.info("→ Metric changes detected; writing updated file")
    save_snapshot(snapshot, config.output_file)
    logger.info(f"✓ Written to {config.output_file}")

    return ScrapeResult(snapshot=snapshot, output_file=config.output_file,
                        written=True, row_count=len(rows))


def build_arg_parser():
    import argparse

    defaults = ScraperConfig()
    parser = argparse.ArgumentParser(description='Sheep market weekly metrics scraper')
    parser.add_argument('--url', default=defaults.url, help='Report page URL')
    parser.add_argument('--output', type=Path, default=defaults.output_file,
                        help='Snapshot JSON file')
    parser.add_argument('--page-timeout', type=int, default=defaults.page_timeout,
                        help='Per-operation browser timeout (ms)')
    parser.add_argument('--frame-timeout', type=int, default=defaults.frame_timeout,
                        help='How long to wait for the report iframe (ms)')
    parser.add_argument('--render-wait', type=float, default=defaults.render_wait_seconds,
                        help='Seconds to let Power BI render before reading')
    parser.add_argument('--headed', action='store_true', help='Show the browser window')
    parser.add_argument('--log-dir', type=Path, help='Also write logs to this directory')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    # Library modules log under the package name
    setup_logging('sheep_metrics', log_dir=args.log_dir)
    log = logging.getLogger('sheep_metrics.main')

    config = ScraperConfig(
        url=args.url,
        output_file=args.output,
        page_timeout=args.page_timeout,
        frame_timeout=args.frame_timeout,
        render_wait_seconds=args.render_wait,
        headless=not args.headed
    )

    try:
        run_scrape(config, fetch_text=fetch_report_text)
    except SheepMetricsError as e:
        log.error(f"Scrape failed: {e}")
        return 1
    except PlaywrightError as e:
        log.error(f"Browser error: {e}")
        return 1

    log.info("✓ Scrape completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
