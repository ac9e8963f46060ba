"""
Headless browser access to the Power BI report.

The metrics table lives in a Power BI embed inside an iframe, so the page is
loaded in Chromium, the iframe's own document is picked up, and its rendered
text is read once Power BI has had time to draw.
"""

import logging
import time
from typing import Callable, Optional

from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from .config import ScraperConfig
from .errors import FrameNotFoundError, NavigationError

logger = logging.getLogger(__name__)


def fetch_report_text(config: ScraperConfig,
                      wait_for_render: Optional[Callable[[float], None]] = None) -> str:
    """Load the report page and return the iframe body's rendered text.

    ``wait_for_render`` is called with ``config.render_wait_seconds`` once the
    iframe is found; it defaults to ``time.sleep``.
    """
    if wait_for_render is None:
        wait_for_render = time.sleep

    with sync_playwright() as p:
        browser = p.chromium.launch(
            headless=config.headless,
            args=config.browser_args
        )

        try:
            page = browser.new_page()
            page.set_default_timeout(config.page_timeout)

            logger.info(f"→ Navigating to: {config.url}")
            try:
                page.goto(config.url, wait_until="networkidle")
            except PlaywrightTimeoutError as e:
                raise NavigationError(f"Page did not settle within {config.page_timeout} ms: {e}") from e

            logger.info("→ Waiting for Power BI iframe...")
            try:
                frame_handle = page.wait_for_selector(config.frame_selector, state="attached",
                                                      timeout=config.frame_timeout)
            except PlaywrightTimeoutError as e:
                raise FrameNotFoundError(
                    f"Iframe {config.frame_selector} not found within {config.frame_timeout} ms"
                ) from e

            frame = frame_handle.content_frame() if frame_handle else None
            if frame is None:
                raise FrameNotFoundError(f"Element {config.frame_selector} has no frame document")
            logger.info("✓ Iframe found")

            logger.info(f"→ Waiting for Power BI content to render ({config.render_wait_seconds} seconds)...")
            wait_for_render(config.render_wait_seconds)

            return frame.locator("body").inner_text()

        finally:
            browser.close()
