"""
Scraper configuration
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

# --- Configuration ---
REPORT_URL = "https://mcmanusm.github.io/sheep_comments/"
# Relative to the working directory the scraper is run from
DEFAULT_OUTPUT_FILE = Path("sheepmetrics.json")

# The Power BI report is embedded in this iframe
FRAME_SELECTOR = "#pbiTable"

# Timeouts (milliseconds) - Power BI content loads slowly
PAGE_TIMEOUT = 60000  # 60 seconds
FRAME_TIMEOUT = 30000  # 30 seconds

# Power BI gives no "rendered" signal, so we just wait
RENDER_WAIT_SECONDS = 15

EXPECTED_ROWS = 4

BROWSER_ARGS = [
    '--no-sandbox',
    '--disable-setuid-sandbox'
]


@dataclass
class ScraperConfig:
    """Configuration for a single scrape run"""
    url: str = REPORT_URL
    output_file: Path = DEFAULT_OUTPUT_FILE
    frame_selector: str = FRAME_SELECTOR
    page_timeout: int = PAGE_TIMEOUT
    frame_timeout: int = FRAME_TIMEOUT
    render_wait_seconds: float = RENDER_WAIT_SECONDS
    expected_rows: int = EXPECTED_ROWS
    headless: bool = True
    browser_args: List[str] = field(default_factory=lambda: list(BROWSER_ARGS))

    def __post_init__(self):
        self.output_file = Path(self.output_file)
