"""
Shared fixtures: rendered report text shaped like the Power BI table.
"""

import pytest

from sheep_metrics.config import ScraperConfig

WEEK_VALUES = [
    ["W2024-10", "1500 head", "85%", "$1,200", "110.5", "+2.1", "-3", "1.5", "0.8"],
    ["W2024-09", "1,420 head", "82%", "$950", "108.4", "-1.2", "+4", "-2.0", "0.3"],
    ["W2024-08", "1,390 head", "80%", "$1,010", "109.7", "0.6", "-7", "0.5", "-1.1"],
    ["W2024-07", "1,610 head", "79%", "$870", "109.1", "1.4", "12", "-0.4", "2.2"],
]


def _block(values, trailing="View"):
    return ["Select Row"] + list(values) + [trailing]


@pytest.fixture()
def make_report_text():
    """Build report text from a list of 9-value rows, with page chrome around it."""

    def _make(rows, header=True, footer=True):
        lines = []
        if header:
            lines += ["Sheep Market Indicators", "", "  Week  ", "Total Head"]
        for values in rows:
            lines += _block(values)
            lines.append("   ")
        if footer:
            lines += ["Data source: MLA", "Microsoft Power BI"]
        return "\n".join(lines)

    return _make


@pytest.fixture()
def four_week_text(make_report_text):
    return make_report_text(WEEK_VALUES)


@pytest.fixture()
def config(tmp_path):
    return ScraperConfig(output_file=tmp_path / "sheepmetrics.json", render_wait_seconds=0)
