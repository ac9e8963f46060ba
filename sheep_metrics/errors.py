"""Exceptions raised by the sheep metrics pipeline. Every one of them ends the run."""


class SheepMetricsError(Exception):
    """Base class for fatal scrape errors"""


class SnapshotLoadError(SheepMetricsError):
    """The stored snapshot file exists but cannot be read back"""


class NavigationError(SheepMetricsError):
    """The report page did not load or settle within the page timeout"""


class FrameNotFoundError(SheepMetricsError):
    """The Power BI iframe never appeared on the page"""


class NoRowsFoundError(SheepMetricsError):
    """No "Select Row" blocks were found in the rendered report text"""
