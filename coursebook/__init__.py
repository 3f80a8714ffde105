"""Course structure, outlines, schedules and exercise extraction for mdBook books."""

__version__ = "0.1.0"