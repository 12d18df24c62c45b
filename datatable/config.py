"""
datatable configuration — all environment variables in one place.

Read from environment at import time. The kernel never reads these;
only the demo and CLI do.
"""

from __future__ import annotations

import os


class Settings:
    """Settings from environment variables."""

    # Logging
    LOG_LEVEL: str = os.environ.get("DATATABLE_LOG_LEVEL", "WARNING")

    # Rendering
    PAGE_TITLE: str = os.environ.get("DATATABLE_PAGE_TITLE", "datatable")

    # Control labels
    HIDE_LABEL: str = os.environ.get("DATATABLE_HIDE_LABEL", "Hide")
    SORT_LABEL: str = os.environ.get("DATATABLE_SORT_LABEL", "Sort")
    FILTER_LABEL: str = os.environ.get("DATATABLE_FILTER_LABEL", "Filter")


# Singleton instance
settings = Settings()
