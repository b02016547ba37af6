"""Text rendering of snapshot data."""

from render.markup import normalize_markup, trim_line_list
from render.reports import (
    DEFAULT_SCREEN_WIDTH,
    cdoc_report,
    comments_report,
    examples_report,
    mode_report,
    namespace_listing_report,
    search_report,
    see_also_report,
)
from render.stats import snapshot_stats_report
from render.wrap import wrap_line

__all__ = [
    "DEFAULT_SCREEN_WIDTH",
    "cdoc_report",
    "comments_report",
    "examples_report",
    "mode_report",
    "namespace_listing_report",
    "normalize_markup",
    "search_report",
    "see_also_report",
    "snapshot_stats_report",
    "trim_line_list",
    "wrap_line",
]
