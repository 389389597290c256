"""Descriptive statistics (mean, population σ, median, L2 norm) over floats."""

from floatstats.common.logging import configure_structlog
from floatstats.stats import StatFn, l2, mean, median, stddev
from floatstats.summary import STAT_DEFS, fmt_stat, fmt_value, render_table, summarize

__all__ = [
    "STAT_DEFS",
    "StatFn",
    "configure_structlog",
    "fmt_stat",
    "fmt_value",
    "l2",
    "mean",
    "median",
    "render_table",
    "stddev",
    "summarize",
]
