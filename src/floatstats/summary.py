"""Statistic registry, per-sample summaries, and text scorecards."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from floatstats.common.console import section
from floatstats.common.constants import (
    COLUMN_WIDTH,
    DISPLAY_PRECISION,
    LABEL_WIDTH,
    MISSING,
)
from floatstats.common.logging import get_logger
from floatstats.stats import StatFn, l2, mean, median, stddev

log = get_logger(__name__)


# (display_label, dict_key, statistic)
STAT_DEFS: list[tuple[str, str, StatFn]] = [
    ("Mean",         "mean",    mean),
    ("Std Dev (σ)",  "stddev",  stddev),
    ("Median",       "median",  median),
    ("L2 Norm",      "l2",      l2),
]


def summarize(
    nums: Sequence[float],
    stat_defs: Sequence[tuple[str, str, StatFn]] = STAT_DEFS,
) -> dict[str, float | None]:
    """Apply every registered statistic to *nums*.

    Undefined statistics are kept as ``None`` under their key.
    """
    result: dict[str, float | None] = {}
    for _, key, fn in stat_defs:
        result[key] = fn(nums)
    undefined = [k for k, v in result.items() if v is None]
    if undefined:
        log.debug("summarize.undefined", n=len(nums), keys=undefined)
    return result


def fmt_value(value: float | None) -> str:
    if value is None:
        return MISSING
    return f"{value:,.{DISPLAY_PRECISION}f}"


def fmt_stat(nums: Sequence[float]) -> str:
    """Full stats: mean +/- sigma  [med, l2]  (n=...)."""
    if not nums:
        return MISSING
    s = summarize(nums)
    return (
        f"{fmt_value(s['mean'])} ± {fmt_value(s['stddev'])}"
        f"  [med={fmt_value(s['median'])}, l2={fmt_value(s['l2'])}]"
        f"  (n={len(nums)})"
    )


def render_table(
    samples: Mapping[str, Sequence[float]],
    title: str = "SUMMARY STATISTICS",
    stat_defs: Sequence[tuple[str, str, StatFn]] = STAT_DEFS,
) -> str:
    """Scorecard with one column per sample and one row per statistic."""
    names = list(samples)
    summaries = [summarize(samples[name], stat_defs) for name in names]

    lines = [section(title)]
    lines.append(
        f"  {'Statistic':<{LABEL_WIDTH}}"
        + "".join(f" {name:>{COLUMN_WIDTH}}" for name in names)
    )
    lines.append(
        f"  {'─' * LABEL_WIDTH}"
        + "".join(f" {'─' * COLUMN_WIDTH}" for _ in names)
    )
    for label, key, _ in stat_defs:
        cells = "".join(f" {fmt_value(s[key]):>{COLUMN_WIDTH}}" for s in summaries)
        lines.append(f"  {label:<{LABEL_WIDTH}}{cells}")
    lines.append(
        f"  {'Count':<{LABEL_WIDTH}}"
        + "".join(f" {len(samples[name]):>{COLUMN_WIDTH},}" for name in names)
    )
    return "\n".join(lines)
