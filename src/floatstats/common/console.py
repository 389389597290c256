"""Banner helpers for plain-text reports."""

from __future__ import annotations

from floatstats.common.constants import RULE_WIDTH

DIV = "─" * RULE_WIDTH


def section(title: str) -> str:
    return f"\n{DIV}\n  {title}\n{DIV}"
