"""Display settings for formatted statistics."""

# Decimal places shown for a present value
DISPLAY_PRECISION = 2

# Rendered in place of an undefined statistic
MISSING = "—"

# ── Table layout ─────────────────────────────────────────────────────────────
LABEL_WIDTH = 20
COLUMN_WIDTH = 14
RULE_WIDTH = 76
