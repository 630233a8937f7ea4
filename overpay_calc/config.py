"""
Calculation constants for the overpay-vs-invest calculator.

Money thresholds are in pence, rates in annual percent.
"""

# ── Loan schedules ───────────────────────────────────────────────────
SAFETY_MARGIN_MONTHS = 6_000     # months allowed past the stated term before a schedule stops
MAX_TERM_MONTHS = 1_200          # 100 years; longer terms are rejected as input errors

# ── Break-even solver (dual ledger) ──────────────────────────────────
BREAK_EVEN_LOW_PERCENT = 0
BREAK_EVEN_HIGH_PERCENT = 100    # wide enough for high-APR loans
BREAK_EVEN_TOLERANCE_PENCE = 100  # |delta| below £1 counts as equal wealth
BREAK_EVEN_MAX_ITERATIONS = 50

# ── Required return (simple journey) ────────────────────────────────
LEGACY_MAX_MONTHLY_RATE = "0.5"  # 50% a month upper bracket
LEGACY_MAX_ITERATIONS = 100

# ── Presentation ────────────────────────────────────────────────────
RECOMMENDATION_THRESHOLD_PENCE = 50_000  # £500 either way is a close call
SCHEDULE_PREVIEW_ROWS = 120
