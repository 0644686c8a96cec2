# src/markdown_split/observability/names.py

"""Standard metric names for markdown-split observability.

Use these constants instead of hardcoded strings.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
PARSE_DURATION = "parse_duration"

# Counters
PARSE_ERRORS_TOTAL = "parse_errors_total"


# ============================================================================
# Split Metrics
# ============================================================================

# Duration
SPLIT_DURATION = "split_duration"

# Counters
SPLIT_SECTIONS_CREATED = "split_sections_created"
SPLIT_HEADINGS_SKIPPED = "split_headings_skipped"
SPLIT_ERRORS_TOTAL = "split_errors_total"

# Gauges
SPLIT_DOCUMENT_SIZE = "split_document_size"
