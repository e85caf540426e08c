# src/docstream/observability/names.py

"""Standard metric names for docstream observability.

Use these constants instead of hardcoded strings.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
PARSE_DURATION = "parse_duration"

# Counters
PARSE_DOCUMENTS_TOTAL = "parse_documents_total"
PARSE_ERRORS_TOTAL = "parse_errors_total"

# Gauges
PARSE_INPUT_SIZE = "parse_input_size"
