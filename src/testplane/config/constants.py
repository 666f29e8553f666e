"""Configuration constants.

Values here are protocol constraints of the runner's text output and
implementation details. They are NOT user-configurable; for configurable
values see models.py.
"""

# =============================================================================
# Runner output grammar
# =============================================================================

SEPARATOR_MIN_WIDTH = 10
"""Minimum run of '-' characters recognised as a failure-block separator."""

FAILURE_DETAIL_FALLBACK = "Test failed. Check the test output for details."
"""Failure detail recorded when a test fails before its report block is seen."""

# =============================================================================
# Execution
# =============================================================================

REFRESH_INTERVAL_MS_DEFAULT = 200
"""Minimum spacing between two refresh notifications."""

CANCEL_GRACE_SEC_DEFAULT = 0.5
"""Delay before the interrupt signal is repeated on cancellation."""

OUTPUT_CAPTURE_MAX_BYTES = 1024 * 1024
"""Cap on raw output retained per run for display after the run."""

READ_CHUNK_BYTES = 4096
"""Bytes read from the test process per chunk."""
