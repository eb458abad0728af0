"""Exceptions raised by report tables.

This module provides the error types surfaced to integrating code:
- TableIntegrationError: Raised when a row's own column read faults
"""


class TableIntegrationError(RuntimeError):
    """Raised when a row handed to the sort engine cannot be read.

    Missing columns and absent or non-scalar values are never errors; they
    sort as missing. This error is raised only when the row's column read
    itself fails, which means the table was built incorrectly upstream.

    The original exception is available as ``__cause__``.
    """

    pass
