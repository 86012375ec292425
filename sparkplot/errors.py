from __future__ import annotations


class SparklineDataError(ValueError):
    """Raised when a sparkline dataset cannot be rendered."""
