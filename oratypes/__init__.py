"""Oracle SQL value types: timestamps, intervals, type descriptors and datetime conversions."""

__version__ = "0.1.0"
__all__ = ["conversions", "errors", "interval_ds", "interval_ym", "oracle_type", "scanner", "timestamp"]