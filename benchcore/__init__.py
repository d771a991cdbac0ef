"""Benchmarking helpers: statistics, system information, name filtering and formatting."""

__version__ = "0.1.0"

__all__ = ["regex", "stats", "string_util", "sysinfo"]