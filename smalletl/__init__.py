"""Errors, configuration validation, logging set-up and process monitoring for small ETL jobs."""

__version__ = "0.1.0"
__all__ = ["errors", "logger", "monitor", "validation"]