"""
Custom exceptions for the Downtime Analyzer.

Use them to distinguish between bad caller input, unreadable sources,
and configuration problems.
"""


class DowntimeAnalyzerError(Exception):
    """Base exception for downtime analysis failures."""
    pass


class DataValidationError(DowntimeAnalyzerError):
    """Raised when top-level input fails validation before aggregation."""
    pass


class IngestionError(DowntimeAnalyzerError):
    """Raised when an incident source file cannot be read."""
    pass


class ConfigurationError(DowntimeAnalyzerError):
    """Raised when configuration is invalid or missing."""
    pass
