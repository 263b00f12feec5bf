"""
Core module: Configuration, logging, and exception handling.
"""

from .config import AnalysisConfig, Config, config
from .exceptions import (
    ConfigurationError,
    DataValidationError,
    DowntimeAnalyzerError,
    IngestionError,
)

__all__ = [
    "AnalysisConfig",
    "Config",
    "config",
    "DowntimeAnalyzerError",
    "DataValidationError",
    "IngestionError",
    "ConfigurationError",
]
