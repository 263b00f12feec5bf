"""
Application configuration for the Downtime Analyzer.

Provides environment-aware settings with conservative defaults. The analysis
period and row-layout constants are configurable to avoid hard-coded
"magic numbers" in the aggregation engine.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalysisConfig(BaseModel):
	"""
	Settings for one aggregation pass.

	Notes:
	- period_minutes: reliability period, one calendar week by default.
	- min_fields: rows with fewer tab-separated fields are dropped.
	- default_reason: reason recorded when the reason column is empty.
	"""

	period_minutes: int = Field(7 * 24 * 60, gt=0, description="Length of the reliability period")
	min_fields: int = Field(10, ge=10, description="Minimum fields for a well-formed row")
	default_reason: str = Field("Unspecified", min_length=1)


class Config(BaseSettings):
	"""
	Global configuration with environment overrides.
	"""

	model_config = SettingsConfigDict(
		env_prefix="DOWNTIME_",
		env_file=".env",
		env_nested_delimiter="__",
		extra="ignore",
	)

	log_level: str = Field("INFO", description="Default logging level")
	logs_dir: Path = Field(Path("logs"), description="Directory for log files")
	analysis: AnalysisConfig = AnalysisConfig()

	def model_post_init(self, __context: object) -> None:
		self.logs_dir.mkdir(parents=True, exist_ok=True)


config = Config()
