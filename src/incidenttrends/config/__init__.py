"""
Configuration management with typed Pydantic models.

Provides the data source, reporting and output settings of a run.
"""

from incidenttrends.config.loader import default_config, load_config
from incidenttrends.config.settings import (
    DEFAULT_SOURCE_URL,
    OutputConfig,
    PipelineConfig,
    ReportConfig,
    SourceConfig,
)

__all__ = [
    "DEFAULT_SOURCE_URL",
    "OutputConfig",
    "PipelineConfig",
    "ReportConfig",
    "SourceConfig",
    "default_config",
    "load_config",
]
