"""
Typed configuration models using Pydantic.

All configuration is defined here with explicit typing and validation.
Processing code receives these models and never reads the environment.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SOURCE_URL = (
    "https://data.cityofnewyork.us/api/views/833y-fsy8/rows.csv?accessType=DOWNLOAD"
)


class SourceConfig(BaseModel):
    """Where the raw incident table comes from and how to read it."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(
        default=DEFAULT_SOURCE_URL,
        description="HTTP(S) URL or local path of the incident CSV",
    )
    date_column: str = Field(default="OCCUR_DATE", description="Raw date column")
    region_column: str = Field(default="BORO", description="Raw region column")
    date_format: str = Field(
        default="%m/%d/%Y", description="strptime format of the raw date column"
    )
    timeout_seconds: float = Field(
        default=120.0, gt=0, description="Download timeout in seconds"
    )

    @field_validator("date_format")
    @classmethod
    def validate_date_format(cls, v: str) -> str:
        """Ensure the format contains a year directive."""
        if "%Y" not in v and "%y" not in v:
            msg = f"date_format must contain a year directive, got: {v!r}"
            raise ValueError(msg)
        return v


class ReportConfig(BaseModel):
    """Reporting options for tables and charts."""

    model_config = ConfigDict(frozen=True)

    top_n: int = Field(default=5, ge=1, description="Years shown in top/bottom rankings")
    histogram_bins: int = Field(
        default=30, ge=1, description="Bins for the incident date histogram"
    )
    charts: bool = Field(default=True, description="Render PNG charts")


class OutputConfig(BaseModel):
    """Output paths configuration.

    Paths are derived from output_root and project name.
    Structure: ./output/{project}/plots, ./output/{project}/tables.
    """

    model_config = ConfigDict(frozen=True)

    output_root: Path = Field(
        default=Path("./output"), description="Root directory for all outputs"
    )


class PipelineConfig(BaseModel):
    """Complete pipeline configuration."""

    model_config = ConfigDict(frozen=True)

    project: str = Field(
        default="nypd-shootings", description="Project identifier for output paths"
    )
    source: SourceConfig = Field(default_factory=SourceConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("project")
    @classmethod
    def validate_project(cls, v: str) -> str:
        """Project names become directory names."""
        if not v or "/" in v or "\\" in v:
            msg = f"project must be a non-empty name without path separators, got: {v!r}"
            raise ValueError(msg)
        return v

    @property
    def project_dir(self) -> Path:
        """Root output directory of this project."""
        return self.output.output_root / self.project

    @property
    def plots_dir(self) -> Path:
        """Path to chart output directory."""
        return self.project_dir / "plots"

    @property
    def tables_dir(self) -> Path:
        """Path to CSV table output directory."""
        return self.project_dir / "tables"
