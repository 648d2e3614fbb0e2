"""Tests for configuration system."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from incidenttrends.config import (
    DEFAULT_SOURCE_URL,
    PipelineConfig,
    ReportConfig,
    SourceConfig,
    default_config,
    load_config,
)


class TestSourceConfig:
    """Tests for SourceConfig."""

    def test_defaults(self) -> None:
        """Test defaults describe the public shooting incident export."""
        config = SourceConfig()
        assert config.url == DEFAULT_SOURCE_URL
        assert config.date_column == "OCCUR_DATE"
        assert config.region_column == "BORO"
        assert config.date_format == "%m/%d/%Y"

    def test_date_format_requires_year(self) -> None:
        """Test that a format without a year directive is rejected."""
        with pytest.raises(ValueError, match="year directive"):
            SourceConfig(date_format="%m/%d")

    def test_timeout_must_be_positive(self) -> None:
        """Test that a zero timeout is rejected."""
        with pytest.raises(ValidationError):
            SourceConfig(timeout_seconds=0)

    def test_frozen(self) -> None:
        """Test that config is immutable."""
        config = SourceConfig()
        with pytest.raises(ValidationError):
            config.url = "other.csv"


class TestReportConfig:
    """Tests for ReportConfig."""

    def test_top_n_lower_bound(self) -> None:
        """Test that top_n below 1 is rejected."""
        with pytest.raises(ValidationError):
            ReportConfig(top_n=0)

    def test_histogram_bins_lower_bound(self) -> None:
        """Test that histogram_bins below 1 is rejected."""
        with pytest.raises(ValidationError):
            ReportConfig(histogram_bins=0)


class TestPipelineConfig:
    """Tests for PipelineConfig."""

    def test_output_paths(self) -> None:
        """Test output paths derive from root and project."""
        config = PipelineConfig(project="demo")
        assert config.plots_dir == Path("./output/demo/plots")
        assert config.tables_dir == Path("./output/demo/tables")

    def test_project_without_separators(self) -> None:
        """Test that project names with path separators are rejected."""
        with pytest.raises(ValueError, match="path separators"):
            PipelineConfig(project="a/b")

    def test_default_config(self) -> None:
        """Test default_config returns the all-default model."""
        assert default_config() == PipelineConfig()


class TestLoadConfig:
    """Tests for YAML config loading."""

    def test_minimal_config(self, tmp_path: Path) -> None:
        """Test loading a config with only a project name."""
        config_path = tmp_path / "minimal.yaml"
        config_path.write_text("project: minimal\n")

        config = load_config(config_path)

        assert config.project == "minimal"
        assert config.source == SourceConfig()
        assert config.report == ReportConfig()

    def test_full_config(self, tmp_path: Path) -> None:
        """Test that every section is read."""
        config_path = tmp_path / "full.yaml"
        config_path.write_text(
            "project: full\n"
            "source:\n"
            "  url: data/incidents.csv\n"
            "  date_column: date\n"
            "  region_column: borough\n"
            "  date_format: '%Y-%m-%d'\n"
            "  timeout_seconds: 30\n"
            "report:\n"
            "  top_n: 3\n"
            "  histogram_bins: 12\n"
            "  charts: false\n"
            "output:\n"
            "  root: out\n"
        )

        config = load_config(config_path)

        assert config.source.url == "data/incidents.csv"
        assert config.source.date_column == "date"
        assert config.source.region_column == "borough"
        assert config.source.date_format == "%Y-%m-%d"
        assert config.source.timeout_seconds == 30
        assert config.report.top_n == 3
        assert config.report.histogram_bins == 12
        assert config.report.charts is False
        assert config.output.output_root == Path("out")

    def test_base_config_merge(self, tmp_path: Path) -> None:
        """Test that base.yaml next to the config is deep-merged."""
        (tmp_path / "base.yaml").write_text(
            "project: base\nreport:\n  top_n: 7\n  histogram_bins: 10\n"
        )
        config_path = tmp_path / "child.yaml"
        config_path.write_text("project: child\nreport:\n  top_n: 2\n")

        config = load_config(config_path)

        assert config.project == "child"
        assert config.report.top_n == 2
        assert config.report.histogram_bins == 10

    def test_env_interpolation(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test ${VAR} and ${VAR:default} substitution."""
        monkeypatch.setenv("INCIDENT_SOURCE", "/data/shootings.csv")
        monkeypatch.delenv("INCIDENT_PROJECT", raising=False)
        config_path = tmp_path / "env.yaml"
        config_path.write_text(
            "project: ${INCIDENT_PROJECT:fallback}\n"
            "source:\n"
            "  url: ${INCIDENT_SOURCE}\n"
        )

        config = load_config(config_path)

        assert config.project == "fallback"
        assert config.source.url == "/data/shootings.csv"

    def test_invalid_value_raises(self, tmp_path: Path) -> None:
        """Test that invalid values fail validation."""
        config_path = tmp_path / "invalid.yaml"
        config_path.write_text("report:\n  top_n: 0\n")

        with pytest.raises(ValueError):
            load_config(config_path)

    def test_non_mapping_rejected(self, tmp_path: Path) -> None:
        """Test that a YAML list is not accepted as config."""
        config_path = tmp_path / "list.yaml"
        config_path.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="mapping"):
            load_config(config_path)

    def test_shipped_configs_load(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the example configs in configs/ are valid."""
        monkeypatch.delenv("INCIDENT_SOURCE", raising=False)
        configs_dir = Path(__file__).parent.parent / "configs"
        config = load_config(configs_dir / "nypd-shootings.yaml")

        assert config.project == "nypd-shootings"
        assert config.source.url.startswith("https://")
