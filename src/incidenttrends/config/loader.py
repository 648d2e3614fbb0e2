"""
Configuration loading utilities.

Supports environment variable interpolation and config inheritance
from a sibling base.yaml. Every key is optional.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from incidenttrends.config.settings import (
    OutputConfig,
    PipelineConfig,
    ReportConfig,
    SourceConfig,
)


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is not None and not isinstance(data, dict):
        msg = f"Config file must contain a mapping: {path}"
        raise ValueError(msg)
    return _process_config_values(data) if data else {}


def default_config() -> PipelineConfig:
    """Configuration used when no config file is given."""
    return PipelineConfig()


def load_config(
    config_path: Path,
    base_path: Path | None = None,
) -> PipelineConfig:
    """
    Load pipeline configuration from YAML file(s).

    Example:
        project: nypd-shootings
        source:
          url: ${INCIDENT_SOURCE:https://...}
        report:
          top_n: 5

    Args:
        config_path: Path to the main configuration file.
        base_path: Optional path to base configuration for inheritance.

    Returns:
        Fully validated PipelineConfig instance.
    """
    if base_path is not None:
        base_data = load_yaml(base_path)
    else:
        potential_base = config_path.parent / "base.yaml"
        base_data = (
            load_yaml(potential_base)
            if potential_base.exists() and potential_base != config_path
            else {}
        )

    merged = _deep_merge(base_data, load_yaml(config_path))

    defaults = PipelineConfig()

    source_data = merged.get("source", {})
    source = SourceConfig(**source_data)

    report = ReportConfig(**merged.get("report", {}))

    output_data = merged.get("output", {})
    output = OutputConfig(
        output_root=Path(output_data.get("root", defaults.output.output_root)),
    )

    return PipelineConfig(
        project=merged.get("project", defaults.project),
        source=source,
        report=report,
        output=output,
    )
