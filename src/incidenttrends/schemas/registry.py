"""
Schema registry for versioning and discovery.

Provides centralized access to all schema definitions with version tracking.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

import pandera.pandas as pa

from incidenttrends.schemas.incident import IncidentSchema, YearlyRegionSummarySchema

if TYPE_CHECKING:
    import pandas as pd


class DataRole(Enum):
    """Classification of data products by their role in the pipeline."""

    INTERMEDIATE = "intermediate"  # Cleaned, not yet aggregated
    OUTPUT = "output"  # Handed to the reporting sink


@dataclass(frozen=True)
class SchemaInfo:
    """Metadata about a registered schema."""

    name: str
    schema: type[pa.DataFrameModel]
    version: str
    role: DataRole
    description: str


class SchemaRegistry:
    """Centralized registry for all data schemas."""

    _schemas: ClassVar[dict[str, SchemaInfo]] = {
        "incident": SchemaInfo(
            name="incident",
            schema=IncidentSchema,
            version="1.0.0",
            role=DataRole.INTERMEDIATE,
            description="Cleaned incidents projected to date and region",
        ),
        "yearly_region_summary": SchemaInfo(
            name="yearly_region_summary",
            schema=YearlyRegionSummarySchema,
            version="1.0.0",
            role=DataRole.OUTPUT,
            description="Incident counts per year and region",
        ),
    }

    @classmethod
    def get(cls, name: str) -> SchemaInfo:
        """
        Look up a schema by name.

        Raises:
            KeyError: If no schema is registered under that name.
        """
        if name not in cls._schemas:
            msg = f"Unknown schema: {name!r}. Available: {sorted(cls._schemas)}"
            raise KeyError(msg)
        return cls._schemas[name]

    @classmethod
    def list_schemas(cls, role: DataRole | None = None) -> list[SchemaInfo]:
        """List registered schemas, optionally filtered by role."""
        infos = list(cls._schemas.values())
        if role is not None:
            infos = [info for info in infos if info.role == role]
        return infos

    @classmethod
    def validate(cls, df: "pd.DataFrame", name: str) -> "pd.DataFrame":
        """
        Validate a DataFrame against a registered schema.

        Raises:
            pandera.errors.SchemaError: If validation fails.
        """
        return cls.get(name).schema.validate(df)
