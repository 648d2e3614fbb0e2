"""
Data ingestion layer for loading the raw incident table.

All raw data loading happens through this module so that fetch and
parse failures are reported consistently at the system boundary.
"""

from incidenttrends.ingestion.base import DataLoader
from incidenttrends.ingestion.incidents import IncidentLoader, load_incidents

__all__ = ["DataLoader", "IncidentLoader", "load_incidents"]
