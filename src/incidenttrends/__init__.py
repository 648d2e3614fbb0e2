"""
incident-trends: descriptive analysis of public incident data.

This package provides loading, cleaning, and aggregation of the NYPD
shooting incident dataset into yearly and per-borough counts.
"""

from importlib.metadata import version

__version__ = version("incident-trends")

__all__ = ["__version__"]
