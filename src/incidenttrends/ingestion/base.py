"""
Base classes and utilities for data ingestion.

Provides common functionality for all data loaders.
"""

from abc import ABC, abstractmethod

import pandas as pd

from incidenttrends.errors import ParseError
from incidenttrends.utils.logging import get_logger

log = get_logger(__name__)


class DataLoader(ABC):
    """
    Abstract base class for data loaders.

    Subclasses fetch and parse a source; this class checks the column
    layout of the result so every loader fails the same way.
    """

    #: Columns without which the table is unusable.
    required_columns: tuple[str, ...] = ()
    #: Columns the source documents; absent ones are only logged.
    expected_columns: tuple[str, ...] = ()

    @abstractmethod
    def _load_raw(self) -> pd.DataFrame:
        """Load raw data from source. Implemented by subclasses."""
        ...

    def load(self, *, validate: bool = True) -> pd.DataFrame:
        """
        Load and optionally check the column layout.

        Args:
            validate: Whether to check required and expected columns.

        Returns:
            Loaded DataFrame.

        Raises:
            FetchError: If the source cannot be read.
            ParseError: If the content is malformed or lacks required columns.
        """
        log.info("Loading data", loader=self.__class__.__name__)

        df = self._load_raw()
        log.info("Loaded raw data", rows=len(df), columns=len(df.columns))

        if validate:
            self._check_columns(df)

        return df

    def _check_columns(self, df: pd.DataFrame) -> None:
        missing = [col for col in self.required_columns if col not in df.columns]
        if missing:
            msg = f"Missing required columns: {missing}"
            raise ParseError(msg)

        absent = [col for col in self.expected_columns if col not in df.columns]
        if absent:
            log.warning("Documented columns absent", missing=absent)
