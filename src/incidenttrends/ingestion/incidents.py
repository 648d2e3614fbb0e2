"""
Incident table ingestion.

Reads the incident CSV from an HTTP(S) URL or a local path. Every column
is read as text so the raw table stays exactly as delivered.
"""

import io
from pathlib import Path

import pandas as pd
import requests

from incidenttrends.config.settings import SourceConfig
from incidenttrends.errors import FetchError, ParseError
from incidenttrends.ingestion.base import DataLoader
from incidenttrends.schemas.raw import RAW_COLUMNS
from incidenttrends.utils.logging import get_logger

log = get_logger(__name__)


def is_remote(source: str) -> bool:
    """Whether a source identifier is an HTTP(S) URL."""
    return source.lower().startswith(("http://", "https://"))


class IncidentLoader(DataLoader):
    """Loader for the raw incident CSV."""

    expected_columns = tuple(RAW_COLUMNS)

    def __init__(self, source: SourceConfig) -> None:
        """
        Initialize incident loader.

        Args:
            source: Source configuration (location and raw column names).
        """
        self.source = source
        self.required_columns = (source.date_column, source.region_column)

    def _load_raw(self) -> pd.DataFrame:
        if is_remote(self.source.url):
            buffer = io.StringIO(self._fetch_text())
            return self._parse(buffer, self.source.url)
        return self._read_file(Path(self.source.url))

    def _fetch_text(self) -> str:
        """Download the source in a single attempt."""
        url = self.source.url
        log.info("Downloading incidents", url=url, timeout=self.source.timeout_seconds)

        try:
            with requests.get(url, timeout=self.source.timeout_seconds) as response:
                response.raise_for_status()
                content = response.content
        except requests.RequestException as e:
            msg = f"Failed to fetch {url}: {e}"
            raise FetchError(msg) from e

        # Always UTF-8, as for local files
        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError as e:
            msg = f"Malformed CSV in {url}: {e}"
            raise ParseError(msg) from e

        log.info("Downloaded incidents", url=url, chars=len(text))
        return text

    def _read_file(self, path: Path) -> pd.DataFrame:
        if not path.exists():
            msg = f"Incident file not found: {path}"
            raise FetchError(msg)
        if not path.is_file():
            msg = f"Incident source is not a file: {path}"
            raise FetchError(msg)

        log.info("Reading incidents", path=str(path))
        try:
            with path.open(encoding="utf-8", newline="") as f:
                return self._parse(f, str(path))
        except OSError as e:
            msg = f"Failed to read {path}: {e}"
            raise FetchError(msg) from e

    def _parse(self, buffer: io.TextIOBase, origin: str) -> pd.DataFrame:
        try:
            df = pd.read_csv(buffer, dtype=str)
        except pd.errors.EmptyDataError as e:
            msg = f"Source is empty: {origin}"
            raise ParseError(msg) from e
        except (pd.errors.ParserError, UnicodeDecodeError) as e:
            msg = f"Malformed CSV in {origin}: {e}"
            raise ParseError(msg) from e

        df.columns = [str(col).strip() for col in df.columns]
        return df


def load_incidents(
    source: SourceConfig | str, *, validate: bool = True
) -> pd.DataFrame:
    """
    Convenience function to load the raw incident table.

    Args:
        source: Source configuration, or a bare URL or path read with
            the default column names.
        validate: Whether to check the column layout.

    Returns:
        DataFrame of raw records, all values as text.
    """
    if isinstance(source, str):
        source = SourceConfig(url=source)
    loader = IncidentLoader(source)
    return loader.load(validate=validate)
