"""
Error taxonomy for the incident pipeline.

Every stage fails fast: errors propagate to the caller and abort the run.
"""


class IncidentPipelineError(Exception):
    """Base class for all pipeline errors."""


class FetchError(IncidentPipelineError):
    """The source could not be fetched (network or file I/O failure)."""


class ParseError(IncidentPipelineError):
    """The source content is not a well-formed incident table."""


class DateParseError(ParseError):
    """A record's date does not match the expected format."""

    def __init__(self, row: object, value: object, n_invalid: int = 1) -> None:
        self.row = row
        self.value = value
        self.n_invalid = n_invalid
        msg = f"Unparseable date {value!r} in row {row}"
        if n_invalid > 1:
            msg += f" ({n_invalid} rows failed)"
        super().__init__(msg)
