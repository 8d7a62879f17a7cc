"""Exceptions raised while decoding a mod_status scoreboard."""


class WorkerScoreParseError(Exception):
    """Base exception for scoreboard parse errors.

    ``row_html`` holds the markup of the offending table row when the error
    was raised while decoding a data row.
    """

    def __init__(self, message: str, row_html: str | None = None):
        super().__init__(message)
        self.row_html = row_html


class InvalidHeadersError(WorkerScoreParseError):
    """Header row does not match a known column layout."""

    def __init__(self, headers: list[str] | None = None):
        super().__init__("invalid headers")
        self.headers = headers or []


class InvalidCellCountError(WorkerScoreParseError):
    """Data row has neither 14 nor 15 cells."""

    def __init__(self, row_html: str):
        super().__init__(f"invalid cell count: {row_html}", row_html=row_html)


class StatusCodeMustBeCharError(WorkerScoreParseError):
    """The "M" column is not exactly one character."""

    def __init__(self, value: str):
        super().__init__(f"status code must be exactly one character long: `{value}`")
        self.value = value


class InvalidStatusCodeError(WorkerScoreParseError):
    """The "M" column holds an unknown status character."""

    def __init__(self, code: str):
        super().__init__(f"invalid status code `{code}`")
        self.code = code


class AccessCountsInvalidFieldCountError(WorkerScoreParseError):
    """The "Acc" column is not three slash-separated values."""

    def __init__(self, value: str):
        super().__init__(f"invalid field count when parsing `{value}`, expected `1/2/3`")
        self.value = value


class SrvFieldUnknownFormatError(WorkerScoreParseError):
    """The "Srv" column is not two dash-separated values."""

    def __init__(self, value: str):
        super().__init__(f'the "Srv" column is not in format `x-x`: `{value}`')
        self.value = value


class ParseIntError(WorkerScoreParseError):
    """Text could not be converted to an integer."""

    pass


class ParseFloatError(WorkerScoreParseError):
    """Text could not be converted to a float."""

    pass
