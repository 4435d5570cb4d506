"""Error taxonomy for log ingestion and analysis."""


class ErrorCodes:
    # Row-level (recovered locally)
    MALFORMED_ROW = "E.ROW.001"

    # Source-level (fatal)
    SOURCE_UNAVAILABLE = "E.SRC.001"


class ForensicError(Exception):
    """Base error carrying a stable error code."""
    code = "E.GEN.000"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"[{self.code}] {self.message}"


class MalformedRowError(ForensicError):
    """A log row with non-numeric or out-of-range numeric fields."""
    code = ErrorCodes.MALFORMED_ROW

    def __init__(self, line: str, reason: str, line_number: int = 0):
        super().__init__(f"Malformed row {line_number}: {reason}")
        self.line = line
        self.reason = reason
        self.line_number = line_number


class SourceUnavailableError(ForensicError):
    """The ingestion source cannot be opened or read."""
    code = ErrorCodes.SOURCE_UNAVAILABLE
