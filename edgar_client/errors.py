"""Error types raised by the EDGAR client."""


class EdgarError(Exception):
    """Base class for all errors raised by edgar_client."""


class InvalidCikError(EdgarError, ValueError):
    """Raised when a CIK cannot be normalized to 10 digits."""

    def __init__(self, cik: str, reason: str) -> None:
        super().__init__(f"Invalid CIK '{cik}': {reason}")
        self.cik = cik
        self.reason = reason


class TransportError(EdgarError):
    """
    Network or HTTP failure reported by the transport.

    Attributes:
        status: HTTP status code, or None when no response was received
        message: Human-readable description of the failure
    """

    def __init__(self, status: int | None, message: str) -> None:
        super().__init__(f"HTTP {status}: {message}" if status is not None else message)
        self.status = status
        self.message = message


class DeserializationError(EdgarError):
    """Response bytes do not match the shape expected for an endpoint."""

    def __init__(self, endpoint: str, message: str) -> None:
        super().__init__(f"Could not decode {endpoint} response: {message}")
        self.endpoint = endpoint
        self.message = message


class AggregationError(EdgarError):
    """A continuation file could not be fetched while merging filing history."""

    def __init__(self, filename: str, cause: EdgarError) -> None:
        super().__init__(f"Failed to fetch continuation file '{filename}': {cause}")
        self.filename = filename
        self.cause = cause


class EmptyStatisticsError(EdgarError):
    """
    Statistics were requested over an empty frame.

    count and sum are well defined for an empty frame and are exposed here;
    mean, min and max are not.
    """

    count = 0
    sum = 0.0

    def __init__(self) -> None:
        super().__init__("Cannot compute mean, min or max of an empty frame")
