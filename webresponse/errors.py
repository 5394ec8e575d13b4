"""Exceptions raised by the response writers."""

from typing import Any

# Stable, machine-readable error codes for API consumers.
JSON_MARSHAL = "json_marshal"
XML_MARSHAL = "xml_marshal"
CSV_WRITE = "csv_write"


class ResponseError(Exception):
    """Base exception for response construction errors."""

    pass


class MarshalError(ResponseError):
    """Raised when a value cannot be converted to the target wire format."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class APIError(ResponseError):
    """Raised from request handlers to answer with a standard error envelope."""

    def __init__(
        self,
        status_code: int,
        error_code: str,
        message: str,
        data: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.data = data
