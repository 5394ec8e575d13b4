from typing import Any

from webresponse.schemas.error import new_error_response
from webresponse.sink import ResponseSink
from webresponse.writers.json import write_json


def error(code: str, err: BaseException, sink: ResponseSink, status_code: int) -> None:
    """Write an error envelope whose message is the exception's text."""
    error_with_data(code, err, None, sink, status_code)


def error_with_data(
    code: str,
    err: BaseException,
    data: dict[str, Any] | None,
    sink: ResponseSink,
    status_code: int,
) -> None:
    error_string_with_data(code, str(err), data, sink, status_code)


def error_string(code: str, message: str, sink: ResponseSink, status_code: int) -> None:
    """Write an error envelope with a plain message."""
    error_string_with_data(code, message, None, sink, status_code)


def error_string_with_data(
    code: str,
    message: str,
    data: dict[str, Any] | None,
    sink: ResponseSink,
    status_code: int,
) -> None:
    """
    Write a standard error envelope as JSON.

    The envelope's statusCode mirrors the response status.
    """
    response = new_error_response(status_code, code, message, data)
    write_json(response, sink, status_code)
