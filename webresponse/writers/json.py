import json
import logging
from typing import Any

from fastapi import status
from pydantic_core import to_json

from webresponse.errors import JSON_MARSHAL, MarshalError
from webresponse.schemas.error import new_error_response
from webresponse.schemas.ok import OKResponse
from webresponse.sink import ResponseSink

JSON_CONTENT_TYPE = "application/json"

logger = logging.getLogger(__name__)


def _reject_constant(token: str) -> None:
    raise ValueError(f"json: unsupported value: {token}")


def marshal_json(value: Any) -> bytes:
    """
    Serialize a value to compact JSON using field aliases.

    Raises:
        MarshalError: If the value (or something inside it) has no JSON form
    """
    try:
        data = to_json(value, by_alias=True)
        # Non-finite floats come out as bare NaN/Infinity tokens, which are not JSON.
        if b"NaN" in data or b"Infinity" in data:
            json.loads(data, parse_constant=_reject_constant)
    except (TypeError, ValueError) as exc:
        raise MarshalError(JSON_MARSHAL, str(exc)) from exc
    return data


def write_json(value: Any, sink: ResponseSink, status_code: int) -> None:
    """
    Write a value as JSON to the sink.

    When the value cannot be serialized, a 500 json_marshal error envelope is
    written instead of the requested status and the MarshalError is re-raised.
    Callers catching it must not assume nothing reached the sink.
    """
    try:
        data = marshal_json(value)
    except MarshalError as exc:
        logger.warning(f"Failed to marshal JSON response body: {exc}")
        fallback = new_error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, JSON_MARSHAL, "failed to marshal JSON"
        )
        write_json(fallback, sink, status.HTTP_500_INTERNAL_SERVER_ERROR)
        raise
    sink.headers["Content-Type"] = JSON_CONTENT_TYPE
    sink.write_header(status_code)
    sink.write(data)


def ok(value: bool, sink: ResponseSink, status_code: int) -> None:
    """Write ``{"ok": value}`` as JSON."""
    write_json(OKResponse(ok=value), sink, status_code)
