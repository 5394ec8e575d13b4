"""Standardized error response schema.

Serialized form::

    {"error": {"statusCode": 404, "errorCode": "not_found", "message": "User not found"}}

``data`` is only present when auxiliary data was supplied.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel


class ErrorResult(BaseModel):
    """A single reportable failure."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        ser_json_inf_nan="constants",
    )

    status_code: int
    error_code: str
    message: str
    data: dict[str, Any] | None = None

    @model_serializer(mode="wrap")
    def omit_missing_data(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        payload = handler(self)
        if self.data is None:
            payload.pop("data", None)
        return payload


class ErrorResponse(BaseModel):
    """Standard error body wrapping exactly one ErrorResult."""

    model_config = ConfigDict(frozen=True)

    error: ErrorResult


def new_error_response(
    status_code: int,
    error_code: str,
    message: str,
    data: dict[str, Any] | None = None,
) -> ErrorResponse:
    """Create a standard error response."""
    return ErrorResponse(
        error=ErrorResult(
            status_code=status_code,
            error_code=error_code,
            message=message,
            data=data,
        )
    )


def new_error_response_with_data(
    status_code: int, error_code: str, message: str, data: dict[str, Any]
) -> ErrorResponse:
    """Create a standard error response carrying auxiliary data."""
    return new_error_response(status_code, error_code, message, data)
