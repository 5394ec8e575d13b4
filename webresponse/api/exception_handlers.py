"""Exception handlers that render APIError through the standard error envelope."""

import logging

from fastapi import FastAPI, Request, Response

from webresponse.errors import APIError, MarshalError
from webresponse.sink import ResponseRecorder
from webresponse.writers.error import error_string_with_data

logger = logging.getLogger(__name__)


def api_error_handler(_request: Request, exc: APIError) -> Response:
    recorder = ResponseRecorder()
    try:
        error_string_with_data(exc.error_code, exc.message, exc.data, recorder, exc.status_code)
    except MarshalError:
        # The recorder already holds the json_marshal fallback envelope.
        logger.exception(f"Failed to render {exc.error_code} error response")
    return recorder.to_response()


def register_exception_handlers(app: FastAPI) -> None:
    """Register the error envelope handlers on the FastAPI app."""
    app.add_exception_handler(APIError, api_error_handler)
