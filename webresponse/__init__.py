"""Helpers for writing HTTP responses in consistent formats.

Every writer takes the value to send, a sink (see ``webresponse.sink``) and
the status code to commit.
"""

from webresponse.errors import (
    CSV_WRITE,
    JSON_MARSHAL,
    XML_MARSHAL,
    APIError,
    MarshalError,
    ResponseError,
)
from webresponse.schemas.error import (
    ErrorResponse,
    ErrorResult,
    new_error_response,
    new_error_response_with_data,
)
from webresponse.schemas.ok import OKResponse
from webresponse.schemas.pagination import ListResponse, new_list
from webresponse.sink import ResponseRecorder, ResponseSink
from webresponse.writers.csv import CSV_CONTENT_TYPE, write_csv
from webresponse.writers.error import error, error_string, error_string_with_data, error_with_data
from webresponse.writers.json import JSON_CONTENT_TYPE, marshal_json, ok, write_json
from webresponse.writers.redirect import redirect
from webresponse.writers.xml import XML_CONTENT_TYPE, marshal_xml, write_xml

__all__ = [
    "CSV_WRITE",
    "JSON_MARSHAL",
    "XML_MARSHAL",
    "APIError",
    "MarshalError",
    "ResponseError",
    "ErrorResponse",
    "ErrorResult",
    "new_error_response",
    "new_error_response_with_data",
    "OKResponse",
    "ListResponse",
    "new_list",
    "ResponseRecorder",
    "ResponseSink",
    "CSV_CONTENT_TYPE",
    "write_csv",
    "error",
    "error_string",
    "error_string_with_data",
    "error_with_data",
    "JSON_CONTENT_TYPE",
    "marshal_json",
    "ok",
    "write_json",
    "redirect",
    "XML_CONTENT_TYPE",
    "marshal_xml",
    "write_xml",
]
