import pytest
from pydantic import ValidationError

from webresponse.errors import MarshalError
from webresponse.schemas.error import new_error_response, new_error_response_with_data
from webresponse.writers.error import error, error_string, error_string_with_data, error_with_data
from webresponse.writers.json import JSON_CONTENT_TYPE

# ============================================================================
# ERROR RESPONSE MODEL TESTS
# ============================================================================


def test_new_error_response_fields():
    """The envelope carries the given status, code and message."""
    response = new_error_response(200, "error_code", "message")

    assert response.error.status_code == 200
    assert response.error.error_code == "error_code"
    assert response.error.message == "message"
    assert response.error.data is None


def test_new_error_response_omits_missing_data():
    response = new_error_response(200, "error_code", "message")

    assert response.model_dump(by_alias=True) == {
        "error": {"statusCode": 200, "errorCode": "error_code", "message": "message"}
    }
    assert response.model_dump_json(by_alias=True) == (
        '{"error":{"statusCode":200,"errorCode":"error_code","message":"message"}}'
    )


def test_new_error_response_with_data_keeps_data():
    response = new_error_response_with_data(502, "code", "message", {"additionalValue": 123})

    assert response.model_dump(by_alias=True)["error"]["data"] == {"additionalValue": 123}


def test_new_error_response_keeps_empty_data():
    """An explicitly supplied empty mapping is still data."""
    response = new_error_response_with_data(400, "code", "message", {})

    assert response.model_dump(by_alias=True)["error"]["data"] == {}


def test_error_result_is_immutable():
    response = new_error_response(400, "code", "message")

    with pytest.raises(ValidationError):
        response.error.message = "changed"


# ============================================================================
# ERROR WRITER TESTS
# ============================================================================


def test_error_from_exception(recorder):
    """Test that error() uses the exception text as the message."""
    error("test1", RuntimeError("test2"), recorder, 500)

    assert recorder.status_code == 500
    assert recorder.headers["Content-Type"] == JSON_CONTENT_TYPE
    assert recorder.text == '{"error":{"statusCode":500,"errorCode":"test1","message":"test2"}}'


def test_error_status_is_mirrored_in_envelope(recorder):
    error("test1", RuntimeError("test2"), recorder, 502)

    assert recorder.status_code == 502
    assert recorder.text == '{"error":{"statusCode":502,"errorCode":"test1","message":"test2"}}'


def test_error_with_data(recorder):
    """Test that auxiliary data is written after the message."""
    error_with_data("test with data", RuntimeError("test2"), {"additionalValue": 123}, recorder, 502)

    assert recorder.status_code == 502
    assert recorder.text == (
        '{"error":{"statusCode":502,"errorCode":"test with data","message":"test2",'
        '"data":{"additionalValue":123}}}'
    )


def test_error_string(recorder):
    error_string("not_found", "User not found", recorder, 404)

    assert recorder.status_code == 404
    assert recorder.text == '{"error":{"statusCode":404,"errorCode":"not_found","message":"User not found"}}'


def test_error_string_with_data(recorder):
    error_string_with_data("validation_error", "bad input", {"field": "email"}, recorder, 400)

    assert recorder.status_code == 400
    assert recorder.text == (
        '{"error":{"statusCode":400,"errorCode":"validation_error","message":"bad input",'
        '"data":{"field":"email"}}}'
    )


def test_error_with_unserializable_data_falls_back(recorder):
    """Data that cannot be serialized turns into the json_marshal envelope."""
    with pytest.raises(MarshalError):
        error_string_with_data("code", "message", {"value": object()}, recorder, 400)

    assert recorder.status_code == 500
    assert recorder.text == (
        '{"error":{"statusCode":500,"errorCode":"json_marshal","message":"failed to marshal JSON"}}'
    )
