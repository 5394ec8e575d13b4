import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from webresponse.api.exception_handlers import register_exception_handlers
from webresponse.errors import APIError
from webresponse.sink import ResponseRecorder
from webresponse.writers.csv import write_csv


class CallLogHeaders(dict):
    """Header mapping that logs every assignment into the owning sink."""

    def __init__(self, calls: list):
        super().__init__()
        self.calls = calls

    def __setitem__(self, key: str, value: str) -> None:
        self.calls.append(("header", key, value))
        super().__setitem__(key, value)


class CallLogSink:
    """Sink that keeps every header, status and body call in order."""

    def __init__(self):
        self.calls = []
        self.headers = CallLogHeaders(self.calls)

    def write_header(self, status_code: int) -> None:
        self.calls.append(("status", status_code))

    def write(self, data: bytes) -> int:
        self.calls.append(("write", bytes(data)))
        return len(data)


@pytest.fixture(scope="function")
def recorder() -> ResponseRecorder:
    """A fresh in-memory sink for each test."""
    return ResponseRecorder()


@pytest.fixture(scope="function")
def call_log() -> CallLogSink:
    """A sink that records the order of writer calls."""
    return CallLogSink()


@pytest.fixture(scope="function")
def app() -> FastAPI:
    """A small app exercising the error envelope handlers."""
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/items/{item_id}")
    def get_item(item_id: int):
        raise APIError(
            status.HTTP_404_NOT_FOUND,
            "not_found",
            "Item not found",
            data={"itemId": item_id},
        )

    @app.get("/conflict")
    def conflict():
        raise APIError(status.HTTP_409_CONFLICT, "duplicate_resource", "Already exists")

    @app.get("/broken")
    def broken():
        raise APIError(status.HTTP_400_BAD_REQUEST, "bad_request", "bad", data={"value": object()})

    @app.get("/export")
    def export():
        sink = ResponseRecorder()
        write_csv([["header1", "header2"], ["1", "2"]], sink, status.HTTP_200_OK)
        return sink.to_response()

    return app


@pytest.fixture(scope="function")
def client(app: FastAPI):
    """Create a test client for the fixture app."""
    yield TestClient(app)
