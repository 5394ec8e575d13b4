"""Output sinks the response writers write into.

A sink accepts headers, exactly one status commit and any number of body
writes. Writers never own, pool or close the sink they are given; one sink
is expected to serve a single response from a single writer.
"""

import logging
from collections.abc import MutableMapping
from typing import Protocol, runtime_checkable

from fastapi import Response, status
from starlette.datastructures import MutableHeaders

logger = logging.getLogger(__name__)


class RecordedHeaders(MutableHeaders):
    """
    Case-insensitive header map that accepts any text as a value.

    Values are stored as their UTF-8 bytes, so raw URLs and other non-latin-1
    text survive until the response is sent.
    """

    def __setitem__(self, key: str, value: str) -> None:
        super().__setitem__(key, value.encode("utf-8").decode("latin-1"))

    def __getitem__(self, key: str) -> str:
        return super().__getitem__(key).encode("latin-1").decode("utf-8")


@runtime_checkable
class ResponseSink(Protocol):
    """Destination for a single HTTP response."""

    headers: MutableMapping[str, str]

    def write_header(self, status_code: int) -> None: ...

    def write(self, data: bytes) -> int: ...


class ResponseRecorder:
    """
    In-memory sink that records what a writer produced.

    Behaves like a server response writer:
    - the status defaults to 200 and can only be committed once
    - writing a body before committing a status commits 200
    """

    def __init__(self) -> None:
        self.headers = RecordedHeaders()
        self.status_code = status.HTTP_200_OK
        self.body = bytearray()
        self.wrote_header = False

    def write_header(self, status_code: int) -> None:
        if self.wrote_header:
            logger.warning(
                f"Superfluous write_header call: status {self.status_code} already committed, "
                f"ignoring {status_code}"
            )
            return
        self.status_code = status_code
        self.wrote_header = True

    def write(self, data: bytes) -> int:
        if not self.wrote_header:
            self.write_header(status.HTTP_200_OK)
        self.body.extend(data)
        return len(data)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")

    def to_response(self) -> Response:
        """Convert the recording into a response a FastAPI handler can return."""
        headers = {key.decode("latin-1"): value.decode("latin-1") for key, value in self.headers.raw}
        return Response(content=bytes(self.body), status_code=self.status_code, headers=headers)
