from webresponse.sink import ResponseSink


def redirect(url: str, sink: ResponseSink, status_code: int) -> None:
    """Redirect the client to url. The URL is sent as given, without validation."""
    sink.headers["Location"] = url
    sink.write_header(status_code)
    sink.write(b"")
