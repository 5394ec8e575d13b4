import csv
import io
import logging
from collections.abc import Iterable, Sequence

from webresponse.core.config import settings
from webresponse.errors import CSV_WRITE, MarshalError
from webresponse.sink import ResponseSink

CSV_CONTENT_TYPE = "text/csv"

logger = logging.getLogger(__name__)


def _check_row(index: int, row: Sequence[str]) -> list[str]:
    if isinstance(row, (str, bytes)):
        raise TypeError(f"csv: row {index} is a {type(row).__name__}, expected a sequence of str")
    cells = list(row)
    for column, cell in enumerate(cells):
        if not isinstance(cell, str):
            raise TypeError(
                f"csv: row {index} column {column} is a {type(cell).__name__}, expected str"
            )
    return cells


def write_csv(rows: Iterable[Sequence[str]], sink: ResponseSink, status_code: int) -> None:
    """
    Write a grid of string cells as CSV to the sink.

    Cells containing the delimiter, a quote, \\r or \\n are quoted. A row made of
    a single empty cell is written as an empty line.

    The content type and status are committed before any row is written, so a
    failing row cannot be turned into an error envelope: rows written so far
    are flushed to the sink and a MarshalError is raised to the caller.
    """
    sink.headers["Content-Type"] = CSV_CONTENT_TYPE
    sink.write_header(status_code)

    terminator = settings.csv_line_terminator
    buffer = io.StringIO()
    # Rows are rendered with \r\n so both \r and \n force quoting, then the
    # terminator is swapped for the configured one.
    row_buffer = io.StringIO()
    writer = csv.writer(
        row_buffer,
        delimiter=settings.csv_delimiter,
        lineterminator="\r\n",
        quoting=csv.QUOTE_MINIMAL,
    )
    try:
        for index, row in enumerate(rows):
            cells = _check_row(index, row)
            if cells == [""]:
                buffer.write(terminator)
                continue
            row_buffer.seek(0)
            row_buffer.truncate()
            writer.writerow(cells)
            buffer.write(row_buffer.getvalue()[:-2] + terminator)
    except (csv.Error, TypeError) as exc:
        logger.warning(f"Failed to write CSV response body: {exc}")
        raise MarshalError(CSV_WRITE, str(exc)) from exc
    finally:
        sink.write(buffer.getvalue().encode("utf-8"))
