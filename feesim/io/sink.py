"""Output sinks for simulated fee records."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import IO, Any, Protocol

from feesim.errors import SinkError
from feesim.models import OutputRecord


class RecordSink(Protocol):
    """Append-only destination for output records."""

    def write(self, record: OutputRecord) -> None:
        """Append one record. Must be durable once this returns."""
        ...


class CsvRecordSink:
    """CSV file sink with a fixed header, flushed after every row.

    Usage:
        with CsvRecordSink("results.csv") as sink:
            sink.write(record)
    """

    def __init__(self, path: str | Path, include_data_gas: bool = False) -> None:
        self.path = Path(path)
        self.include_data_gas = include_data_gas
        self._file: IO[str] | None = None
        self._writer: Any = None

    def open(self) -> None:
        """Create (or truncate) the file and write the header row.

        Raises:
            SinkError: If the file cannot be created or written
        """
        try:
            self._file = open(self.path, "w", newline="")
            self._writer = csv.writer(self._file)
            self._writer.writerow(OutputRecord.header(self.include_data_gas))
            self._file.flush()
        except OSError as e:
            raise SinkError(f"Cannot open output {self.path}: {e}") from e

    def write(self, record: OutputRecord) -> None:
        """Append a record and flush it to disk.

        Raises:
            SinkError: If the sink is not open or the write fails
        """
        if self._file is None or self._writer is None:
            raise SinkError(f"Output {self.path} is not open")
        try:
            self._writer.writerow(record.as_row(self.include_data_gas))
            self._file.flush()
        except OSError as e:
            raise SinkError(f"Cannot write to output {self.path}: {e}") from e

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
            self._writer = None

    def __enter__(self) -> CsvRecordSink:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["RecordSink", "CsvRecordSink"]
