"""Tests for the CSV output sink."""

import csv

import pytest

from feesim.errors import SinkError
from feesim.io import CsvRecordSink
from feesim.models import OutputRecord


def make_record(ticks: str = "3", data_gas: str | None = None) -> OutputRecord:
    return OutputRecord(
        token_from="0xAA",
        token_to="0xBB",
        from_amount="0x64",
        data_gas_consumed=data_gas,
        gas_consumed="100",
        gas_price="10",
        overall_fee="1000",
        ticks_crossed=ticks,
    )


def read_rows(path) -> list[list[str]]:
    with open(path, newline="") as f:
        return list(csv.reader(f))


class TestCsvRecordSink:
    def test_header_and_rows(self, tmp_path):
        path = tmp_path / "out.csv"
        with CsvRecordSink(path) as sink:
            sink.write(make_record("1"))
            sink.write(make_record("2"))

        assert read_rows(path) == [
            ["token_from", "token_to", "from_amount", "gas_consumed", "gas_price",
             "overall_fee", "ticks_crossed"],
            ["0xAA", "0xBB", "0x64", "100", "10", "1000", "1"],
            ["0xAA", "0xBB", "0x64", "100", "10", "1000", "2"],
        ]

    def test_flushed_after_each_row(self, tmp_path):
        """Rows are on disk before the sink is closed."""
        path = tmp_path / "out.csv"
        with CsvRecordSink(path) as sink:
            sink.write(make_record())
            assert len(read_rows(path)) == 2

    def test_header_only_when_empty(self, tmp_path):
        path = tmp_path / "out.csv"
        with CsvRecordSink(path):
            pass
        assert len(read_rows(path)) == 1

    def test_data_gas_column(self, tmp_path):
        path = tmp_path / "out.csv"
        with CsvRecordSink(path, include_data_gas=True) as sink:
            sink.write(make_record(data_gas="64"))
            sink.write(make_record())

        rows = read_rows(path)
        assert rows[0][3] == "data_gas_consumed"
        assert rows[1][3] == "64"
        assert rows[2][3] == ""

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(SinkError, match="Cannot open"):
            CsvRecordSink(tmp_path / "missing" / "out.csv").open()

    def test_write_before_open(self, tmp_path):
        with pytest.raises(SinkError, match="not open"):
            CsvRecordSink(tmp_path / "out.csv").write(make_record())
