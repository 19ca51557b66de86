"""Batch input loading and output sinks."""

from .inputs import load_swap_parameters, parse_swap_parameters
from .sink import CsvRecordSink, RecordSink

__all__ = [
    "load_swap_parameters",
    "parse_swap_parameters",
    "RecordSink",
    "CsvRecordSink",
]
