"""Error classes for the fee simulation pipeline.

Item-level errors (ParameterEncodingError, RpcError) are caught by the batch
loop and reported. Run-level errors (BatchLoadError, SinkError) abort the run.
"""

from __future__ import annotations

from typing import Any


class FeeSimError(Exception):
    """Base error for fee simulation operations."""

    pass


class ParameterEncodingError(FeeSimError, ValueError):
    """A numeric literal is malformed or does not fit its target width."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for '{field}': {value!r} ({reason})")


class RpcError(FeeSimError):
    """The node RPC call failed (transport, protocol, or remote rejection)."""

    def __init__(
        self,
        message: str,
        code: int | None = None,
        data: Any = None,
    ) -> None:
        self.message = message
        self.code = code
        self.data = data
        super().__init__(message if code is None else f"{message} (code {code})")


class BatchLoadError(FeeSimError):
    """The input batch could not be read or parsed."""

    pass


class SinkError(FeeSimError):
    """The output sink could not be opened or written."""

    pass


__all__ = [
    "FeeSimError",
    "ParameterEncodingError",
    "RpcError",
    "BatchLoadError",
    "SinkError",
]
