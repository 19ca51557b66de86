"""Loading the batch of swap parameters from JSON."""

from __future__ import annotations

import json
from pathlib import Path

import structlog
from pydantic import TypeAdapter, ValidationError

from feesim.errors import BatchLoadError
from feesim.models import SwapParameters

logger = structlog.get_logger()

_BATCH_ADAPTER = TypeAdapter(list[SwapParameters])


def parse_swap_parameters(data: object) -> list[SwapParameters]:
    """Validate already-decoded JSON as a list of swap rows.

    Raises:
        BatchLoadError: If any row is malformed (the whole batch is rejected)
    """
    try:
        return _BATCH_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise BatchLoadError(f"Invalid swap parameters: {e}") from e


def load_swap_parameters(path: str | Path) -> list[SwapParameters]:
    """Read every swap row from a JSON file.

    The file must hold a JSON array of objects with the seven string fields
    of SwapParameters.

    Raises:
        BatchLoadError: If the file cannot be read, is not valid JSON, or
            contains a malformed row
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = json.load(f)
    except OSError as e:
        raise BatchLoadError(f"Cannot read inputs from {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise BatchLoadError(f"Inputs file {path} is not valid JSON: {e}") from e

    inputs = parse_swap_parameters(data)
    logger.info("inputs_loaded", path=str(path), count=len(inputs))
    return inputs


__all__ = ["load_swap_parameters", "parse_swap_parameters"]
