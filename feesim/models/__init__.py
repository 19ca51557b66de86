"""Data models for swap fee simulation."""

from feesim.models.simulation import FeeEstimation, SimulationResult
from feesim.models.swap import RECORD_FIELDS, OutputRecord, SwapParameters
from feesim.models.transaction import (
    DataAvailabilityMode,
    InvokeTransactionBase,
    InvokeTransactionV1,
    InvokeTransactionV3,
    ResourceBounds,
    ResourceBoundsMapping,
    Transaction,
)

__all__ = [
    # Batch rows
    "SwapParameters",
    "OutputRecord",
    "RECORD_FIELDS",
    # Transactions
    "DataAvailabilityMode",
    "ResourceBounds",
    "ResourceBoundsMapping",
    "InvokeTransactionBase",
    "InvokeTransactionV1",
    "InvokeTransactionV3",
    "Transaction",
    # Simulation
    "FeeEstimation",
    "SimulationResult",
]
