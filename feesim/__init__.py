"""Starknet swap fee simulator."""

from feesim.simulator import BatchSummary, SwapFeeSimulator

__version__ = "0.1.0"
__all__ = ["SwapFeeSimulator", "BatchSummary", "__version__"]
