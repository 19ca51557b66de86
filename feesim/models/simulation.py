"""Pydantic models for simulation responses.

Nodes report fee figures in different shapes depending on their RPC
version: hex strings or decimal strings, with or without data gas, and from
RPC 0.8 onwards with ``l1_`` prefixed names. These models normalize all of
them into one FeeEstimation.

On RPC 0.8 nodes ``gas_consumed`` and ``gas_price`` hold the L1 gas figures.
L2 gas is priced separately, so it is kept in its own ``l2_gas_*`` fields
rather than folded into ``gas_consumed``; ``overall_fee`` covers both.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from feesim.felt import parse_felt


def _parse_amount(value: Any) -> int:
    return parse_felt(value, "fee_estimation", max_value=None)


# Non-negative arbitrary-precision integer, accepted as hex, decimal or int
Amount = Annotated[int, BeforeValidator(_parse_amount)]

# RPC 0.8 field names -> canonical names
_L1_PREFIXED_FIELDS = {
    "l1_gas_consumed": "gas_consumed",
    "l1_gas_price": "gas_price",
    "l1_data_gas_consumed": "data_gas_consumed",
    "l1_data_gas_price": "data_gas_price",
}


class FeeEstimation(BaseModel):
    """Projected cost of a simulated transaction."""

    gas_consumed: Amount
    gas_price: Amount
    overall_fee: Amount
    data_gas_consumed: Amount | None = None
    data_gas_price: Amount | None = None
    l2_gas_consumed: Amount | None = None
    l2_gas_price: Amount | None = None
    unit: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _map_l1_prefixed_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "gas_consumed" in data:
            return data
        mapped = dict(data)
        for source, target in _L1_PREFIXED_FIELDS.items():
            if source in mapped and target not in mapped:
                mapped[target] = mapped[source]
        return mapped


class SimulationResult(BaseModel):
    """Fee estimation plus the node's execution trace.

    The trace is kept for diagnostics and never interpreted.
    """

    fee_estimation: FeeEstimation
    trace: Any = Field(
        default=None,
        validation_alias=AliasChoices("trace", "transaction_trace"),
    )

    model_config = ConfigDict(frozen=True, extra="ignore")
