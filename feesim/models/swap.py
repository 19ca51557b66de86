"""Pydantic models for the batch input and output rows."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class SwapParameters(BaseModel):
    """One row of the simulation sweep.

    All fields are numeric literals kept as strings so they can be passed
    through to the output unchanged. Amount fields hold the low 128 bits of
    a u256; the high half is always zero.
    """

    max_fee: StrictStr = Field(description="V1 max fee bound (hex or decimal).")
    token_from: StrictStr = Field(description="Address of the token being sold.")
    token_from_low: StrictStr = Field(description="Low 128 bits of the sell amount.")
    token_to: StrictStr = Field(description="Address of the token being bought.")
    token_to_min_low: StrictStr = Field(description="Low 128 bits of the minimum receive amount.")
    price_distance: StrictStr = Field(description="Slippage bound for the pool hop.")
    ticks_crossed: StrictStr = Field(description="Informational only, never sent on-chain.")

    model_config = ConfigDict(frozen=True, extra="forbid")


# Column order of the output sink
RECORD_FIELDS = (
    "token_from",
    "token_to",
    "from_amount",
    "data_gas_consumed",
    "gas_consumed",
    "gas_price",
    "overall_fee",
    "ticks_crossed",
)


class OutputRecord(BaseModel):
    """Fee figures for one successfully simulated swap."""

    token_from: str
    token_to: str
    from_amount: str
    data_gas_consumed: str | None = None
    gas_consumed: str
    gas_price: str
    overall_fee: str
    ticks_crossed: str

    model_config = ConfigDict(frozen=True)

    @staticmethod
    def header(include_data_gas: bool = False) -> list[str]:
        """Column names, optionally including data_gas_consumed."""
        if include_data_gas:
            return list(RECORD_FIELDS)
        return [name for name in RECORD_FIELDS if name != "data_gas_consumed"]

    def as_row(self, include_data_gas: bool = False) -> list[str]:
        """Values in header order. A missing data_gas_consumed becomes ''."""
        values = self.model_dump()
        return [
            values[name] if values[name] is not None else ""
            for name in self.header(include_data_gas)
        ]
