"""Projection of a simulation outcome onto an output record."""

from __future__ import annotations

from feesim.models import OutputRecord, SimulationResult, SwapParameters


def to_record(params: SwapParameters, result: SimulationResult) -> OutputRecord:
    """Combine an input row with its fee estimation.

    Fee figures are rendered as decimal strings. Input fields are passed
    through unchanged; the sell amount becomes ``from_amount``.
    """
    fee = result.fee_estimation
    return OutputRecord(
        token_from=params.token_from,
        token_to=params.token_to,
        from_amount=params.token_from_low,
        data_gas_consumed=(
            str(fee.data_gas_consumed) if fee.data_gas_consumed is not None else None
        ),
        gas_consumed=str(fee.gas_consumed),
        gas_price=str(fee.gas_price),
        overall_fee=str(fee.overall_fee),
        ticks_crossed=params.ticks_crossed,
    )


__all__ = ["to_record"]
