"""Batch driver for swap fee simulation.

SwapFeeSimulator runs every input row through encode -> build -> simulate ->
aggregate, writing each successful record to the sink as soon as it is
produced. A row that fails to encode or simulate is logged and skipped;
the batch carries on with the next row.

The account nonce is read once per batch and shared by every row. Nothing is
broadcast, so the nonce never needs to advance between simulations.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

import structlog

from feesim.aggregate import to_record
from feesim.config import SimulatorConfig
from feesim.encoding import SwapCalldataEncoder
from feesim.errors import ParameterEncodingError, RpcError
from feesim.gateway import SimulationGateway
from feesim.io import RecordSink
from feesim.models import OutputRecord, SwapParameters
from feesim.transactions import TransactionVersion, build_transaction

logger = structlog.get_logger()


@dataclass
class ItemFailure:
    """A batch row that produced no record."""

    index: int
    params: SwapParameters
    error_kind: str
    message: str


@dataclass
class BatchSummary:
    """Outcome of a batch run."""

    total: int = 0
    succeeded: int = 0
    failures: list[ItemFailure] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failures)


class SwapFeeSimulator:
    """Simulates fees for a batch of swaps against one account.

    Args:
        gateway: Simulation gateway wrapping the node RPC
        config: Run configuration (sender, version, fee bounds, router)
        encoder: Calldata encoder. If None, one is built from config.router.
    """

    def __init__(
        self,
        gateway: SimulationGateway,
        config: SimulatorConfig | None = None,
        encoder: SwapCalldataEncoder | None = None,
    ) -> None:
        self.gateway = gateway
        self.config = config or SimulatorConfig()
        self.encoder = encoder or SwapCalldataEncoder(self.config.router)

    def simulate_one(self, params: SwapParameters, nonce: int) -> OutputRecord:
        """Simulate a single swap row.

        Raises:
            ParameterEncodingError: If the row (or fee config) is malformed
            RpcError: If the simulation call fails
        """
        config = self.config
        calldata = self.encoder.encode(
            params,
            beneficiary=config.beneficiary_address,
            integrator_recipient=config.integrator_recipient_address,
        )

        fees = config.fees
        if config.tx_version == TransactionVersion.V1:
            # The swept max fee comes from the row
            fees = replace(fees, max_fee=params.max_fee)

        tx = build_transaction(config.tx_version, config.account_address, nonce, calldata, fees)
        result = self.gateway.simulate(tx)
        return to_record(params, result)

    def run(self, inputs: Iterable[SwapParameters], sink: RecordSink) -> BatchSummary:
        """Simulate every row in order, writing successes to the sink.

        Raises:
            RpcError: If the batch nonce cannot be fetched
            SinkError: If a record cannot be written
        """
        config = self.config
        logger.info(
            "batch_started",
            tx_version=config.tx_version.value,
            account=config.account_address,
        )
        nonce = self.gateway.nonce_for(config.account_address)

        summary = BatchSummary()
        for index, params in enumerate(inputs):
            summary.total += 1
            try:
                record = self.simulate_one(params, nonce)
            except (ParameterEncodingError, RpcError) as e:
                logger.warning(
                    "simulation_failed",
                    index=index,
                    token_from=params.token_from,
                    token_to=params.token_to,
                    error_kind=type(e).__name__,
                    error=str(e),
                )
                summary.failures.append(
                    ItemFailure(
                        index=index,
                        params=params,
                        error_kind=type(e).__name__,
                        message=str(e),
                    )
                )
                continue

            sink.write(record)
            summary.succeeded += 1
            logger.info(
                "simulation_result",
                index=index,
                token_from=record.token_from,
                token_to=record.token_to,
                from_amount=record.from_amount,
                gas_consumed=record.gas_consumed,
                gas_price=record.gas_price,
                overall_fee=record.overall_fee,
            )

        logger.info(
            "batch_complete",
            total=summary.total,
            succeeded=summary.succeeded,
            failed=summary.failed,
        )
        return summary


__all__ = ["SwapFeeSimulator", "BatchSummary", "ItemFailure"]
