"""Simulation gateway: nonce reads and read-only fee simulation."""

from __future__ import annotations

import structlog
from pydantic import ValidationError

from feesim.errors import RpcError
from feesim.felt import parse_felt
from feesim.models import InvokeTransactionBase, SimulationResult
from feesim.rpc import RpcClient

logger = structlog.get_logger()


class SimulationGateway:
    """Talks to the node through an injected RpcClient.

    Each method makes exactly one RPC call and never retries. Anything that
    goes wrong, including a response that does not parse, surfaces as
    RpcError so the batch loop can skip the item.
    """

    def __init__(self, client: RpcClient) -> None:
        self.client = client

    def nonce_for(self, account: str | int) -> int:
        """Read the account's current nonce."""
        address = parse_felt(account, "account")
        nonce = self.client.get_nonce(address)
        logger.debug("nonce_fetched", account=hex(address), nonce=nonce)
        return nonce

    def simulate(self, tx: InvokeTransactionBase) -> SimulationResult:
        """Simulate a transaction and return its fee estimation.

        Raises:
            RpcError: If the call fails or the response is malformed
        """
        raw = self.client.simulate(tx)
        try:
            result = SimulationResult.model_validate(raw)
        except ValidationError as e:
            raise RpcError(
                f"Malformed simulation response: {e.error_count()} validation error(s)",
                data=raw,
            ) from e
        fee = result.fee_estimation
        if fee.l2_gas_consumed is not None:
            logger.debug(
                "l2_gas_reported",
                l2_gas_consumed=fee.l2_gas_consumed,
                l2_gas_price=fee.l2_gas_price,
                overall_fee=fee.overall_fee,
            )
        return result


__all__ = ["SimulationGateway"]
