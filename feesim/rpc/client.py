"""Starknet JSON-RPC transport.

RpcClient is the capability the simulation gateway depends on, so tests can
swap in a stub. StarknetRpcClient implements it over HTTP with httpx.
Every call is bounded by a timeout and never retried.
"""

from __future__ import annotations

import itertools
from collections.abc import Mapping
from typing import Any, Protocol

import httpx
import structlog

from feesim.errors import RpcError
from feesim.felt import parse_felt, to_hex
from feesim.models import InvokeTransactionBase

logger = structlog.get_logger()

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_BLOCK_ID = "latest"

# Block tags accepted in place of a block hash/number
BLOCK_TAGS = {"latest", "pending", "pre_confirmed", "l1_accepted"}


class RpcClient(Protocol):
    """Protocol for node RPC implementations.

    This allows swapping between the HTTP client and stubs for testing.
    """

    def get_nonce(self, address: int) -> int:
        """Return the current nonce of an account."""
        ...

    def simulate(self, transaction: InvokeTransactionBase) -> Mapping[str, Any]:
        """Simulate one transaction.

        Returns:
            Mapping with ``fee_estimation`` and a trace entry
        """
        ...


def block_id_param(block_id: str | int) -> str | dict[str, Any]:
    """Convert a block tag, number or hash into a JSON-RPC block_id."""
    if isinstance(block_id, int):
        return {"block_number": block_id}
    if block_id in BLOCK_TAGS:
        return block_id
    if block_id.startswith("0x"):
        return {"block_hash": block_id}
    if block_id.isdigit():
        return {"block_number": int(block_id)}
    raise ValueError(f"Invalid block id: {block_id!r}")


class StarknetRpcClient:
    """JSON-RPC client for a Starknet full node.

    Usage:
        with StarknetRpcClient("https://sepolia.juno.avnu.fi") as client:
            nonce = client.get_nonce(account)
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        block_id: str | int = DEFAULT_BLOCK_ID,
        skip_validate: bool = True,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            url: Node JSON-RPC endpoint
            timeout_seconds: Timeout applied to every request
            block_id: Block the nonce is read at and simulations run against
            skip_validate: Skip account validation during simulation. Needed
                because transactions here carry no signature.
            http_client: Preconfigured httpx client (e.g. with a mock transport)
        """
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.block_id = block_id_param(block_id)
        self.skip_validate = skip_validate
        self._http = http_client or httpx.Client(timeout=timeout_seconds)
        self._ids = itertools.count(1)

    def __enter__(self) -> StarknetRpcClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def get_nonce(self, address: int) -> int:
        result = self.request(
            "starknet_getNonce",
            {"block_id": self.block_id, "contract_address": to_hex(address)},
        )
        try:
            return parse_felt(result, "nonce")
        except ValueError as e:
            raise RpcError(f"Malformed nonce in response: {result!r}") from e

    def simulate(self, transaction: InvokeTransactionBase) -> Mapping[str, Any]:
        flags = ["SKIP_VALIDATE"] if self.skip_validate else []
        result = self.request(
            "starknet_simulateTransactions",
            {
                "block_id": self.block_id,
                "transactions": [transaction.to_rpc()],
                "simulation_flags": flags,
            },
        )
        if not isinstance(result, list) or len(result) != 1 or not isinstance(result[0], dict):
            raise RpcError("Expected exactly one simulated transaction in response")
        return result[0]

    def request(self, method: str, params: dict[str, Any]) -> Any:
        """Send one JSON-RPC request and return its ``result``.

        Raises:
            RpcError: On timeout, HTTP failure, invalid JSON, or a JSON-RPC error
        """
        payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        logger.debug("rpc_request", method=method, request_id=payload["id"])

        try:
            response = self._http.post(self.url, json=payload, timeout=self.timeout_seconds)
            response.raise_for_status()
            body = response.json()
        except httpx.TimeoutException as e:
            raise RpcError(f"{method} timed out after {self.timeout_seconds}s") from e
        except httpx.HTTPStatusError as e:
            raise RpcError(
                f"{method} failed with HTTP {e.response.status_code}",
                data=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            raise RpcError(f"{method} transport error: {e}") from e
        except ValueError as e:
            raise RpcError(f"{method} returned invalid JSON") from e

        if not isinstance(body, dict):
            raise RpcError(f"{method} returned a non-object response")

        error = body.get("error")
        if error is not None:
            if isinstance(error, dict):
                raise RpcError(
                    str(error.get("message", "Unknown RPC error")),
                    code=error.get("code"),
                    data=error.get("data"),
                )
            raise RpcError(f"{method} failed: {error}")

        if "result" not in body:
            raise RpcError(f"{method} response has no result")
        return body["result"]


__all__ = [
    "RpcClient",
    "StarknetRpcClient",
    "block_id_param",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_BLOCK_ID",
]
