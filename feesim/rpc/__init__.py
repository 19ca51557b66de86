"""Node RPC transport."""

from .client import (
    DEFAULT_BLOCK_ID,
    DEFAULT_TIMEOUT_SECONDS,
    RpcClient,
    StarknetRpcClient,
    block_id_param,
)

__all__ = [
    "RpcClient",
    "StarknetRpcClient",
    "block_id_param",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_BLOCK_ID",
]
