"""Swap calldata encoding."""

from .calldata import (
    DEFAULT_ROUTER_CONFIG,
    DecodedSwapCall,
    SwapCalldataEncoder,
    SwapRouterConfig,
    decode_swap_calldata,
    encode_swap_calldata,
)

__all__ = [
    "SwapRouterConfig",
    "DEFAULT_ROUTER_CONFIG",
    "DecodedSwapCall",
    "SwapCalldataEncoder",
    "encode_swap_calldata",
    "decode_swap_calldata",
]
