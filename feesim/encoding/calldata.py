"""Calldata encoding for single-route swaps through the aggregator router.

The router is invoked through an account's ``__execute__``, so calldata is a
flat list of felts: the call array header (call count, target, selector,
argument count) followed by the swap arguments. u256 amounts take two felts
(low, high). The route carries the pool key as six extra parameters.
"""

from __future__ import annotations

from dataclasses import dataclass

from feesim.constants import (
    CALL_COUNT,
    EXCHANGE_ADDRESS,
    POOL_EXTENSION_ADDRESS,
    POOL_FEE,
    POOL_PARAMETER_COUNT,
    POOL_TICK_SPACING,
    ROUTE_COUNT,
    ROUTE_PERCENTAGE_FULL,
    SWAP_ARGUMENT_COUNT,
    SWAP_CALLDATA_LENGTH,
    SWAP_ROUTER_ADDRESS,
    SWAP_SELECTOR,
)
from feesim.errors import ParameterEncodingError
from feesim.felt import parse_felt, parse_u128
from feesim.models import SwapParameters


# Router config fields that end up in calldata as felts
_FELT_FIELDS = (
    "router_address",
    "swap_selector",
    "exchange_address",
    "route_percentage",
    "pool_fee",
    "tick_spacing",
    "extension_address",
    "pool_token0",
    "pool_token1",
)


@dataclass(frozen=True)
class SwapRouterConfig:
    """Router and pool constants baked into every encoded swap.

    Attributes:
        router_address: Aggregator router contract (call target)
        swap_selector: Selector of the router's swap entry point
        exchange_address: Pool manager contract the route goes through
        route_percentage: Share of the input routed (1e12 = 100%)
        pool_fee: Pool fee tier
        tick_spacing: Pool tick spacing
        extension_address: Pool extension contract
        pool_token0: Fixed token0 of the pool key. If None (with pool_token1),
            the pair is ordered from the swap tokens, smaller address first.
        pool_token1: Fixed token1 of the pool key
    """

    router_address: int = SWAP_ROUTER_ADDRESS
    swap_selector: int = SWAP_SELECTOR
    exchange_address: int = EXCHANGE_ADDRESS
    route_percentage: int = ROUTE_PERCENTAGE_FULL
    pool_fee: int = POOL_FEE
    tick_spacing: int = POOL_TICK_SPACING
    extension_address: int = POOL_EXTENSION_ADDRESS
    pool_token0: int | None = None
    pool_token1: int | None = None

    def __post_init__(self) -> None:
        if (self.pool_token0 is None) != (self.pool_token1 is None):
            raise ValueError("pool_token0 and pool_token1 must be set together")
        for name in _FELT_FIELDS:
            value = getattr(self, name)
            if value is not None:
                parse_felt(value, name)

    def pool_tokens(self, token_a: int, token_b: int) -> tuple[int, int]:
        """Return the pool key's (token0, token1) for a swap between two tokens."""
        if self.pool_token0 is not None and self.pool_token1 is not None:
            return self.pool_token0, self.pool_token1
        return (token_a, token_b) if token_a < token_b else (token_b, token_a)


DEFAULT_ROUTER_CONFIG = SwapRouterConfig()


@dataclass(frozen=True)
class DecodedSwapCall:
    """Positional view of an encoded swap call."""

    router_address: int
    swap_selector: int
    token_from: int
    token_from_low: int
    token_from_high: int
    token_to: int
    token_to_min_low: int
    token_to_min_high: int
    beneficiary: int
    integrator_fee: int
    integrator_recipient: int
    exchange_address: int
    route_percentage: int
    pool_token0: int
    pool_token1: int
    pool_fee: int
    tick_spacing: int
    extension_address: int
    price_distance: int


class SwapCalldataEncoder:
    """Encodes SwapParameters into router calldata for a fixed router/pool."""

    def __init__(self, router: SwapRouterConfig | None = None) -> None:
        self.router = router or DEFAULT_ROUTER_CONFIG

    def encode(
        self,
        params: SwapParameters,
        beneficiary: str | int,
        integrator_recipient: str | int,
    ) -> list[int]:
        """Encode one swap.

        Args:
            params: Swap row to encode
            beneficiary: Address receiving the bought tokens
            integrator_recipient: Address receiving the integrator fee

        Returns:
            Calldata as a list of felts (always SWAP_CALLDATA_LENGTH words)

        Raises:
            ParameterEncodingError: If any literal is malformed or out of range
        """
        token_from = parse_felt(params.token_from, "token_from")
        token_to = parse_felt(params.token_to, "token_to")
        sell_low = parse_u128(params.token_from_low, "token_from_low")
        min_receive_low = parse_u128(params.token_to_min_low, "token_to_min_low")
        price_distance = parse_felt(params.price_distance, "price_distance")
        beneficiary_felt = parse_felt(beneficiary, "beneficiary")
        recipient_felt = parse_felt(integrator_recipient, "integrator_recipient")

        token0, token1 = self.router.pool_tokens(token_from, token_to)

        return [
            # Call array header
            CALL_COUNT,
            self.router.router_address,
            self.router.swap_selector,
            SWAP_ARGUMENT_COUNT,
            # Sell side: token, u256 amount
            token_from,
            sell_low,
            0,
            # Buy side: token, u256 amount (unused), u256 minimum
            token_to,
            0,
            0,
            min_receive_low,
            0,
            beneficiary_felt,
            0,  # integrator fee
            recipient_felt,
            # Single route through the pool
            ROUTE_COUNT,
            token_from,
            token_to,
            self.router.exchange_address,
            self.router.route_percentage,
            POOL_PARAMETER_COUNT,
            token0,
            token1,
            self.router.pool_fee,
            self.router.tick_spacing,
            self.router.extension_address,
            price_distance,
        ]


def encode_swap_calldata(
    params: SwapParameters,
    beneficiary: str | int,
    integrator_recipient: str | int,
    router: SwapRouterConfig | None = None,
) -> list[int]:
    """Encode one swap with the given (or default) router configuration."""
    return SwapCalldataEncoder(router).encode(params, beneficiary, integrator_recipient)


def decode_swap_calldata(calldata: list[int] | tuple[int, ...]) -> DecodedSwapCall:
    """Read the fields of an encoded swap back by position.

    Raises:
        ParameterEncodingError: If the calldata does not have the swap layout
    """
    words = list(calldata)
    if len(words) != SWAP_CALLDATA_LENGTH:
        raise ParameterEncodingError(
            "calldata", len(words), f"expected {SWAP_CALLDATA_LENGTH} words"
        )

    fixed = {
        0: ("call_count", CALL_COUNT),
        3: ("argument_count", SWAP_ARGUMENT_COUNT),
        15: ("route_count", ROUTE_COUNT),
        20: ("pool_parameter_count", POOL_PARAMETER_COUNT),
    }
    for index, (name, expected) in fixed.items():
        if words[index] != expected:
            raise ParameterEncodingError(name, words[index], f"expected {expected}")

    return DecodedSwapCall(
        router_address=words[1],
        swap_selector=words[2],
        token_from=words[4],
        token_from_low=words[5],
        token_from_high=words[6],
        token_to=words[7],
        token_to_min_low=words[10],
        token_to_min_high=words[11],
        beneficiary=words[12],
        integrator_fee=words[13],
        integrator_recipient=words[14],
        exchange_address=words[18],
        route_percentage=words[19],
        pool_token0=words[21],
        pool_token1=words[22],
        pool_fee=words[23],
        tick_spacing=words[24],
        extension_address=words[25],
        price_distance=words[26],
    )


__all__ = [
    "SwapRouterConfig",
    "DEFAULT_ROUTER_CONFIG",
    "DecodedSwapCall",
    "SwapCalldataEncoder",
    "encode_swap_calldata",
    "decode_swap_calldata",
]
