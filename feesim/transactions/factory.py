"""Builds simulation-only invoke transactions.

Transactions are never signed: the signature is always empty and the hash
is left as a zero placeholder. Fee bounds come from FeeSettings, which holds
the defaults for both versions so one settings object serves a whole run.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from feesim.constants import DEFAULT_MAX_GAS_AMOUNT, DEFAULT_MAX_PRICE_PER_UNIT
from feesim.felt import parse_felt, parse_u64, parse_u128
from feesim.models import (
    DataAvailabilityMode,
    InvokeTransactionV1,
    InvokeTransactionV3,
    ResourceBounds,
    ResourceBoundsMapping,
    Transaction,
)


class TransactionVersion(str, Enum):
    """Invoke transaction version to simulate."""

    V1 = "v1"
    V3 = "v3"


@dataclass(frozen=True)
class FeeSettings:
    """Fee bounds for transaction building.

    Literals may be hex strings, decimal strings or ints. Zero is a valid
    bound, not "unset".

    Attributes:
        max_fee: V1 max fee
        l1_gas_max_amount: V3 L1 gas amount cap (u64)
        l1_gas_max_price_per_unit: V3 L1 gas unit price cap (u128)
        l2_gas_max_amount: V3 L2 gas amount cap (u64)
        l2_gas_max_price_per_unit: V3 L2 gas unit price cap (u128)
        tip: V3 tip (u64)
        nonce_data_availability_mode: V3 nonce DA mode
        fee_data_availability_mode: V3 fee DA mode
    """

    max_fee: str | int = 0
    l1_gas_max_amount: str | int = DEFAULT_MAX_GAS_AMOUNT
    l1_gas_max_price_per_unit: str | int = DEFAULT_MAX_PRICE_PER_UNIT
    l2_gas_max_amount: str | int = DEFAULT_MAX_GAS_AMOUNT
    l2_gas_max_price_per_unit: str | int = DEFAULT_MAX_PRICE_PER_UNIT
    tip: str | int = 0
    nonce_data_availability_mode: DataAvailabilityMode = DataAvailabilityMode.L1
    fee_data_availability_mode: DataAvailabilityMode = DataAvailabilityMode.L1

    def resource_bounds(self) -> ResourceBoundsMapping:
        """Parse the V3 resource bounds.

        Raises:
            ParameterEncodingError: If a bound is malformed or out of range
        """
        return ResourceBoundsMapping(
            l1_gas=ResourceBounds(
                max_amount=parse_u64(self.l1_gas_max_amount, "l1_gas.max_amount"),
                max_price_per_unit=parse_u128(
                    self.l1_gas_max_price_per_unit, "l1_gas.max_price_per_unit"
                ),
            ),
            l2_gas=ResourceBounds(
                max_amount=parse_u64(self.l2_gas_max_amount, "l2_gas.max_amount"),
                max_price_per_unit=parse_u128(
                    self.l2_gas_max_price_per_unit, "l2_gas.max_price_per_unit"
                ),
            ),
        )


DEFAULT_FEE_SETTINGS = FeeSettings()


def build_transaction(
    version: TransactionVersion,
    sender: str | int,
    nonce: str | int,
    calldata: Sequence[int],
    fee_config: FeeSettings = DEFAULT_FEE_SETTINGS,
) -> Transaction:
    """Assemble an unsigned invoke transaction of the given version.

    Args:
        version: V1 (max_fee) or V3 (resource bounds)
        sender: Account address
        nonce: Account nonce
        calldata: Encoded calldata
        fee_config: Fee bounds (V1 reads max_fee, V3 the rest)

    Returns:
        InvokeTransactionV1 or InvokeTransactionV3

    Raises:
        ParameterEncodingError: If a literal is malformed or out of range
    """
    sender_address = parse_felt(sender, "sender_address")
    nonce_felt = parse_felt(nonce, "nonce")

    if version == TransactionVersion.V1:
        return InvokeTransactionV1(
            nonce=nonce_felt,
            sender_address=sender_address,
            calldata=tuple(calldata),
            max_fee=parse_felt(fee_config.max_fee, "max_fee"),
        )

    if version == TransactionVersion.V3:
        return InvokeTransactionV3(
            nonce=nonce_felt,
            sender_address=sender_address,
            calldata=tuple(calldata),
            resource_bounds=fee_config.resource_bounds(),
            tip=parse_u64(fee_config.tip, "tip"),
            nonce_data_availability_mode=fee_config.nonce_data_availability_mode,
            fee_data_availability_mode=fee_config.fee_data_availability_mode,
        )

    raise ValueError(f"Unsupported transaction version: {version}")


__all__ = [
    "TransactionVersion",
    "FeeSettings",
    "DEFAULT_FEE_SETTINGS",
    "build_transaction",
]
