"""Starknet invoke transaction models (V1 and V3).

The two versions share sender, nonce, signature and calldata but differ in
how fees are bounded: V1 caps the total with ``max_fee``, V3 caps each
resource separately. ``Transaction`` is a discriminated union over the
``version`` field, so fields of one variant never appear on the other.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from feesim.constants import FELT_MAX, U64_MAX, U128_MAX
from feesim.felt import to_hex

Felt = Annotated[int, Field(ge=0, le=FELT_MAX)]
U64 = Annotated[int, Field(ge=0, le=U64_MAX)]
U128 = Annotated[int, Field(ge=0, le=U128_MAX)]


class DataAvailabilityMode(str, Enum):
    """Where nonce and fee state updates are published."""

    L1 = "L1"
    L2 = "L2"


class ResourceBounds(BaseModel):
    """Cap on the amount and unit price of one resource."""

    max_amount: U64
    max_price_per_unit: U128

    model_config = ConfigDict(frozen=True)

    def to_rpc(self) -> dict[str, str]:
        return {
            "max_amount": to_hex(self.max_amount),
            "max_price_per_unit": to_hex(self.max_price_per_unit),
        }


class ResourceBoundsMapping(BaseModel):
    """Per-resource bounds of a V3 transaction."""

    l1_gas: ResourceBounds
    l2_gas: ResourceBounds

    model_config = ConfigDict(frozen=True)

    def to_rpc(self) -> dict[str, dict[str, str]]:
        return {"l1_gas": self.l1_gas.to_rpc(), "l2_gas": self.l2_gas.to_rpc()}


class InvokeTransactionBase(BaseModel, ABC):
    """Fields shared by every invoke transaction version.

    ``transaction_hash`` is a placeholder: transactions built here are only
    ever simulated, so the hash is never computed.
    """

    version: int
    transaction_hash: Felt = 0
    nonce: Felt
    sender_address: Felt
    signature: tuple[Felt, ...] = ()
    calldata: tuple[Felt, ...]

    model_config = ConfigDict(frozen=True)

    def to_rpc(self) -> dict[str, Any]:
        """Serialize as a JSON-RPC ``INVOKE`` transaction object."""
        payload: dict[str, Any] = {
            "type": "INVOKE",
            "version": to_hex(self.version),
            "sender_address": to_hex(self.sender_address),
            "calldata": [to_hex(word) for word in self.calldata],
            "signature": [to_hex(word) for word in self.signature],
            "nonce": to_hex(self.nonce),
        }
        payload.update(self._fee_fields())
        return payload

    @abstractmethod
    def _fee_fields(self) -> dict[str, Any]:
        """Version-specific fee fields of the JSON-RPC object."""


class InvokeTransactionV1(InvokeTransactionBase):
    """Legacy invoke transaction with a single max fee bound."""

    version: Literal[1] = 1
    max_fee: Felt

    def _fee_fields(self) -> dict[str, Any]:
        return {"max_fee": to_hex(self.max_fee)}


class InvokeTransactionV3(InvokeTransactionBase):
    """Invoke transaction with per-resource fee bounds."""

    version: Literal[3] = 3
    resource_bounds: ResourceBoundsMapping
    tip: U64 = 0
    paymaster_data: tuple[Felt, ...] = ()
    account_deployment_data: tuple[Felt, ...] = ()
    nonce_data_availability_mode: DataAvailabilityMode = DataAvailabilityMode.L1
    fee_data_availability_mode: DataAvailabilityMode = DataAvailabilityMode.L1

    def _fee_fields(self) -> dict[str, Any]:
        return {
            "resource_bounds": self.resource_bounds.to_rpc(),
            "tip": to_hex(self.tip),
            "paymaster_data": [to_hex(word) for word in self.paymaster_data],
            "account_deployment_data": [to_hex(word) for word in self.account_deployment_data],
            "nonce_data_availability_mode": self.nonce_data_availability_mode.value,
            "fee_data_availability_mode": self.fee_data_availability_mode.value,
        }


Transaction = Annotated[
    InvokeTransactionV1 | InvokeTransactionV3,
    Field(discriminator="version"),
]
