"""Run configuration for the fee simulator.

Configuration is read once at startup, from environment variables with
defaults, and optionally overridden by CLI flags:
- FEESIM_NODE_URL: Node JSON-RPC endpoint
- FEESIM_ACCOUNT_ADDRESS: Sender account
- FEESIM_TX_VERSION: Transaction version, "v1" or "v3" (default: v1)
- FEESIM_RPC_TIMEOUT: Per-call RPC timeout in seconds (default: 30)
- FEESIM_BLOCK_ID: Block tag, number or hash to simulate at (default: latest)
- FEESIM_INCLUDE_DATA_GAS: Add the data_gas_consumed column (default: false)
- FEESIM_L1_GAS_MAX_AMOUNT: V3 L1 gas amount cap (default: 500)
- FEESIM_L1_GAS_MAX_PRICE: V3 L1 gas unit price cap (default: 45482573982463)
- FEESIM_L2_GAS_MAX_AMOUNT: V3 L2 gas amount cap (default: 500)
- FEESIM_L2_GAS_MAX_PRICE: V3 L2 gas unit price cap (default: 45482573982463)
- FEESIM_TIP: V3 tip (default: 0)

Fee literals are hex or decimal and are range-checked when the config is
built, so a bad bound stops the run before any RPC call.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace

from feesim.constants import DEFAULT_ACCOUNT_ADDRESS, DEFAULT_NODE_URL
from feesim.encoding import DEFAULT_ROUTER_CONFIG, SwapRouterConfig
from feesim.felt import parse_u64
from feesim.rpc import DEFAULT_BLOCK_ID, DEFAULT_TIMEOUT_SECONDS, block_id_param
from feesim.transactions import DEFAULT_FEE_SETTINGS, FeeSettings, TransactionVersion

_TRUE_VALUES = ("true", "1", "yes")
_FALSE_VALUES = ("false", "0", "no", "")


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class SimulatorConfig:
    """Everything a simulation run needs besides its inputs.

    Attributes:
        node_url: Node JSON-RPC endpoint
        account_address: Sender of every simulated transaction
        tx_version: Invoke transaction version to simulate
        rpc_timeout_seconds: Timeout for each RPC call
        block_id: Block tag, number or hash to simulate against
        include_data_gas: Whether output rows carry data_gas_consumed
        fees: Fee bounds for both transaction versions
        router: Router and pool constants for calldata encoding
        beneficiary: Receiver of the bought tokens (default: sender)
        integrator_recipient: Receiver of the integrator fee (default: sender)
    """

    node_url: str = DEFAULT_NODE_URL
    account_address: str = DEFAULT_ACCOUNT_ADDRESS
    tx_version: TransactionVersion = TransactionVersion.V1
    rpc_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    block_id: str = DEFAULT_BLOCK_ID
    include_data_gas: bool = False
    fees: FeeSettings = field(default=DEFAULT_FEE_SETTINGS)
    router: SwapRouterConfig = field(default=DEFAULT_ROUTER_CONFIG)
    beneficiary: str | None = None
    integrator_recipient: str | None = None

    def __post_init__(self) -> None:
        if self.rpc_timeout_seconds <= 0:
            raise ValueError(f"RPC timeout must be positive, got {self.rpc_timeout_seconds}")
        block_id_param(self.block_id)
        self.fees.resource_bounds()
        parse_u64(self.fees.tip, "tip")

    @property
    def beneficiary_address(self) -> str:
        return self.beneficiary or self.account_address

    @property
    def integrator_recipient_address(self) -> str:
        return self.integrator_recipient or self.account_address

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SimulatorConfig:
        """Build a config from FEESIM_* environment variables.

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ

        try:
            tx_version = TransactionVersion(env.get("FEESIM_TX_VERSION", "v1").lower())
        except ValueError as e:
            raise ValueError(
                f"FEESIM_TX_VERSION must be 'v1' or 'v3', got {env['FEESIM_TX_VERSION']!r}"
            ) from e

        try:
            timeout = float(env.get("FEESIM_RPC_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS)))
        except ValueError as e:
            raise ValueError(
                f"FEESIM_RPC_TIMEOUT must be a number, got {env['FEESIM_RPC_TIMEOUT']!r}"
            ) from e

        defaults = DEFAULT_FEE_SETTINGS
        fees = replace(
            defaults,
            l1_gas_max_amount=env.get("FEESIM_L1_GAS_MAX_AMOUNT", defaults.l1_gas_max_amount),
            l1_gas_max_price_per_unit=env.get(
                "FEESIM_L1_GAS_MAX_PRICE", defaults.l1_gas_max_price_per_unit
            ),
            l2_gas_max_amount=env.get("FEESIM_L2_GAS_MAX_AMOUNT", defaults.l2_gas_max_amount),
            l2_gas_max_price_per_unit=env.get(
                "FEESIM_L2_GAS_MAX_PRICE", defaults.l2_gas_max_price_per_unit
            ),
            tip=env.get("FEESIM_TIP", defaults.tip),
        )

        return cls(
            fees=fees,
            node_url=env.get("FEESIM_NODE_URL", DEFAULT_NODE_URL),
            account_address=env.get("FEESIM_ACCOUNT_ADDRESS", DEFAULT_ACCOUNT_ADDRESS),
            tx_version=tx_version,
            rpc_timeout_seconds=timeout,
            block_id=env.get("FEESIM_BLOCK_ID", DEFAULT_BLOCK_ID),
            include_data_gas=_parse_bool(
                "FEESIM_INCLUDE_DATA_GAS", env.get("FEESIM_INCLUDE_DATA_GAS", "false")
            ),
        )


__all__ = ["SimulatorConfig"]
