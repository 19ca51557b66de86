"""Command line entry point for batch fee simulation.

Usage:
    feesim --inputs simulation_inputs.json --output simulation_results_new.csv --tx-version v3
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

import structlog

from feesim.config import SimulatorConfig
from feesim.constants import DEFAULT_INPUTS_PATH, DEFAULT_OUTPUT_PATH
from feesim.errors import BatchLoadError, ParameterEncodingError, RpcError, SinkError
from feesim.gateway import SimulationGateway
from feesim.io import CsvRecordSink, load_swap_parameters
from feesim.rpc import StarknetRpcClient
from feesim.simulator import SwapFeeSimulator
from feesim.transactions import TransactionVersion

logger = structlog.get_logger()


def configure_logging(verbose: bool = False) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulate swap transaction fees against a Starknet node",
    )
    parser.add_argument(
        "--inputs",
        type=Path,
        default=Path(DEFAULT_INPUTS_PATH),
        help=f"JSON file of swap parameters (default: {DEFAULT_INPUTS_PATH})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(DEFAULT_OUTPUT_PATH),
        help=f"CSV file to write results to (default: {DEFAULT_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--tx-version",
        choices=[v.value for v in TransactionVersion],
        help="Invoke transaction version (overrides FEESIM_TX_VERSION)",
    )
    parser.add_argument("--node-url", help="Node JSON-RPC URL (overrides FEESIM_NODE_URL)")
    parser.add_argument(
        "--account", help="Sender account address (overrides FEESIM_ACCOUNT_ADDRESS)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Per-call RPC timeout in seconds (overrides FEESIM_RPC_TIMEOUT)",
    )
    parser.add_argument("--block-id", help="Block to simulate at (overrides FEESIM_BLOCK_ID)")
    parser.add_argument(
        "--include-data-gas",
        action="store_true",
        default=None,
        help="Add a data_gas_consumed column to the output",
    )
    parser.add_argument(
        "--l1-gas-max-amount", help="V3 L1 gas amount cap (overrides FEESIM_L1_GAS_MAX_AMOUNT)"
    )
    parser.add_argument(
        "--l1-gas-max-price", help="V3 L1 gas unit price cap (overrides FEESIM_L1_GAS_MAX_PRICE)"
    )
    parser.add_argument(
        "--l2-gas-max-amount", help="V3 L2 gas amount cap (overrides FEESIM_L2_GAS_MAX_AMOUNT)"
    )
    parser.add_argument(
        "--l2-gas-max-price", help="V3 L2 gas unit price cap (overrides FEESIM_L2_GAS_MAX_PRICE)"
    )
    parser.add_argument("--tip", help="V3 tip (overrides FEESIM_TIP)")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def config_from_args(args: argparse.Namespace, base: SimulatorConfig) -> SimulatorConfig:
    """Apply CLI overrides on top of an environment-derived config."""
    overrides: dict[str, object] = {}
    if args.tx_version is not None:
        overrides["tx_version"] = TransactionVersion(args.tx_version)
    if args.node_url is not None:
        overrides["node_url"] = args.node_url
    if args.account is not None:
        overrides["account_address"] = args.account
    if args.timeout is not None:
        overrides["rpc_timeout_seconds"] = args.timeout
    if args.block_id is not None:
        overrides["block_id"] = args.block_id
    if args.include_data_gas is not None:
        overrides["include_data_gas"] = args.include_data_gas
    fee_overrides = {
        name: value
        for name, value in (
            ("l1_gas_max_amount", args.l1_gas_max_amount),
            ("l1_gas_max_price_per_unit", args.l1_gas_max_price),
            ("l2_gas_max_amount", args.l2_gas_max_amount),
            ("l2_gas_max_price_per_unit", args.l2_gas_max_price),
            ("tip", args.tip),
        )
        if value is not None
    }
    if fee_overrides:
        overrides["fees"] = dataclasses.replace(base.fees, **fee_overrides)
    return dataclasses.replace(base, **overrides)  # type: ignore[arg-type]


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = config_from_args(args, SimulatorConfig.from_env())
    except ValueError as e:
        logger.error("invalid_configuration", error=str(e))
        return 1

    try:
        inputs = load_swap_parameters(args.inputs)
    except BatchLoadError as e:
        logger.error("batch_load_failed", error=str(e))
        return 1

    try:
        with (
            StarknetRpcClient(
                config.node_url,
                timeout_seconds=config.rpc_timeout_seconds,
                block_id=config.block_id,
            ) as client,
            CsvRecordSink(args.output, include_data_gas=config.include_data_gas) as sink,
        ):
            simulator = SwapFeeSimulator(SimulationGateway(client), config)
            summary = simulator.run(inputs, sink)
    except SinkError as e:
        logger.error("output_failed", error=str(e))
        return 1
    except (RpcError, ParameterEncodingError) as e:
        logger.error("batch_aborted", account=config.account_address, error=str(e))
        return 1

    print(f"Simulated {summary.succeeded}/{summary.total} swaps, results in {args.output}")
    if summary.failed:
        print(f"{summary.failed} swap(s) failed, see log for details")
    return 0


if __name__ == "__main__":
    sys.exit(main())
