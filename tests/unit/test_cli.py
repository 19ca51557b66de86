"""Tests for the command line entry point."""

import csv
import json

import pytest
import structlog

from feesim import cli
from feesim.errors import RpcError
from tests.conftest import StubRpcClient
from tests.helpers import make_simulation_response

ROW = {
    "max_fee": "0x1",
    "token_from": "0xAA",
    "token_from_low": "0x64",
    "token_to": "0xBB",
    "token_to_min_low": "0x32",
    "price_distance": "0x5",
    "ticks_crossed": "3",
}


class ContextStubClient(StubRpcClient):
    """StubRpcClient usable in a with-statement, like StarknetRpcClient."""

    instances: list["ContextStubClient"] = []

    def __init__(self, url: str, **kwargs):
        super().__init__(**self.preset)
        self.url = url
        self.kwargs = kwargs
        ContextStubClient.instances.append(self)

    preset: dict = {}

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return None


@pytest.fixture(autouse=True)
def isolated(monkeypatch):
    for name in (
        "FEESIM_NODE_URL",
        "FEESIM_ACCOUNT_ADDRESS",
        "FEESIM_TX_VERSION",
        "FEESIM_RPC_TIMEOUT",
        "FEESIM_BLOCK_ID",
        "FEESIM_INCLUDE_DATA_GAS",
        "FEESIM_L1_GAS_MAX_AMOUNT",
        "FEESIM_L1_GAS_MAX_PRICE",
        "FEESIM_L2_GAS_MAX_AMOUNT",
        "FEESIM_L2_GAS_MAX_PRICE",
        "FEESIM_TIP",
    ):
        monkeypatch.delenv(name, raising=False)
    ContextStubClient.instances = []
    ContextStubClient.preset = {}
    monkeypatch.setattr(cli, "StarknetRpcClient", ContextStubClient)
    yield
    structlog.reset_defaults()


def write_inputs(tmp_path, rows) -> str:
    path = tmp_path / "inputs.json"
    path.write_text(json.dumps(rows))
    return str(path)


class TestMain:
    def test_writes_results(self, tmp_path):
        output = tmp_path / "out.csv"
        ContextStubClient.preset = {
            "responses": [
                {
                    "fee_estimation": {
                        "gas_consumed": "100",
                        "gas_price": "10",
                        "overall_fee": "1000",
                    },
                    "trace": None,
                }
            ]
        }

        code = cli.main(
            [
                "--inputs",
                write_inputs(tmp_path, [ROW]),
                "--output",
                str(output),
                "--node-url",
                "http://localhost:6060",
                "--timeout",
                "3",
            ]
        )

        assert code == 0
        with open(output, newline="") as f:
            rows = list(csv.reader(f))
        assert rows[1] == ["0xAA", "0xBB", "0x64", "100", "10", "1000", "3"]

        client = ContextStubClient.instances[0]
        assert client.url == "http://localhost:6060"
        assert client.kwargs["timeout_seconds"] == 3.0

    def test_tx_version_flag(self, tmp_path):
        code = cli.main(
            [
                "--inputs",
                write_inputs(tmp_path, [ROW]),
                "--output",
                str(tmp_path / "out.csv"),
                "--tx-version",
                "v3",
            ]
        )
        assert code == 0
        assert ContextStubClient.instances[0].simulated[0].version == 3

    def test_item_failures_still_exit_zero(self, tmp_path):
        ContextStubClient.preset = {
            "responses": [RpcError("reverted"), make_simulation_response()]
        }
        output = tmp_path / "out.csv"

        code = cli.main(
            ["--inputs", write_inputs(tmp_path, [ROW, ROW]), "--output", str(output)]
        )

        assert code == 0
        with open(output, newline="") as f:
            assert len(list(csv.reader(f))) == 2

    def test_bad_inputs_exit_one(self, tmp_path):
        path = tmp_path / "inputs.json"
        path.write_text("not json")
        code = cli.main(["--inputs", str(path), "--output", str(tmp_path / "out.csv")])
        assert code == 1
        assert ContextStubClient.instances == []

    def test_unwritable_output_exit_one(self, tmp_path):
        code = cli.main(
            [
                "--inputs",
                write_inputs(tmp_path, [ROW]),
                "--output",
                str(tmp_path / "missing" / "out.csv"),
            ]
        )
        assert code == 1

    def test_nonce_failure_exit_one(self, tmp_path):
        ContextStubClient.preset = {"nonce_error": RpcError("node down")}
        code = cli.main(
            ["--inputs", write_inputs(tmp_path, [ROW]), "--output", str(tmp_path / "out.csv")]
        )
        assert code == 1

    def test_invalid_env_exit_one(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FEESIM_TX_VERSION", "v9")
        code = cli.main(
            ["--inputs", write_inputs(tmp_path, [ROW]), "--output", str(tmp_path / "out.csv")]
        )
        assert code == 1

    def test_fee_flags_reach_v3_transactions(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FEESIM_L2_GAS_MAX_PRICE", "0x10")
        code = cli.main(
            [
                "--inputs",
                write_inputs(tmp_path, [ROW]),
                "--output",
                str(tmp_path / "out.csv"),
                "--tx-version",
                "v3",
                "--l1-gas-max-amount",
                "1000",
                "--l1-gas-max-price",
                "0x2",
                "--tip",
                "5",
            ]
        )

        assert code == 0
        tx = ContextStubClient.instances[0].simulated[0]
        assert tx.resource_bounds.l1_gas.max_amount == 1000
        assert tx.resource_bounds.l1_gas.max_price_per_unit == 2
        assert tx.resource_bounds.l2_gas.max_price_per_unit == 0x10
        assert tx.tip == 5

    def test_out_of_range_fee_flag_exit_one(self, tmp_path):
        code = cli.main(
            [
                "--inputs",
                write_inputs(tmp_path, [ROW]),
                "--output",
                str(tmp_path / "out.csv"),
                "--l2-gas-max-amount",
                hex(2**64),
            ]
        )
        assert code == 1
        assert ContextStubClient.instances == []
