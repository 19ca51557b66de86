"""Pytest configuration and fixtures."""

from collections.abc import Mapping
from typing import Any

import pytest

from feesim.config import SimulatorConfig
from feesim.errors import SinkError
from feesim.gateway import SimulationGateway
from feesim.models import InvokeTransactionBase, OutputRecord
from tests.helpers import ACCOUNT, make_simulation_response

# =============================================================================
# Stub collaborators for dependency injection
# =============================================================================


class StubRpcClient:
    """RpcClient stub returning canned responses without network calls.

    Usage:
        # Same response for every simulation
        client = StubRpcClient()

        # One entry per simulation call, exceptions are raised
        client = StubRpcClient(responses=[make_simulation_response(), RpcError("boom")])
    """

    def __init__(
        self,
        nonce: int = 7,
        responses: list[Mapping[str, Any] | Exception] | None = None,
        nonce_error: Exception | None = None,
    ) -> None:
        self.nonce = nonce
        self.responses = list(responses) if responses is not None else None
        self.nonce_error = nonce_error
        self.nonce_calls: list[int] = []
        self.simulated: list[InvokeTransactionBase] = []  # Track calls for assertions

    def get_nonce(self, address: int) -> int:
        self.nonce_calls.append(address)
        if self.nonce_error is not None:
            raise self.nonce_error
        return self.nonce

    def simulate(self, transaction: InvokeTransactionBase) -> Mapping[str, Any]:
        self.simulated.append(transaction)
        if self.responses is None:
            return make_simulation_response()
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class MemorySink:
    """RecordSink keeping records in a list."""

    def __init__(self, fail_after: int | None = None) -> None:
        self.records: list[OutputRecord] = []
        self.fail_after = fail_after

    def write(self, record: OutputRecord) -> None:
        if self.fail_after is not None and len(self.records) >= self.fail_after:
            raise SinkError("disk full")
        self.records.append(record)


@pytest.fixture
def stub_client() -> StubRpcClient:
    return StubRpcClient()


@pytest.fixture
def gateway(stub_client: StubRpcClient) -> SimulationGateway:
    return SimulationGateway(stub_client)


@pytest.fixture
def memory_sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def config() -> SimulatorConfig:
    """Default config with the test account as sender."""
    return SimulatorConfig(account_address=ACCOUNT)
