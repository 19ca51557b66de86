"""Tests for projecting simulation results onto output records."""

from feesim.aggregate import to_record
from feesim.models import OutputRecord, SimulationResult, SwapParameters
from tests.helpers import make_simulation_response, make_swap_parameters


def scenario_params() -> SwapParameters:
    return SwapParameters(
        max_fee="0x1",
        token_from="0xAA",
        token_from_low="0x64",
        token_to="0xBB",
        token_to_min_low="0x32",
        price_distance="0x5",
        ticks_crossed="3",
    )


class TestToRecord:
    def test_scenario_row(self):
        result = SimulationResult.model_validate(
            {
                "fee_estimation": {"gas_consumed": "100", "gas_price": "10", "overall_fee": "1000"},
                "trace": None,
            }
        )
        record = to_record(scenario_params(), result)

        assert record.as_row() == ["0xAA", "0xBB", "0x64", "100", "10", "1000", "3"]

    def test_passthrough_fields_unchanged(self):
        """Input literals are copied verbatim, not normalized."""
        params = make_swap_parameters(token_from="0xDeadBeef", token_from_low="0x0A")
        result = SimulationResult.model_validate(make_simulation_response())
        record = to_record(params, result)

        assert record.token_from == "0xDeadBeef"
        assert record.token_to == params.token_to
        assert record.from_amount == "0x0A"
        assert record.ticks_crossed == params.ticks_crossed

    def test_hex_fees_rendered_decimal(self):
        result = SimulationResult.model_validate(
            make_simulation_response(gas_consumed="0xff", gas_price="0x10", overall_fee="0xff0")
        )
        record = to_record(make_swap_parameters(), result)

        assert record.gas_consumed == "255"
        assert record.gas_price == "16"
        assert record.overall_fee == "4080"
        assert record.data_gas_consumed is None

    def test_data_gas_when_present(self):
        result = SimulationResult.model_validate(make_simulation_response(data_gas_consumed="0x80"))
        record = to_record(make_swap_parameters(), result)
        assert record.data_gas_consumed == "128"


class TestOutputRecordRows:
    def make_record(self, data_gas: str | None = None) -> OutputRecord:
        return OutputRecord(
            token_from="0xAA",
            token_to="0xBB",
            from_amount="0x64",
            data_gas_consumed=data_gas,
            gas_consumed="100",
            gas_price="10",
            overall_fee="1000",
            ticks_crossed="3",
        )

    def test_header_without_data_gas(self):
        assert OutputRecord.header() == [
            "token_from",
            "token_to",
            "from_amount",
            "gas_consumed",
            "gas_price",
            "overall_fee",
            "ticks_crossed",
        ]

    def test_header_with_data_gas(self):
        assert OutputRecord.header(include_data_gas=True)[3] == "data_gas_consumed"

    def test_row_with_data_gas(self):
        assert self.make_record("7").as_row(include_data_gas=True) == [
            "0xAA",
            "0xBB",
            "0x64",
            "7",
            "100",
            "10",
            "1000",
            "3",
        ]

    def test_missing_data_gas_is_empty_cell(self):
        assert self.make_record().as_row(include_data_gas=True)[3] == ""
