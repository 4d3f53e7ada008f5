"""Tests for the click command layer."""

import json

import pytest
from click.testing import CliRunner

from ecshop.application.payload import order_to_dict
from ecshop.infrastructure.cli.main import cli
from tests.factories import make_order, make_payload


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestOrderValidate:

    def test_accepted_from_stdin(self, runner):
        result = runner.invoke(cli, ["order", "validate", "-"], input=json.dumps(make_payload()))
        assert result.exit_code == 0
        assert "Order request accepted (1 item(s))" in result.output

    def test_accepted_from_file(self, runner, tmp_path):
        path = tmp_path / "order.json"
        path.write_text(json.dumps(make_payload()), encoding="utf-8")
        result = runner.invoke(cli, ["order", "validate", str(path)])
        assert result.exit_code == 0

    def test_violations_listed(self, runner):
        payload = make_payload(items=[], shippingPostalCode="12345678901")
        result = runner.invoke(cli, ["order", "validate", "-"], input=json.dumps(payload))
        assert result.exit_code == 1
        assert "2 problem(s)" in result.output
        assert "- items: must contain at least one item" in result.output
        assert "- shippingPostalCode: must be at most 10 characters" in result.output

    def test_invalid_json(self, runner):
        result = runner.invoke(cli, ["order", "validate", "-"], input="{not json")
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_payload_not_utf8(self, runner, tmp_path):
        path = tmp_path / "order.json"
        path.write_bytes(b'{"shippingName": "\xff\xfe"}')
        result = runner.invoke(cli, ["order", "validate", str(path)])
        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "Invalid JSON" in result.output

    def test_oversized_integer(self, runner):
        payload = '{"items": [{"productId": ' + "9" * 5000 + ', "quantity": 1}]}'
        result = runner.invoke(cli, ["order", "validate", "-"], input=payload)
        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)

    def test_non_object_payload(self, runner):
        result = runner.invoke(cli, ["order", "validate", "-"], input="[1, 2]")
        assert result.exit_code == 1
        assert "must be a JSON object" in result.output


class TestOrderStatus:

    def test_name(self, runner):
        result = runner.invoke(cli, ["order", "status", "shipped"])
        assert result.exit_code == 0
        assert "SHIPPED -> Shipped" in result.output

    def test_code(self, runner):
        result = runner.invoke(cli, ["order", "status", "5"])
        assert result.exit_code == 0
        assert "CANCELLED -> Cancelled" in result.output

    def test_unrecognized(self, runner):
        result = runner.invoke(cli, ["order", "status", "Lost"])
        assert result.exit_code == 1
        assert "status: unrecognized order status 'Lost'" in result.output

    def test_out_of_range_code(self, runner):
        result = runner.invoke(cli, ["order", "status", "9"])
        assert result.exit_code == 1
        assert "unrecognized order status 9" in result.output


    @pytest.mark.parametrize("value", ["+3", "\u0663", "-1", "0" * 5000])
    def test_non_plain_digits_not_read_as_code(self, runner, value):
        result = runner.invoke(cli, ["order", "status", value])
        assert result.exit_code == 1
        assert "unrecognized order status" in result.output


class TestOrderStatuses:

    def test_lists_all(self, runner):
        result = runner.invoke(cli, ["order", "statuses"])
        assert result.exit_code == 0
        for text in ["Pending", "Confirmed", "Processing", "Shipped", "Delivered", "Cancelled"]:
            assert text in result.output


class TestOrderSummarize:

    def test_prints_summary(self, runner):
        result = runner.invoke(
            cli, ["order", "summarize", "-"], input=json.dumps(order_to_dict(make_order()))
        )
        assert result.exit_code == 0
        summary = json.loads(result.output)
        assert summary["itemCount"] == 2
        assert summary["statusText"] == "Confirmed"
        assert summary["totalAmount"] == "2100"

    def test_malformed_order(self, runner):
        result = runner.invoke(cli, ["order", "summarize", "-"], input=json.dumps({"id": 1}))
        assert result.exit_code == 1
        assert "missing key" in result.output

    def test_order_not_utf8(self, runner, tmp_path):
        path = tmp_path / "order.json"
        path.write_bytes(b"\xff")
        result = runner.invoke(cli, ["order", "summarize", str(path)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output


class TestLogLevel:

    def test_log_level_option(self, runner):
        result = runner.invoke(cli, ["--log-level", "debug", "order", "statuses"])
        assert result.exit_code == 0

    def test_log_level_from_environment(self, runner):
        result = runner.invoke(cli, ["order", "statuses"], env={"ECSHOP_LOG_LEVEL": "INFO"})
        assert result.exit_code == 0

    def test_invalid_log_level(self, runner):
        result = runner.invoke(cli, ["--log-level", "LOUD", "order", "statuses"])
        assert result.exit_code == 2
