"""
Tests for the command line interface.
"""

import json

import pytest
from typer.testing import CliRunner

from vibemeter.cli import app


runner = CliRunner()


@pytest.fixture
def snapshot_file(tmp_path, monkeypatch, snapshot_data):
    for name in ("VIBEMETER_UPPER_LIMIT_USD", "VIBEMETER_WARNING_LIMIT_USD", "VIBEMETER_CURRENCY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(snapshot_data), encoding="utf-8")
    return path


class TestCLI:
    """Tests for vibemeter commands."""

    def test_status_json(self, snapshot_file):
        result = runner.invoke(app, ["status", str(snapshot_file), "--json"])

        assert result.exit_code == 0
        output = json.loads(result.stdout)
        assert output["display_state"] == {"state": "data", "gauge_value": 0.4164}
        assert output["summary"]["has_debug_section"] is True
        assert "Current Spending: €20.82" in output["summary"]["lines"]
        assert output["spending"]["total_usd_cents"] == 4164

    def test_status_currency_override(self, snapshot_file):
        result = runner.invoke(app, ["status", str(snapshot_file), "--currency", "xyz", "--json"])

        assert result.exit_code == 0
        lines = json.loads(result.stdout)["summary"]["lines"]
        assert "Current Spending: $41.64 (USD)" in lines

    def test_status_table(self, snapshot_file):
        result = runner.invoke(app, ["status", str(snapshot_file)])
        assert result.exit_code == 0
        assert "Logged In As: dev@example.com" in result.stdout

    def test_missing_snapshot(self, tmp_path):
        result = runner.invoke(app, ["status", str(tmp_path / "nope.json")])
        assert result.exit_code == 1

    def test_non_finite_rate_in_snapshot(self, snapshot_file, snapshot_data):
        snapshot_data["rates"]["rates"]["EUR"] = float("nan")
        snapshot_file.write_text(json.dumps(snapshot_data), encoding="utf-8")

        result = runner.invoke(app, ["status", str(snapshot_file), "--json"])
        assert result.exit_code == 1
        assert "Could not read snapshot" in result.stdout

    def test_spend_json(self, snapshot_file):
        result = runner.invoke(app, ["spend", str(snapshot_file), "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["by_provider"] == {"cursor": 4164}

    def test_invoice_json(self, snapshot_file):
        result = runner.invoke(app, ["invoice", str(snapshot_file), "--json", "--currency", "USD"])

        assert result.exit_code == 0
        lines = json.loads(result.stdout)
        assert [line["kind"] for line in lines] == ["priority", "item"]
        assert lines[1]["text"] == "• 512 premium requests: $20.48"

    def test_invoice_unknown_provider_record(self, snapshot_file):
        result = runner.invoke(app, ["invoice", str(snapshot_file), "--provider", "claude"])
        assert result.exit_code == 1

    def test_convert(self, tmp_path):
        rates = tmp_path / "rates.json"
        rates.write_text(json.dumps({"EUR": 0.5}), encoding="utf-8")

        result = runner.invoke(app, ["convert", "100", "EUR", "--rates", str(rates)])
        assert result.exit_code == 0
        assert "€50.00" in result.stdout

    def test_convert_missing_rate(self):
        result = runner.invoke(app, ["convert", "100", "XYZ"])
        assert result.exit_code == 2
        assert "$100.00 (USD)" in result.stdout

    @pytest.mark.parametrize("content", ['[0.5, 0.8]', '{"EUR": "lots"}', '{"EUR": NaN}'])
    def test_convert_invalid_rates_file(self, tmp_path, content):
        rates = tmp_path / "rates.json"
        rates.write_text(content, encoding="utf-8")

        result = runner.invoke(app, ["convert", "100", "EUR", "--rates", str(rates)])
        assert result.exit_code == 1
        assert "Could not read rates" in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "Vibemeter v0.1.0" in result.stdout


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
