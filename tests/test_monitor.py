"""
Tests for the spending monitor and snapshot documents.
"""

import json

import pytest

from vibemeter.config.settings import Settings
from vibemeter.display import DisplayInputs, DisplayState
from vibemeter.monitor import SpendingMonitor
from vibemeter.providers import ProviderId, RefreshStatus
from vibemeter.snapshot import Snapshot, load_snapshot

class TestSpendingMonitor:
    """Tests for SpendingMonitor."""

    def test_callbacks_fire_only_on_change(self, logged_in_session, settings, make_record):
        states, summaries = [], []
        monitor = SpendingMonitor(
            on_display_state_changed=states.append,
            on_summary_changed=summaries.append,
        )

        def publish(total_cents, refreshing=False):
            return monitor.publish(DisplayInputs(
                session=logged_in_session,
                spending={ProviderId.CURSOR: make_record(total_cents)},
                settings=settings,
                refresh=RefreshStatus(in_flight={ProviderId.CURSOR: refreshing}),
            ))

        publish(5000)
        publish(5000)
        publish(5050)
        publish(5050, refreshing=True)

        assert states == [DisplayState.data(0.5), DisplayState.loading()]
        # 5000 -> 5050 changes the spending line even though the gauge holds
        assert len(summaries) == 2
        assert "Current Spending: $50.50" in summaries[-1].lines

    def test_publish_returns_current_outputs(self, logged_out_session, settings):
        monitor = SpendingMonitor()
        state, summary = monitor.publish(DisplayInputs(
            session=logged_out_session,
            spending={},
            settings=settings,
        ))
        assert state == DisplayState.not_logged_in()
        assert monitor.summary == summary
        assert monitor.display_state == state

    def test_malformed_spending_degrades_to_loading(self, logged_in_session, settings, make_record):
        summaries = []
        monitor = SpendingMonitor(on_summary_changed=summaries.append)

        state, summary = monitor.publish(DisplayInputs(
            session=logged_in_session,
            spending={"bogus": make_record(100)},
            settings=settings,
        ))

        assert state == DisplayState.loading()
        assert "Current Spending: Loading..." in summary.lines
        assert summaries == [summary]


class TestSnapshot:
    """Tests for snapshot documents."""

    def test_to_inputs(self, snapshot_data):
        inputs = Snapshot.model_validate(snapshot_data).to_inputs(Settings(warning_limit_usd=20.0))

        assert inputs.session.primary_provider == ProviderId.CURSOR
        assert inputs.spending[ProviderId.CURSOR].total_cents == 4164
        assert len(inputs.spending[ProviderId.CURSOR].items) == 2
        assert inputs.rates.covers("EUR")
        assert inputs.settings.upper_limit_usd == 100.0
        assert inputs.settings.warning_limit_usd == 20.0
        assert inputs.settings.selected_currency_code == "EUR"
        assert inputs.refresh.any_refreshing is False

    def test_load_from_file(self, tmp_path, snapshot_data):
        path = tmp_path / "snapshot.json"
        path.write_text(json.dumps(snapshot_data), encoding="utf-8")
        assert load_snapshot(path).spending[ProviderId.CURSOR].total_cents == 4164

    def test_empty_document(self):
        inputs = load_snapshot({}).to_inputs()
        assert inputs.session.is_logged_in_to_any_provider is False
        assert inputs.spending == {}

    @pytest.mark.parametrize("patch", [
        {"providers": {"cursor": {"is_logged_in": True, "is_authenticating": True}}},
        {"spending": {"cursor": {"total_cents": -5}}},
        {"rates": {"rates": {"EUR": 0}}},
        {"rates": {"rates": {"EUR": float("nan")}}},
        {"rates": {"rates": {"EUR": float("inf")}}},
        {"rates": {"base_currency": "EUR"}},
        {"providers": {"unknown": {}}},
    ])
    def test_invalid_documents(self, patch):
        with pytest.raises(ValueError):
            load_snapshot(patch)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
