from __future__ import annotations

from typing import Any, Dict, List

import pytest

from docstats.host import OffsetOutOfRange
from docstats.runtime import Outcome, TelemetrySink, telemetry


def test_outcome_helpers() -> None:
    good: Outcome[int] = Outcome.success(3)
    bad: Outcome[int] = Outcome.failure(OffsetOutOfRange(9, size=4))

    assert good.ok and good.value == 3
    assert not bad.ok and bad.value is None
    assert "Offset 9" in str(bad.error)


def test_telemetry_sink_records_warning_event(monkeypatch: pytest.MonkeyPatch) -> None:
    events: List[Dict[str, Any]] = []

    def fake_record_event(name: str, **kwargs: Any) -> None:
        events.append({"name": name, **kwargs})

    monkeypatch.setattr(telemetry, "record_event", fake_record_event)

    TelemetrySink().report("stats.refresh", OffsetOutOfRange(12), view="v1")

    (event,) = events
    assert event["name"] == "stats.refresh.aborted"
    assert event["level"] == "warning"
    assert event["data"]["error"] == "OffsetOutOfRange"
    assert event["data"]["view"] == "v1"


def test_record_event_reaches_real_logger() -> None:
    telemetry.record_event("tests.smoke", level="debug", data={"ok": True})


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_env_helpers_stay_private(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOCSTATS_LOG_LEVEL", "debug")
    monkeypatch.setenv("DOCSTATS_NO_COLOR", "Yes")
    monkeypatch.delenv("DOCSTATS_LOG_JSON", raising=False)

    assert telemetry._env("LOG_LEVEL") == "debug"
    assert telemetry._env_flag("NO_COLOR", False) is True
    assert telemetry._env_flag("LOG_JSON", True) is True
    assert not {"env", "env_flag"} & set(telemetry.__all__)
