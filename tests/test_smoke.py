from __future__ import annotations

from type_core import smoke


def test_smoke_passes():
    assert smoke.run_smoke() is True


def test_smoke_reports_failing_check(monkeypatch, caplog):
    def broken() -> None:
        raise AssertionError("boom")

    monkeypatch.setattr(smoke, "CHECKS", [("broken", broken)])
    assert smoke.run_smoke() is False
    assert "smoke check broken failed: boom" in caplog.text


def test_main_exit_code():
    assert smoke.main() == 0
