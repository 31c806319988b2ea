"""Timezone helpers follow the configured ``APP_TIMEZONE``."""

from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from app.config import reset_settings_cache
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    get_app_timezone,
    now_in_app_timezone,
)


@pytest.fixture()
def app_timezone(monkeypatch: pytest.MonkeyPatch):
    def _set(name: str) -> None:
        monkeypatch.setenv("APP_TIMEZONE", name)
        reset_settings_cache()

    yield _set
    monkeypatch.setenv("APP_TIMEZONE", "UTC")
    reset_settings_cache()


def test_timezone_change_is_picked_up_after_settings_reset(app_timezone) -> None:
    assert get_app_timezone() is timezone.utc

    app_timezone("Europe/Madrid")

    assert get_app_timezone() == ZoneInfo("Europe/Madrid")
    assert now_in_app_timezone().tzinfo == ZoneInfo("Europe/Madrid")


@pytest.mark.parametrize("name", ["Not/AZone", "", "   "])
def test_unknown_timezone_falls_back_to_utc(app_timezone, name: str) -> None:
    app_timezone(name)

    assert get_app_timezone() is timezone.utc


def test_stored_values_are_app_local_and_naive(app_timezone) -> None:
    app_timezone("Europe/Madrid")
    noon_utc = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)

    stored = ensure_app_naive_datetime(noon_utc)

    assert stored == datetime(2025, 1, 15, 13, 0)
    assert ensure_app_timezone(stored) == noon_utc
    assert ensure_app_timezone(None) is None
    assert ensure_app_naive_datetime(None) is None
