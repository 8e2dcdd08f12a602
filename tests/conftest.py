from datetime import datetime, timezone as dt_timezone

import pytest
from django.utils import timezone


@pytest.fixture
def pin_now(monkeypatch):
    """Pin django.utils.timezone.now() to the given datetime"""

    def pin(value):
        monkeypatch.setattr(timezone, 'now', lambda: value)
        return value

    return pin


@pytest.fixture
def magh_6_2082(pin_now):
    # 2026-01-19 20:00 UTC is 2026-01-20 01:45 in Kathmandu, i.e. BS 2082/10/06
    return pin_now(datetime(2026, 1, 19, 20, 0, tzinfo=dt_timezone.utc))
