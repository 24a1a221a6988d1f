from __future__ import annotations

from datetime import datetime, timezone

import pytest

from api.client import OpenMeteoClient


@pytest.fixture
def client() -> OpenMeteoClient:
    return OpenMeteoClient()


@pytest.fixture
def now() -> datetime:
    return datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
