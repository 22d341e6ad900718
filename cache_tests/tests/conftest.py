import pytest

from core.clock import ManualClock


T0 = 1_700_000_000_000


@pytest.fixture
def clock():
    return ManualClock(T0)
