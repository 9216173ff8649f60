from datetime import date

import pytest

from deliverylib.conventions.billing import EXACT, set_default_convention
from deliverylib.utils.clock import FixedClock


@pytest.fixture(autouse=True)
def exact_convention():
    set_default_convention(EXACT)
    yield
    set_default_convention(None)


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(date(2026, 1, 15))
