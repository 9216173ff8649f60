"""Hard-coded reference scenarios for the schedule engine (2026 is not a leap year)."""

from datetime import date
from decimal import Decimal

PERIOD_SCENARIOS = [
    {
        "name": "Standard Date (Jan 15)",
        "start": date(2026, 1, 15),
        "expected_start": date(2026, 1, 15),
        "expected_end": date(2026, 1, 31),
        "rolled": False,
        "label": "Rest of January",
    },
    {
        "name": "Last Day - 31st (Jan 31)",
        "start": date(2026, 1, 31),
        "expected_start": date(2026, 2, 1),
        "expected_end": date(2026, 2, 28),
        "rolled": True,
        "label": "Full Month (February)",
    },
    {
        "name": "Last Day - 30th (Apr 30)",
        "start": date(2026, 4, 30),
        "expected_start": date(2026, 5, 1),
        "expected_end": date(2026, 5, 31),
        "rolled": True,
        "label": "Full Month (May)",
    },
    {
        "name": "Last Day - Feb 28 (Non-Leap)",
        "start": date(2026, 2, 28),
        "expected_start": date(2026, 3, 1),
        "expected_end": date(2026, 3, 31),
        "rolled": True,
        "label": "Full Month (March)",
    },
    {
        "name": "First Day of Month (Mar 1)",
        "start": date(2026, 3, 1),
        "expected_start": date(2026, 3, 1),
        "expected_end": date(2026, 3, 31),
        "rolled": False,
        "label": "Rest of March",
    },
    {
        "name": "Year End (Dec 31)",
        "start": date(2026, 12, 31),
        "expected_start": date(2027, 1, 1),
        "expected_end": date(2027, 1, 31),
        "rolled": True,
        "label": "Full Month (January)",
    },
    {
        "name": "Leap Day (Feb 29, 2028)",
        "start": date(2028, 2, 29),
        "expected_start": date(2028, 3, 1),
        "expected_end": date(2028, 3, 31),
        "rolled": True,
        "label": "Full Month (March)",
    },
    {
        "name": "Feb 28 in a Leap Year",
        "start": date(2028, 2, 28),
        "expected_start": date(2028, 2, 28),
        "expected_end": date(2028, 2, 29),
        "rolled": False,
        "label": "Rest of February",
    },
    {
        "name": "First Day of Year (Jan 1)",
        "start": date(2026, 1, 1),
        "expected_start": date(2026, 1, 1),
        "expected_end": date(2026, 1, 31),
        "rolled": False,
        "label": "Rest of January",
    },
]

BILLING_SCENARIOS = [
    {
        "name": "Daily from Jan 15",
        "start": date(2026, 1, 15),
        "frequency": "DAILY",
        "custom_days": None,
        "quantity": 1,
        "price": Decimal("10"),
        "deliveries": 17,
        "amount": Decimal("170"),
    },
    {
        "name": "Alternate days from Jan 15",
        "start": date(2026, 1, 15),
        "frequency": "ALTERNATIVE_DAYS",
        "custom_days": None,
        "quantity": 2,
        "price": Decimal("10"),
        "deliveries": 9,
        "amount": Decimal("180"),
    },
    {
        # Feb 2026 starts on a Sunday: 1, 3, ..., 27
        "name": "Alternate days after rollover",
        "start": date(2026, 1, 31),
        "frequency": "ALTERNATIVE_DAYS",
        "custom_days": None,
        "quantity": 1,
        "price": Decimal("25.50"),
        "deliveries": 14,
        "amount": Decimal("357.00"),
    },
    {
        # Mondays 19, 26 and Wednesdays 21, 28
        "name": "Mon/Wed from Jan 15",
        "start": date(2026, 1, 15),
        "frequency": "CUSTOM_DAYS",
        "custom_days": [1, 3],
        "quantity": 3,
        "price": Decimal("12.5"),
        "deliveries": 4,
        "amount": Decimal("150.0"),
    },
    {
        # March 2026 Sundays: 1, 8, 15, 22, 29
        "name": "Sundays in March",
        "start": date(2026, 3, 1),
        "frequency": "CUSTOM_DAYS",
        "custom_days": ["SUNDAY"],
        "quantity": 1,
        "price": Decimal("5"),
        "deliveries": 5,
        "amount": Decimal("25"),
    },
    {
        "name": "No weekdays selected",
        "start": date(2026, 3, 1),
        "frequency": "CUSTOM_DAYS",
        "custom_days": [],
        "quantity": 4,
        "price": Decimal("40"),
        "deliveries": 0,
        "amount": Decimal("0"),
    },
]
