# Re-export schedule components
from .adjustments import (
    get_month_end,
    is_end_of_month,
    month_name,
    start_of_next_month,
)
from .core import BillingPeriod, ScheduleSummary
from .generator import OccurrenceSchedule, enumerate_occurrences, upcoming_dates
from .period import resolve_period
