# Re-export convention components
from .billing import (
    CENTS,
    EXACT,
    BillingConvention,
    get_default_convention,
    set_default_convention,
)
from .frequency import build_custom_days, frequency_label, parse_frequency
from .types import (
    ALTERNATE_DAYS,
    DAILY,
    AlternateDays,
    CustomDays,
    Daily,
    DeliveryFrequency,
    FrequencyType,
    Weekday,
)
from .weekdays import (
    convert_days_to_names,
    convert_days_to_numeric,
    short_day_names,
    to_weekday,
)
