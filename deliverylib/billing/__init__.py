# Re-export billing components
from .aggregator import aggregate, check_quantity, to_price
from .engine import (
    ScheduleEvaluation,
    SubscriptionTerms,
    evaluate,
    get_subscription_details,
)
from .report import schedule_table
