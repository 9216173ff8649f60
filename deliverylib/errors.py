"""Exception types raised by the delivery schedule engine."""


class DeliveryLibError(Exception):
    """Base class for deliverylib errors."""


class InvalidScheduleInput(DeliveryLibError, ValueError):
    """Raised when a caller passes inputs the engine cannot evaluate.

    Covers non-positive quantities, negative prices, malformed weekday
    selections, unknown frequency names and unparseable dates.
    """
