"""Input checks shared by the record services.

Records are validated when they are written. The analytics functions trust
whatever is stored.
"""

from decimal import Decimal
from typing import Optional, Union

from ridelog.domain.errors import (
    ValidationError,
    negative_value,
    percentage_out_of_range,
)


def require_non_negative(field_name: str, value: Optional[Union[Decimal, float]]) -> None:
    """Raise ValidationError if ``value`` is below zero (None is accepted)."""
    if value is not None and value < 0:
        raise ValidationError(negative_value(field_name, value))


def require_percentage(value: int) -> None:
    """Raise ValidationError unless ``value`` is within 0-100.

    Out-of-range values are rejected rather than clamped.
    """
    if not 0 <= value <= 100:
        raise ValidationError(percentage_out_of_range(value))
