"""Input validation utilities."""

import re
from typing import Union

from ..ndevtop.constants import MAX_INTERVAL
from ..ndevtop.exceptions import ValidationError

_DIGITS = re.compile(r'^[0-9]+$')

def validate_interval(value: Union[str, int], maximum: int = MAX_INTERVAL) -> int:
    """Validate a refresh interval in whole seconds.

    Returns the interval as an int; raises ValidationError unless the value
    is a positive integer no larger than ``maximum``.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid interval: {value!r}")
    if isinstance(value, int):
        seconds = value
    else:
        text = (value or '').strip()
        if not _DIGITS.match(text):
            raise ValidationError(f"Invalid interval: {value!r}")
        if len(text.lstrip('0')) > len(str(maximum)):
            raise ValidationError(f"Interval must not exceed {maximum} seconds")
        seconds = int(text)

    if seconds <= 0:
        raise ValidationError(f"Interval must be larger than 0, got {seconds}")
    if seconds > maximum:
        raise ValidationError(f"Interval must not exceed {maximum} seconds")
    return seconds

def validate_name_filter(value: str, max_length: int) -> str:
    """Validate a device name filter; the text is kept verbatim."""
    if value is None:
        raise ValidationError("Missing name filter")
    if len(value) > max_length:
        raise ValidationError(f"Name filter longer than {max_length} characters")
    return value
