"""
Reporting window selection
"""
from datetime import datetime, timedelta
from typing import Union

from ..core.errors import InvalidTimeRangeError
from ..core.temporal import as_utc
from ..models.dashboard import TimeRange

RANGE_DAYS = {
    TimeRange.LAST_7_DAYS: 7,
    TimeRange.LAST_30_DAYS: 30,
    TimeRange.LAST_90_DAYS: 90,
    TimeRange.LAST_YEAR: 365,
}


def parse_time_range(value: Union[TimeRange, str]) -> TimeRange:
    """Coerce a range token, raising InvalidTimeRangeError for anything else"""
    if isinstance(value, TimeRange):
        return value
    try:
        return TimeRange(value)
    except ValueError:
        raise InvalidTimeRangeError(value, allowed=[r.value for r in TimeRange]) from None


def window_start(time_range: Union[TimeRange, str], now: datetime) -> datetime:
    """First instant (inclusive) of the reporting window ending at ``now``"""
    return as_utc(now) - timedelta(days=RANGE_DAYS[parse_time_range(time_range)])
