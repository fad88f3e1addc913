"""
Timestamp normalization

Records coming from the data channels carry their timestamps in one of three
encodings: a native ``datetime``, an ISO-8601 string, or a boxed store
timestamp exposing ``to_datetime()``. Everything downstream compares
timezone-aware UTC datetimes, so every read goes through
``normalize_timestamp``.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Optional, Protocol, Union, runtime_checkable

logger = logging.getLogger(__name__)

# Sentinel for "unknown / very old"
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@runtime_checkable
class SupportsToDatetime(Protocol):
    """Boxed store timestamp (e.g. a document-store Timestamp object)"""

    def to_datetime(self) -> datetime: ...


RawTimestamp = Union[datetime, str, SupportsToDatetime, None]


def as_utc(value: datetime) -> datetime:
    # Naive values are stored as UTC by every writer we know of
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_iso8601(value: str) -> Optional[datetime]:
    """Parse an ISO-8601 string, returning None when it is not one"""
    text = value.strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def normalize_timestamp(raw: Any) -> datetime:
    """
    Convert a raw timestamp into a timezone-aware UTC-comparable datetime.

    Dispatch order matters and is fixed:
        1. None            -> EPOCH
        2. datetime        -> unchanged (naive values get tzinfo=UTC)
        3. str             -> ISO-8601 parse, EPOCH when unparsable
        4. to_datetime()   -> accessor result

    Anything else also maps to EPOCH. Malformed input never raises.
    """
    if raw is None:
        return EPOCH

    if isinstance(raw, datetime):
        return as_utc(raw)

    if isinstance(raw, str):
        parsed = parse_iso8601(raw)
        if parsed is None:
            logger.debug("Unparsable timestamp string %r, using epoch", raw)
            return EPOCH
        return as_utc(parsed)

    accessor = getattr(raw, "to_datetime", None)
    if callable(accessor):
        try:
            value = accessor()
        except Exception as e:
            logger.debug("Timestamp accessor failed (%s), using epoch", e)
            return EPOCH
        if not isinstance(value, datetime):
            logger.debug("Timestamp accessor returned %s, using epoch", type(value).__name__)
            return EPOCH
        return as_utc(value)

    logger.debug("Unsupported timestamp type %s, using epoch", type(raw).__name__)
    return EPOCH
