# iterassert/logging_layer.py
# Event log for match outcomes.
#
# Scope: in-memory, event-sourced record of MATCH_PASSED / MATCH_FAILED
# events. No file IO. No global mutable state; every EventLog instance is
# owned by its caller and fully independent.
#
# Canonical import:
#   from iterassert.logging_layer import EventLog, Event, EventFilter
#
# Payloads carry kinds, reasons, indices and lengths only. Element values
# are never stored: they may be unhashable, unrepresentable or very large.

# ===========================================================================
# SECTION 1 -- STDLIB IMPORTS
# ===========================================================================

import hashlib
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

# ===========================================================================
# SECTION 2 -- CONSTANTS
# ===========================================================================

# Field separator used inside the hash preimage.
_HASH_SEP: str = "|"

# ===========================================================================
# SECTION 3 -- DATACLASSES: Event, EventFilter
# ===========================================================================

@dataclass(frozen=True)
class Event:
    """
    Record of a single match outcome.

    Fields
    ------
    id        : Deterministic identifier derived from the log's counter.
    type      : MATCH_PASSED or MATCH_FAILED (any non-empty string accepted).
    timestamp : Caller-supplied datetime.
    data      : Key-value payload as given by the caller.
    hash      : SHA-256 hex digest over (id, type, timestamp, data).
    """
    id: str
    type: str
    timestamp: datetime
    data: Dict[str, Any]
    hash: str


@dataclass(frozen=True)
class EventFilter:
    """
    Filter specification for EventLog.query_events().

    Omitted fields apply no constraint. limit keeps the oldest matches.
    """
    event_type: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    limit: Optional[int] = None


# ===========================================================================
# SECTION 4 -- INTERNAL HELPERS
# ===========================================================================

def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _compute_hash(
    event_id: str,
    event_type: str,
    timestamp: datetime,
    data: Dict[str, Any],
) -> str:
    """
    Deterministic SHA-256 hex digest for an event.

    Preimage: id | type | timestamp.isoformat() | repr(sorted(data.items()))
    Sorting the items makes the digest independent of dict insertion order.
    """
    preimage: str = (
        event_id
        + _HASH_SEP
        + event_type
        + _HASH_SEP
        + timestamp.isoformat()
        + _HASH_SEP
        + repr(sorted(data.items()))
    )
    return hashlib.sha256(preimage.encode("ascii", errors="replace")).hexdigest()


def _make_event_id(counter: int) -> str:
    return "EVT-{:016d}".format(counter)


# ===========================================================================
# SECTION 5 -- EventLog
# ===========================================================================

class EventLog:
    """
    In-memory event log for match outcomes.

    log_event() raises LoggingError on any invalid input instead of
    discarding the event. Events are kept in insertion order.
    """

    def __init__(self) -> None:
        self._store: List[Event] = []
        self._counter: int = 0

    def log_event(self, event_type: str, data: Dict[str, Any], timestamp: datetime) -> str:
        """
        Record one event and return its assigned ID.

        Raises
        ------
        LoggingError : If event_type is empty, data is not a dict, or
                       timestamp is not a datetime instance.
        """
        if not event_type:
            raise LoggingError("event_type must be a non-empty string")
        if not isinstance(data, dict):
            raise LoggingError(
                "data must be a dict; got: {}".format(type(data))
            )
        if not isinstance(timestamp, datetime):
            raise LoggingError(
                "timestamp must be a datetime instance; got: {}".format(type(timestamp))
            )

        self._counter += 1
        event_id: str = _make_event_id(self._counter)
        payload: Dict[str, Any] = dict(data)
        event = Event(
            id=event_id,
            type=event_type,
            timestamp=timestamp,
            data=payload,
            hash=_compute_hash(event_id, event_type, timestamp, payload),
        )
        self._store.append(event)
        return event_id

    def query_events(self, filter: EventFilter) -> List[Event]:
        """
        Return events matching filter, oldest first.

        Filtering order: event_type, start_time (inclusive), end_time
        (inclusive), then limit truncation.
        """
        if filter is None:
            raise LoggingError("filter must not be None")

        results: List[Event] = []
        for event in self._store:
            if filter.event_type is not None and event.type != filter.event_type:
                continue
            if filter.start_time is not None and event.timestamp < filter.start_time:
                continue
            if filter.end_time is not None and event.timestamp > filter.end_time:
                continue
            results.append(event)

        if filter.limit is not None:
            results = results[: filter.limit]

        return results

    def event_count(self) -> int:
        return len(self._store)


# ===========================================================================
# SECTION 6 -- EXCEPTIONS
# ===========================================================================

class LoggingError(Exception):
    """
    Raised by EventLog when an invariant is violated.

    Never silently swallowed; call sites handle it or let it propagate.
    """
