from .endpoint import (
    MINUS_INFINITY,
    PLUS_INFINITY,
    Endpoint,
    EndpointKind,
    after,
    before,
    closed_finite,
    equal,
    minus_infinity,
    open_finite,
    plus_infinity,
)
from .util import DAY, HOUR, MINUTE, SECOND, WEEK, parse_timestamp, to_datetime

__all__ = [
    "Endpoint",
    "EndpointKind",
    "open_finite",
    "closed_finite",
    "minus_infinity",
    "plus_infinity",
    "MINUS_INFINITY",
    "PLUS_INFINITY",
    "equal",
    "before",
    "after",
    "parse_timestamp",
    "to_datetime",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
]
