"""Interval endpoints over time values.

An endpoint is one boundary of an interval: finite (a timezone-aware
datetime, open or closed) or one of the two infinities. Endpoints form a
total order in which minus infinity is the minimum, plus infinity is the
maximum, and a closed endpoint sorts before an open one at the same value.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, override


class EndpointKind(Enum):
    FINITE = "finite"
    PLUS_INFINITY = "+inf"
    MINUS_INFINITY = "-inf"


@dataclass(frozen=True, kw_only=True, eq=False)
class Endpoint:
    kind: EndpointKind
    value: datetime | None = None
    included: bool = False

    def __post_init__(self) -> None:
        if self.kind is not EndpointKind.FINITE:
            return
        if not isinstance(self.value, datetime):
            raise TypeError(
                f"Finite endpoint value must be a datetime.\n"
                f"Got {type(self.value).__name__!r}: {self.value!r}\n"
                f"Hint: use timebound.util.to_datetime() to convert "
                f"Unix seconds, dates or RFC3339 strings"
            )
        if self.value.tzinfo is None or self.value.utcoffset() is None:
            raise TypeError(
                f"Finite endpoint value must be a timezone-aware datetime.\n"
                f"Got naive datetime: {self.value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )

    def is_finite(self) -> bool:
        return self.kind is EndpointKind.FINITE

    def is_open(self) -> bool:
        """True if the boundary point is excluded. Infinities are always open."""
        if self.kind is not EndpointKind.FINITE:
            return True
        return not self.included

    def is_closed(self) -> bool:
        """True if the boundary point is included. Infinities are never closed."""
        if self.kind is not EndpointKind.FINITE:
            return False
        return self.included

    def equal(self, other: "Endpoint") -> bool:
        """Same kind and, for finite endpoints, same instant and inclusion."""
        if self.kind is not other.kind:
            return False
        if self.kind is not EndpointKind.FINITE:
            return True
        return (
            self._instant() == other._instant() and self.included == other.included
        )

    def before(self, other: "Endpoint") -> bool:
        """True if this endpoint precedes ``other``.

        Minus infinity precedes everything but itself and plus infinity
        precedes nothing. Finite endpoints order by value; at equal values a
        closed endpoint precedes an open one.
        """
        if other.kind is EndpointKind.MINUS_INFINITY:
            return False
        if self.kind is EndpointKind.MINUS_INFINITY:
            return True
        if self.kind is EndpointKind.PLUS_INFINITY:
            return False
        if other.kind is EndpointKind.PLUS_INFINITY:
            return True

        a, b = self._instant(), other._instant()
        if self.included and other.included:
            return a < b
        if self.included and not other.included:
            return a <= b
        return a < b

    def after(self, other: "Endpoint") -> bool:
        """True if this endpoint follows ``other``.

        Mirror of :meth:`before`: plus infinity follows everything but itself
        and minus infinity follows nothing. At equal values an open endpoint
        follows a closed one.
        """
        if other.kind is EndpointKind.PLUS_INFINITY:
            return False
        if self.kind is EndpointKind.PLUS_INFINITY:
            return True
        if self.kind is EndpointKind.MINUS_INFINITY:
            return False
        if other.kind is EndpointKind.MINUS_INFINITY:
            return True

        a, b = self._instant(), other._instant()
        if self.included and other.included:
            return a > b
        if not self.included and other.included:
            return a >= b
        return a > b

    def _finite_value(self) -> datetime:
        assert self.value is not None
        return self.value

    def _instant(self) -> datetime:
        # Same-tzinfo datetime comparison ignores utcoffset and fold, so
        # wall times in a repeated DST hour only order correctly in UTC.
        return self._finite_value().astimezone(timezone.utc)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.equal(other)

    @override
    def __hash__(self) -> int:
        if self.kind is not EndpointKind.FINITE:
            return hash(self.kind)
        return hash((self.kind, self._instant(), self.included))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.before(other)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.after(other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.before(other) or self.equal(other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.after(other) or self.equal(other)

    @override
    def __str__(self) -> str:
        """RFC3339 timestamp for finite endpoints, ``-inf``/``+inf`` otherwise."""
        if self.kind is EndpointKind.MINUS_INFINITY:
            return "-inf"
        if self.kind is EndpointKind.PLUS_INFINITY:
            return "+inf"

        value = self._finite_value()
        text = value.replace(microsecond=0).isoformat()
        if value.utcoffset() == timedelta(0):
            # RFC3339 spells the UTC offset as "Z"
            text = text[: -len("+00:00")] + "Z"
        return text


def open_finite(value: datetime) -> Endpoint:
    """Finite endpoint excluded from the interval it bounds."""
    return Endpoint(kind=EndpointKind.FINITE, value=value, included=False)


def closed_finite(value: datetime) -> Endpoint:
    """Finite endpoint included in the interval it bounds."""
    return Endpoint(kind=EndpointKind.FINITE, value=value, included=True)


def minus_infinity() -> Endpoint:
    return Endpoint(kind=EndpointKind.MINUS_INFINITY)


def plus_infinity() -> Endpoint:
    return Endpoint(kind=EndpointKind.PLUS_INFINITY)


MINUS_INFINITY: Endpoint = minus_infinity()
PLUS_INFINITY: Endpoint = plus_infinity()


def equal(a: Endpoint, b: Endpoint) -> bool:
    return a.equal(b)


def before(a: Endpoint, b: Endpoint) -> bool:
    return a.before(b)


def after(a: Endpoint, b: Endpoint) -> bool:
    return a.after(b)
