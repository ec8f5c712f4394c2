"""Durations expressed as seconds plus nanoseconds."""

from __future__ import annotations

from dataclasses import dataclass

from rmwtypes.errors import InvalidArgumentError

__all__ = [
    "INT64_MAX",
    "NSEC_PER_SEC",
    "DURATION_INFINITE",
    "Time",
    "time_total_nsec",
    "time_from_nsec",
    "time_normalize",
    "time_equal",
]

INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1
NSEC_PER_SEC = 1_000_000_000


@dataclass(frozen=True)
class Time:
    """A duration held as unsigned seconds and nanoseconds."""

    sec: int = 0
    nsec: int = 0

    def __post_init__(self) -> None:
        for name in ("sec", "nsec"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidArgumentError(f"{name} must be an integer")
            if not 0 <= value <= UINT64_MAX:
                raise InvalidArgumentError(f"{name} is out of range")


DURATION_INFINITE = Time(INT64_MAX // NSEC_PER_SEC, INT64_MAX % NSEC_PER_SEC)


def time_total_nsec(time: Time) -> int:
    """Return the duration in nanoseconds, saturating at INT64_MAX."""
    max_sec = INT64_MAX // NSEC_PER_SEC
    if time.sec > max_sec:
        return INT64_MAX
    sec_as_nsec = time.sec * NSEC_PER_SEC
    if time.nsec > INT64_MAX - sec_as_nsec:
        return INT64_MAX
    return sec_as_nsec + time.nsec


def time_from_nsec(nanoseconds: int) -> Time:
    """Build a Time from nanoseconds; negative values mean infinite."""
    if nanoseconds < 0:
        return DURATION_INFINITE
    sec, nsec = divmod(nanoseconds, NSEC_PER_SEC)
    return Time(sec, nsec)


def time_normalize(time: Time) -> Time:
    """Return an equal Time whose nanoseconds are below one second."""
    return time_from_nsec(time_total_nsec(time))


def time_equal(left: Time, right: Time) -> bool:
    """Compare two durations by their total nanoseconds."""
    return time_total_nsec(left) == time_total_nsec(right)