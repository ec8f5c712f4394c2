"""Quality of service policies, profiles and their string forms."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from rmwtypes.time import Time

__all__ = [
    "QosPolicyKind",
    "HistoryPolicy",
    "ReliabilityPolicy",
    "DurabilityPolicy",
    "LivelinessPolicy",
    "QosProfile",
    "policy_kind_to_str",
    "policy_kind_from_str",
    "policy_value_to_str",
    "durability_policy_from_str",
    "history_policy_from_str",
    "liveliness_policy_from_str",
    "reliability_policy_from_str",
]


class QosPolicyKind(IntEnum):
    INVALID = 1 << 0
    DURABILITY = 1 << 1
    DEADLINE = 1 << 2
    LIVELINESS = 1 << 3
    RELIABILITY = 1 << 4
    HISTORY = 1 << 5
    LIFESPAN = 1 << 6
    DEPTH = 1 << 7
    LIVELINESS_LEASE_DURATION = 1 << 8
    AVOID_ROS_NAMESPACE_CONVENTIONS = 1 << 9


class HistoryPolicy(IntEnum):
    SYSTEM_DEFAULT = 0
    KEEP_LAST = 1
    KEEP_ALL = 2
    UNKNOWN = 3
    BEST_AVAILABLE = 4


class ReliabilityPolicy(IntEnum):
    SYSTEM_DEFAULT = 0
    RELIABLE = 1
    BEST_EFFORT = 2
    UNKNOWN = 3
    BEST_AVAILABLE = 4


class DurabilityPolicy(IntEnum):
    SYSTEM_DEFAULT = 0
    TRANSIENT_LOCAL = 1
    VOLATILE = 2
    UNKNOWN = 3
    BEST_AVAILABLE = 4


class LivelinessPolicy(IntEnum):
    SYSTEM_DEFAULT = 0
    AUTOMATIC = 1
    MANUAL_BY_NODE = 2
    MANUAL_BY_TOPIC = 3
    UNKNOWN = 4
    BEST_AVAILABLE = 5


@dataclass
class QosProfile:
    """A full set of QoS settings; the defaults are the zero profile."""

    history: HistoryPolicy = HistoryPolicy.SYSTEM_DEFAULT
    depth: int = 0
    reliability: ReliabilityPolicy = ReliabilityPolicy.SYSTEM_DEFAULT
    durability: DurabilityPolicy = DurabilityPolicy.SYSTEM_DEFAULT
    deadline: Time = field(default_factory=Time)
    lifespan: Time = field(default_factory=Time)
    liveliness: LivelinessPolicy = LivelinessPolicy.SYSTEM_DEFAULT
    liveliness_lease_duration: Time = field(default_factory=Time)
    avoid_ros_namespace_conventions: bool = False


_VALUE_ENUMS = (DurabilityPolicy, HistoryPolicy, LivelinessPolicy, ReliabilityPolicy)


def policy_kind_to_str(kind: QosPolicyKind) -> str | None:
    """Return the lower-case name of a policy kind, or None if it is invalid."""
    if not isinstance(kind, QosPolicyKind) or kind is QosPolicyKind.INVALID:
        return None
    return kind.name.lower()


def policy_kind_from_str(text: str | None) -> QosPolicyKind:
    """Return the policy kind named by ``text``, or INVALID."""
    if isinstance(text, str):
        for kind in QosPolicyKind:
            if kind is not QosPolicyKind.INVALID and kind.name.lower() == text:
                return kind
    return QosPolicyKind.INVALID


def policy_value_to_str(value: IntEnum) -> str | None:
    """Return the lower-case name of a policy value, or None if it is unknown."""
    if not isinstance(value, _VALUE_ENUMS) or value.name == "UNKNOWN":
        return None
    return value.name.lower()


def _value_from_str(enum: type[IntEnum], text: str | None):
    unknown = enum["UNKNOWN"]
    if isinstance(text, str):
        for member in enum:
            if member is not unknown and member.name.lower() == text:
                return member
    return unknown


def durability_policy_from_str(text: str | None) -> DurabilityPolicy:
    return _value_from_str(DurabilityPolicy, text)


def history_policy_from_str(text: str | None) -> HistoryPolicy:
    return _value_from_str(HistoryPolicy, text)


def liveliness_policy_from_str(text: str | None) -> LivelinessPolicy:
    return _value_from_str(LivelinessPolicy, text)


def reliability_policy_from_str(text: str | None) -> ReliabilityPolicy:
    return _value_from_str(ReliabilityPolicy, text)