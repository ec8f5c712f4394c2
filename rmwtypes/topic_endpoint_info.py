"""Information about the publishers and subscriptions of a topic."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import IntEnum

from rmwtypes.errors import InvalidArgumentError
from rmwtypes.qos import QosProfile

__all__ = [
    "GID_STORAGE_SIZE",
    "TYPE_HASH_SIZE",
    "EndpointType",
    "TypeHash",
    "TopicEndpointInfo",
]

GID_STORAGE_SIZE = 16
TYPE_HASH_SIZE = 32


class EndpointType(IntEnum):
    """Kind of endpoint attached to a topic."""

    INVALID = 0
    PUBLISHER = 1
    SUBSCRIPTION = 2


@dataclass(frozen=True)
class TypeHash:
    """A versioned hash of a type description."""

    version: int = 0
    value: bytes = bytes(TYPE_HASH_SIZE)

    def __post_init__(self) -> None:
        if not isinstance(self.version, int) or isinstance(self.version, bool):
            raise InvalidArgumentError("version must be an integer")
        if not 0 <= self.version <= 0xFF:
            raise InvalidArgumentError("version is out of range")
        try:
            value = bytes(self.value)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError("value must be bytes") from exc
        if len(value) != TYPE_HASH_SIZE:
            raise InvalidArgumentError(f"value must hold exactly {TYPE_HASH_SIZE} bytes")
        object.__setattr__(self, "value", value)


def _checked_str(value: str | None, name: str) -> str:
    if value is None:
        raise InvalidArgumentError(f"{name} is null")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string")
    return value


@dataclass
class TopicEndpointInfo:
    """Node, type, gid and QoS of one endpoint on a topic.

    A freshly built instance is zero initialized: no names, an invalid
    endpoint type, an all-zero gid and the zero QoS profile.
    """

    node_name: str | None = None
    node_namespace: str | None = None
    topic_type: str | None = None
    topic_type_hash: TypeHash = field(default_factory=TypeHash)
    endpoint_type: EndpointType = EndpointType.INVALID
    endpoint_gid: bytes = bytes(GID_STORAGE_SIZE)
    qos_profile: QosProfile = field(default_factory=QosProfile)

    def set_topic_type(self, topic_type: str) -> None:
        """Set the name of the topic's type."""
        self.topic_type = _checked_str(topic_type, "topic_type")

    def set_topic_type_hash(self, type_hash: TypeHash) -> None:
        """Set the hash of the topic type's description."""
        if type_hash is None:
            raise InvalidArgumentError("type_hash is null")
        if not isinstance(type_hash, TypeHash):
            raise InvalidArgumentError("type_hash must be a TypeHash")
        self.topic_type_hash = type_hash

    def set_node_name(self, node_name: str) -> None:
        """Set the name of the node owning the endpoint."""
        self.node_name = _checked_str(node_name, "node_name")

    def set_node_namespace(self, node_namespace: str) -> None:
        """Set the namespace of the node owning the endpoint."""
        self.node_namespace = _checked_str(node_namespace, "node_namespace")

    def set_endpoint_type(self, endpoint_type: EndpointType | int) -> None:
        """Set whether the endpoint is a publisher or a subscription."""
        try:
            self.endpoint_type = EndpointType(endpoint_type)
        except ValueError as exc:
            raise InvalidArgumentError("endpoint_type is not a valid endpoint type") from exc

    def set_gid(self, gid: bytes) -> None:
        """Set the endpoint gid, padding it with zeros to the storage size."""
        if gid is None:
            raise InvalidArgumentError("gid is null")
        try:
            data = bytes(gid)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError("gid must be a sequence of bytes") from exc
        if len(data) > GID_STORAGE_SIZE:
            raise InvalidArgumentError("size is more than RMW_GID_STORAGE_SIZE")
        self.endpoint_gid = data.ljust(GID_STORAGE_SIZE, b"\0")

    def set_qos_profile(self, qos_profile: QosProfile) -> None:
        """Set the endpoint's QoS profile to a copy of ``qos_profile``."""
        if qos_profile is None:
            raise InvalidArgumentError("qos_profile is null")
        if not isinstance(qos_profile, QosProfile):
            raise InvalidArgumentError("qos_profile must be a QosProfile")
        self.qos_profile = dataclasses.replace(qos_profile)

    def fini(self) -> None:
        """Release all members and return to the zero-initialized state."""
        zero = TopicEndpointInfo()
        for item in dataclasses.fields(self):
            setattr(self, item.name, getattr(zero, item.name))