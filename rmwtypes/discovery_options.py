"""Options controlling how nodes discover each other."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from rmwtypes.errors import InvalidArgumentError

__all__ = [
    "STATIC_PEERS_MAX_LENGTH",
    "AutomaticDiscoveryRange",
    "DiscoveryOptions",
    "discovery_options_copy",
]

STATIC_PEERS_MAX_LENGTH = 256


class AutomaticDiscoveryRange(IntEnum):
    """How far nodes may be discovered automatically."""

    NOT_SET = 0
    OFF = 1
    LOCALHOST = 2
    SUBNET = 3
    SYSTEM_DEFAULT = 4


def _peer_key(peer: str) -> str:
    # Peer addresses are compared over at most the storage length.
    return peer[:STATIC_PEERS_MAX_LENGTH]


@dataclass(eq=False)
class DiscoveryOptions:
    """Discovery range and the list of manually specified peers.

    A freshly built instance is zero initialized.
    """

    automatic_discovery_range: AutomaticDiscoveryRange = AutomaticDiscoveryRange.NOT_SET
    static_peers: list[str] = field(default_factory=list)

    @property
    def static_peers_count(self) -> int:
        return len(self.static_peers)

    def _is_zero_initialized(self) -> bool:
        return not self.static_peers

    def init(self, size: int) -> None:
        """Make room for ``size`` static peers, each an empty address."""
        if not isinstance(size, int) or isinstance(size, bool) or size < 0:
            raise InvalidArgumentError("size must be a non-negative integer")
        if not self._is_zero_initialized():
            raise InvalidArgumentError("discovery_options must be zero initialized")
        self.static_peers = [""] * size

    def equal(self, other: DiscoveryOptions) -> bool:
        """Compare range and static peers, in order."""
        if other is None:
            raise InvalidArgumentError("other argument is null")
        if not isinstance(other, DiscoveryOptions):
            raise InvalidArgumentError("other is not a DiscoveryOptions")
        if self.automatic_discovery_range != other.automatic_discovery_range:
            return False
        if self.static_peers_count != other.static_peers_count:
            return False
        return all(
            _peer_key(mine) == _peer_key(theirs)
            for mine, theirs in zip(self.static_peers, other.static_peers)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiscoveryOptions):
            return NotImplemented
        return self.equal(other)

    def fini(self) -> None:
        """Release the static peers and return to the zero state."""
        self.automatic_discovery_range = AutomaticDiscoveryRange.NOT_SET
        self.static_peers = []


def discovery_options_copy(src: DiscoveryOptions, dst: DiscoveryOptions) -> None:
    """Deep copy ``src`` into the zero-initialized ``dst``."""
    if src is None:
        raise InvalidArgumentError("src argument is null")
    if dst is None:
        raise InvalidArgumentError("dst argument is null")
    if src is dst:
        raise InvalidArgumentError("src and dst are the same object")
    if not dst._is_zero_initialized():
        raise InvalidArgumentError("dst must be zero initialized")
    dst.automatic_discovery_range = src.automatic_discovery_range
    dst.static_peers = [_peer_key(peer) for peer in src.static_peers]