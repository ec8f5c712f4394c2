"""Fixed-capacity sequences of messages and of message infos."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rmwtypes.errors import InvalidArgumentError

__all__ = ["MessageSequence", "MessageInfoSequence"]


def _checked_size(size: int) -> int:
    if not isinstance(size, int) or isinstance(size, bool) or size < 0:
        raise InvalidArgumentError("size must be a non-negative integer")
    return size


@dataclass
class _Sequence:
    data: list[Any] = field(default_factory=list)
    size: int = 0
    capacity: int = 0

    def init(self, size: int) -> None:
        """Reserve room for ``size`` entries; none of them is valid yet."""
        capacity = _checked_size(size)
        self.data = [None] * capacity
        self.size = 0
        self.capacity = capacity

    def fini(self) -> None:
        """Drop the storage and zero every member."""
        self.data = []
        self.size = 0
        self.capacity = 0


@dataclass
class MessageSequence(_Sequence):
    """A sequence of messages; ``size`` entries of ``data`` are valid."""

    def init(self, size: int) -> None:
        """Reserve room for ``size`` messages."""
        super().init(size)

    def fini(self) -> None:
        """Drop the storage; the messages themselves are left alone."""
        super().fini()


@dataclass
class MessageInfoSequence(_Sequence):
    """A sequence of message infos; ``size`` entries of ``data`` are valid."""

    def init(self, size: int) -> None:
        """Reserve room for ``size`` message infos."""
        super().init(size)

    def fini(self) -> None:
        """Drop the storage and zero every member."""
        super().fini()