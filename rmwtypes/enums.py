"""Small enumerations for context configuration and optional features."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["LocalhostOnly", "Feature"]


class LocalhostOnly(IntEnum):
    """Whether a context may only communicate through localhost."""

    DEFAULT = 0
    ENABLED = 1
    DISABLED = 2


class Feature(IntEnum):
    """Optional middleware features that an implementation may support."""

    MESSAGE_INFO_PUBLICATION_SEQUENCE_NUMBER = 0
    MESSAGE_INFO_RECEPTION_SEQUENCE_NUMBER = 1
    MIDDLEWARE_SUPPORTS_TYPE_DISCOVERY = 2
    MIDDLEWARE_CAN_TAKE_DYNAMIC_MESSAGE = 3