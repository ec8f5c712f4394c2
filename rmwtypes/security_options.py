"""Security options: enforcement mode and the security root path."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from rmwtypes.errors import InvalidArgumentError

__all__ = [
    "SecurityEnforcement",
    "SecurityOptions",
    "zero_initialized_security_options",
    "default_security_options",
]


class SecurityEnforcement(IntEnum):
    PERMISSIVE = 0
    ENFORCE = 1


@dataclass
class SecurityOptions:
    """How security is enforced and where its files live."""

    enforce_security: SecurityEnforcement = SecurityEnforcement.PERMISSIVE
    security_root_path: str | None = None

    def copy_from(self, src: SecurityOptions) -> None:
        """Replace this object's settings with those of ``src``."""
        if src is None:
            raise InvalidArgumentError("src argument is null")
        if not isinstance(src, SecurityOptions):
            raise InvalidArgumentError("src is not a SecurityOptions")
        self.security_root_path = src.security_root_path
        self.enforce_security = src.enforce_security

    def set_root_path(self, security_root_path: str) -> None:
        """Set the security root path."""
        if security_root_path is None:
            raise InvalidArgumentError("security_root_path argument is null")
        if not isinstance(security_root_path, str):
            raise InvalidArgumentError("security_root_path must be a string")
        self.security_root_path = security_root_path

    def fini(self) -> None:
        """Reset to the zero-initialized state."""
        self.enforce_security = SecurityEnforcement.PERMISSIVE
        self.security_root_path = None


def zero_initialized_security_options() -> SecurityOptions:
    return SecurityOptions(SecurityEnforcement.PERMISSIVE, None)


def default_security_options() -> SecurityOptions:
    return SecurityOptions(SecurityEnforcement.PERMISSIVE, None)