"""Small request option types: timeouts, unix sockets, HTTP versions, user agents."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum, auto

__all__ = ["Timeout", "UnixSocket", "HttpVersionCode", "HttpVersion", "UserAgent"]

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)


@dataclass(frozen=True)
class Timeout:
    """A request timeout, given in milliseconds or as a timedelta."""

    ms: int | timedelta

    def __post_init__(self) -> None:
        if isinstance(self.ms, timedelta):
            object.__setattr__(self, "ms", self.ms // timedelta(milliseconds=1))
        elif not isinstance(self.ms, int) or isinstance(self.ms, bool):
            raise TypeError("timeout must be an int of milliseconds or a timedelta")

    def milliseconds(self) -> int:
        """Return the timeout in milliseconds, checked against the native range."""
        if self.ms > _LONG_MAX:
            raise OverflowError(f"Timeout: timeout value overflow: {self.ms} ms.")
        if self.ms < _LONG_MIN:
            raise OverflowError(f"Timeout: timeout value underflow: {self.ms} ms.")
        return int(self.ms)


@dataclass(frozen=True)
class UnixSocket:
    """The path of a unix domain socket to connect through."""

    path: str

    def socket_path(self) -> str:
        return self.path


class HttpVersionCode(Enum):
    """HTTP protocol versions a request can ask for."""

    VERSION_NONE = auto()
    VERSION_1_0 = auto()
    VERSION_1_1 = auto()
    VERSION_2_0 = auto()
    VERSION_2_0_TLS = auto()
    VERSION_2_0_PRIOR_KNOWLEDGE = auto()
    VERSION_3_0 = auto()


@dataclass(frozen=True)
class HttpVersion:
    """The HTTP version to use; by default the transport chooses."""

    code: HttpVersionCode = HttpVersionCode.VERSION_NONE


class UserAgent(str):
    """The User-Agent string sent with a request."""

    def __new__(cls, value: str = "") -> UserAgent:
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"UserAgent({str.__repr__(self)})"