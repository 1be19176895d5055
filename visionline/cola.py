"""CoLa protocol enumerations and the transport and authentication interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class CoLaCommandType(IntEnum):
    """CoLa command types."""

    NETWORK_ERROR = -2
    UNKNOWN = -1
    READ_VARIABLE = 0
    READ_VARIABLE_RESPONSE = 1
    WRITE_VARIABLE = 2
    WRITE_VARIABLE_RESPONSE = 3
    METHOD_INVOCATION = 4
    METHOD_RETURN_VALUE = 5
    COLA_ERROR = 6


class UserLevel(IntEnum):
    """CoLa user levels."""

    RUN = 0
    OPERATOR = 1
    MAINTENANCE = 2
    AUTHORIZED_CLIENT = 3
    SERVICE = 4


class Authentication(ABC):
    """Logs a session in and out at a given user level."""

    @abstractmethod
    def login(self, user_level: UserLevel, password: str) -> bool:
        """Log in; return whether it succeeded."""

    @abstractmethod
    def logout(self) -> bool:
        """Log out; return whether it succeeded."""


class Transport(ABC):
    """A byte stream to a device. Failures raise OSError."""

    @abstractmethod
    def shutdown(self) -> None:
        """Close the connection."""

    def send(self, data: Any) -> int:
        """Send all bytes of data, which may be any buffer or a sequence of byte values.

        Returns the number of bytes sent.
        """
        try:
            payload = memoryview(data).cast("B").tobytes()
        except TypeError:
            payload = bytes(data)
        return self._send(payload)

    @abstractmethod
    def _send(self, payload: bytes) -> int:
        """Send every byte of payload and return how many were sent."""

    @abstractmethod
    def recv(self, max_bytes: int) -> bytes:
        """Receive at most max_bytes bytes."""

    @abstractmethod
    def read(self, n_bytes: int) -> bytes:
        """Receive exactly n_bytes bytes."""


@dataclass
class SockRecord:
    """Holds a socket handle that may be absent."""

    socket: Any = None

    def is_valid(self) -> bool:
        return self.socket is not None

    def invalidate(self) -> None:
        self.socket = None