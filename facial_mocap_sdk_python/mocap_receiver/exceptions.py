"""
Exceptions raised by the iFacialMocap receiver.
"""

import enum
from typing import Optional


class FacialMocapError(Exception):
    """Base class for all receiver errors."""


class BindError(FacialMocapError, OSError):
    """
    The UDP socket could not be bound (port in use, permission denied, ...).

    Raised once from UdpListener.start(); no background thread is started.
    """

    def __init__(self, port: int, cause: OSError):
        super().__init__(cause.errno, f"Failed to bind UDP port {port}: {cause.strerror or cause}")
        self.port = port
        self.cause = cause


class DecodeErrorKind(enum.Enum):
    ENCODING = "encoding"
    TOO_SHORT = "too_short"
    BAD_NUMBER = "bad_number"
    UNKNOWN_TYPE = "unknown_type"


class DecodeError(FacialMocapError, ValueError):
    """
    A datagram could not be decoded into a frame.

    Attributes:
        kind: DecodeErrorKind describing the failure
        field_index: index of the offending '|' field (BAD_NUMBER only)
    """

    def __init__(self, kind: DecodeErrorKind, message: str = "", field_index: Optional[int] = None):
        self.kind = kind
        self.field_index = field_index
        if not message:
            message = kind.value
        super().__init__(message)
