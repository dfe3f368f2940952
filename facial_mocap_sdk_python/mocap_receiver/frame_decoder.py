"""
Frame decoder for the iFacialMocap UDP text protocol.

Each datagram carries one '|'-delimited message:

    iFacialMocap_head|<rx>|<ry>|<rz>|<x>|<y>|<z>
    iFacialMocap_blendShapes|<name1>&<value1>|<name2>&<value2>|...

Decoding is pure and stateless, so it is safe to call from any thread.
"""

import math
import re
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

from ..utils.quat_utils import euler_to_quat
from .exceptions import DecodeError, DecodeErrorKind


HEAD_TAG = "iFacialMocap_head"
BLEND_SHAPES_TAG = "iFacialMocap_blendShapes"

FIELD_SEPARATOR = "|"
PAIR_SEPARATOR = "&"

# tag + rx, ry, rz, x, y, z
HEAD_FIELD_COUNT = 7

# Base-10 only: no locale separators, no nan/inf, no hex, no underscores.
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_ASCII_WHITESPACE = " \t\r\n"


@dataclass(frozen=True)
class HeadPose:
    """
    Head rotation (degrees) and position as sent by iFacialMocap.

    Immutable, so a stored instance can be handed to readers as-is.
    """

    rx: float = 0.0
    ry: float = 0.0
    rz: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def position(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def euler(self) -> Tuple[float, float, float]:
        return (self.rx, self.ry, self.rz)

    @property
    def quaternion(self) -> np.ndarray:
        """Orientation as a (w, x, y, z) quaternion, see euler_to_quat."""
        return euler_to_quat(self.rx, self.ry, self.rz)


@dataclass(frozen=True)
class BlendShapeUpdate:
    """
    Blend shape weights decoded from one datagram.

    Attributes:
        weights: (name, value) pairs in message order
        skipped: number of malformed name&value fields that were dropped
    """

    weights: Tuple[Tuple[str, float], ...] = ()
    skipped: int = 0


DecodedFrame = Union[HeadPose, BlendShapeUpdate]


def parse_number(text: str) -> float:
    """
    Parse a decimal number using the protocol's float grammar.

    Raises:
        ValueError: if text is not a plain base-10 number
    """
    stripped = text.strip(_ASCII_WHITESPACE)
    if not _NUMBER_RE.fullmatch(stripped):
        raise ValueError(f"Not a decimal number: {text!r}")
    value = float(stripped)
    # Exponent overflow, e.g. 1e999
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text!r}")
    return value


def _decode_head(fields) -> HeadPose:
    if len(fields) < HEAD_FIELD_COUNT:
        raise DecodeError(
            DecodeErrorKind.TOO_SHORT,
            f"Head message has {len(fields)} fields, expected {HEAD_FIELD_COUNT}",
        )
    # Senders may terminate the message with a trailing '|'
    if len(fields) == HEAD_FIELD_COUNT + 1 and not fields[-1].strip(_ASCII_WHITESPACE):
        fields = fields[:HEAD_FIELD_COUNT]
    if len(fields) > HEAD_FIELD_COUNT:
        raise DecodeError(
            DecodeErrorKind.BAD_NUMBER,
            f"Unexpected field in head message: {fields[HEAD_FIELD_COUNT]!r}",
            field_index=HEAD_FIELD_COUNT,
        )

    values = []
    for index in range(1, HEAD_FIELD_COUNT):
        try:
            values.append(parse_number(fields[index]))
        except ValueError:
            raise DecodeError(
                DecodeErrorKind.BAD_NUMBER,
                f"Bad head value at field {index}: {fields[index]!r}",
                field_index=index,
            ) from None

    rx, ry, rz, x, y, z = values
    return HeadPose(rx=rx, ry=ry, rz=rz, x=x, y=y, z=z)


def _decode_blend_shapes(fields) -> BlendShapeUpdate:
    weights = []
    skipped = 0
    for field in fields[1:]:
        parts = field.split(PAIR_SEPARATOR)
        if len(parts) != 2 or not parts[0]:
            skipped += 1
            continue
        name, value = parts
        try:
            weights.append((name, parse_number(value)))
        except ValueError:
            skipped += 1
    return BlendShapeUpdate(weights=tuple(weights), skipped=skipped)


def decode_text(message: str) -> DecodedFrame:
    """
    Decode one protocol message that is already text.

    Returns:
        HeadPose or BlendShapeUpdate

    Raises:
        DecodeError: TOO_SHORT, BAD_NUMBER or UNKNOWN_TYPE
    """
    fields = message.split(FIELD_SEPARATOR)
    if len(fields) < 2:
        raise DecodeError(DecodeErrorKind.TOO_SHORT, "Message has fewer than 2 fields")

    tag = fields[0]
    if tag == HEAD_TAG:
        return _decode_head(fields)
    if tag == BLEND_SHAPES_TAG:
        return _decode_blend_shapes(fields)
    raise DecodeError(DecodeErrorKind.UNKNOWN_TYPE, f"Unknown message type: {tag[:64]!r}")


def decode(raw: bytes) -> DecodedFrame:
    """
    Decode a raw datagram into a frame.

    Args:
        raw: Datagram payload as received from the socket

    Returns:
        HeadPose for head messages, BlendShapeUpdate for blend shape messages

    Raises:
        DecodeError: if the payload is not UTF-8, too short, carries a bad
            head value or an unknown message type
    """
    try:
        message = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(DecodeErrorKind.ENCODING, f"Datagram is not valid UTF-8: {e}") from None
    return decode_text(message)
