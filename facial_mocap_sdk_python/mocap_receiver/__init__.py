"""
FacialMocapReceiver - Real-time iFacialMocap data receiver over UDP.

This package provides tools for receiving face tracking data (head pose and
blend shape weights) from the iFacialMocap app over UDP.

Example usage:
    from facial_mocap_sdk_python.mocap_receiver import FacialMocapReceiver

    # Initialize receiver
    receiver = FacialMocapReceiver(port=49983)

    # Start receiving
    receiver.attach()

    # Main loop
    while running:
        weights = receiver.get_all_weights()
        print(f"jawOpen={weights.get('jawOpen', 0.0):.2f}, head={receiver.get_head_euler()}")

    # Cleanup
    receiver.detach()

Wire format (one message per datagram):
    iFacialMocap_head|rx|ry|rz|x|y|z                  # degrees, then position
    iFacialMocap_blendShapes|name1&value1|name2&value2|...
"""

from .exceptions import BindError, DecodeError, DecodeErrorKind, FacialMocapError
from .frame_decoder import BlendShapeUpdate, HeadPose, decode, decode_text
from .mocap_receiver import DEFAULT_PORT, FacialMocapReceiver
from .pose_store import PoseStore
from .udp_listener import UdpListener

__all__ = [
    "FacialMocapReceiver",
    "UdpListener",
    "PoseStore",
    "HeadPose",
    "BlendShapeUpdate",
    "decode",
    "decode_text",
    "BindError",
    "DecodeError",
    "DecodeErrorKind",
    "FacialMocapError",
    "DEFAULT_PORT",
]
