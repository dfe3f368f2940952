"""
Facial Mocap SDK Python - iFacialMocap face tracking receiver.

This package receives head pose and blend shape weights streamed by the
iFacialMocap app over UDP and keeps the latest values ready for a renderer
or retargeter running on its own loop.

Main classes:
    - FacialMocapReceiver: Listener lifecycle and read API
    - PoseStore: Thread-safe latest head pose / blend shape weights
    - UdpListener: Background UDP receive loop

Example usage:
    from facial_mocap_sdk_python import FacialMocapReceiver

    # Initialize
    receiver = FacialMocapReceiver(port=49983)

    # Start receiving
    receiver.attach()
    print(f"Enter {receiver.local_address()} in the iFacialMocap app")

    # Main loop
    while running:
        if receiver.has_new_data():
            jaw_open = receiver.get_weight("jawOpen")
            head_pos = receiver.get_head_position()    # (x, y, z)
            head_rot = receiver.get_head_rotation()    # (w, x, y, z) quaternion
            ...

    # Cleanup
    receiver.detach()
"""

from .mocap_receiver import (
    BindError,
    BlendShapeUpdate,
    DecodeError,
    DecodeErrorKind,
    FacialMocapReceiver,
    HeadPose,
    PoseStore,
    UdpListener,
    decode,
)
from .utils import euler_to_quat, generate_heads_tall_blocks, quat_to_euler

__version__ = "0.1.0"
__all__ = [
    "FacialMocapReceiver",
    "PoseStore",
    "UdpListener",
    "HeadPose",
    "BlendShapeUpdate",
    "decode",
    "BindError",
    "DecodeError",
    "DecodeErrorKind",
    "euler_to_quat",
    "quat_to_euler",
    "generate_heads_tall_blocks",
]
