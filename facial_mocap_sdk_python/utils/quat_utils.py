"""
Quaternion utility functions for head pose conversion.

All quaternions are in (w, x, y, z) format unless otherwise specified.

iFacialMocap sends head rotation as Euler angles in degrees. They are
composed the way Unity's Quaternion.Euler does it: extrinsic rotations
about Z, then X, then Y (R = Ry @ Rx @ Rz). No handedness conversion is
applied; the result stays in the sender's frame.
"""

import numpy as np
from scipy.spatial.transform import Rotation as R


# scipy lowercase sequence = extrinsic axes
EULER_SEQUENCE = "zxy"


def quat_normalize(q):
    """
    Normalize quaternion (w, x, y, z format).

    Args:
        q: Quaternion (w, x, y, z)

    Returns:
        Normalized quaternion, identity if q is degenerate
    """
    q = np.asarray(q, dtype=np.float64)
    norm = np.sqrt(q[0]*q[0] + q[1]*q[1] + q[2]*q[2] + q[3]*q[3])
    if norm < 1e-8:
        return np.array([1.0, 0.0, 0.0, 0.0])
    return q / norm


def euler_to_quat(rx, ry, rz):
    """
    Convert iFacialMocap head angles to a quaternion.

    Args:
        rx: Rotation about X in degrees
        ry: Rotation about Y in degrees
        rz: Rotation about Z in degrees

    Returns:
        Quaternion (w, x, y, z), with w >= 0
    """
    q = R.from_euler(EULER_SEQUENCE, [rz, rx, ry], degrees=True).as_quat(scalar_first=True)
    if q[0] < 0.0:
        q = -q
    return q


def quat_to_euler(q):
    """
    Inverse of euler_to_quat.

    Args:
        q: Quaternion (w, x, y, z), normalized internally

    Returns:
        (rx, ry, rz) in degrees
    """
    rz, rx, ry = R.from_quat(quat_normalize(q), scalar_first=True).as_euler(EULER_SEQUENCE, degrees=True)
    return float(rx), float(ry), float(rz)
