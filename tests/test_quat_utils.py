from __future__ import annotations

import math

import numpy as np
import pytest

from facial_mocap_sdk_python.utils.quat_utils import euler_to_quat, quat_normalize, quat_to_euler


def _axis_quat(axis: str, degrees: float) -> np.ndarray:
    half = math.radians(degrees) / 2.0
    q = np.zeros(4)
    q[0] = math.cos(half)
    q["xyz".index(axis) + 1] = math.sin(half)
    return q


def _quat_mul(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    w1, x1, y1, z1 = a
    w2, x2, y2, z2 = b
    return np.array([
        w1*w2 - x1*x2 - y1*y2 - z1*z2,
        w1*x2 + x1*w2 + y1*z2 - z1*y2,
        w1*y2 - x1*z2 + y1*w2 + z1*x2,
        w1*z2 + x1*y2 - y1*x2 + z1*w2,
    ])


def test_zero_angles_are_identity() -> None:
    assert list(euler_to_quat(0.0, 0.0, 0.0)) == pytest.approx([1.0, 0.0, 0.0, 0.0])


@pytest.mark.parametrize("axis", ["x", "y", "z"])
def test_single_axis_rotation(axis: str) -> None:
    angles = {"x": 0.0, "y": 0.0, "z": 0.0}
    angles[axis] = 90.0

    q = euler_to_quat(angles["x"], angles["y"], angles["z"])

    assert list(q) == pytest.approx(list(_axis_quat(axis, 90.0)))


def test_composition_applies_z_then_x_then_y() -> None:
    expected = _quat_mul(_axis_quat("y", 20.0), _quat_mul(_axis_quat("x", 10.0), _axis_quat("z", 30.0)))

    q = euler_to_quat(10.0, 20.0, 30.0)

    assert list(q) == pytest.approx(list(expected), abs=1e-9)


def test_quat_to_euler_inverts_euler_to_quat() -> None:
    assert quat_to_euler(euler_to_quat(10.0, 20.0, 30.0)) == pytest.approx((10.0, 20.0, 30.0))


def test_quat_normalize() -> None:
    assert list(quat_normalize([2.0, 0.0, 0.0, 0.0])) == pytest.approx([1.0, 0.0, 0.0, 0.0])
    assert list(quat_normalize([0.0, 0.0, 0.0, 0.0])) == pytest.approx([1.0, 0.0, 0.0, 0.0])
