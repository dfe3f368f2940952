from __future__ import annotations

import threading

import pytest

from facial_mocap_sdk_python.mocap_receiver.frame_decoder import BlendShapeUpdate, HeadPose, decode
from facial_mocap_sdk_python.mocap_receiver.pose_store import PoseStore


def test_new_store_is_empty() -> None:
    store = PoseStore()

    assert store.read_head_pose() == HeadPose()
    assert store.read_all_weights() == {}
    assert store.read_weight("jawOpen") == 0.0
    assert store.frame_count == 0
    assert not store.has_new_data()


def test_weight_updates_merge_by_name() -> None:
    store = PoseStore()

    store.apply_weight_updates([("A", 1.0), ("B", 2.0)])

    assert store.read_weight("A") == 1.0
    assert store.read_weight("B") == 2.0
    assert store.read_weight("C") == 0

    store.apply_weight_updates([("B", 3.0), ("D", 4.0)])

    assert store.read_all_weights() == {"A": 1.0, "B": 3.0, "D": 4.0}


def test_read_all_weights_returns_a_copy() -> None:
    store = PoseStore()
    store.apply_weight_updates([("A", 1.0)])

    snapshot = store.read_all_weights()
    snapshot["A"] = 99.0
    snapshot["Z"] = 5.0

    assert store.read_all_weights() == {"A": 1.0}


def test_head_pose_is_replaced_as_a_whole() -> None:
    store = PoseStore()
    pose = HeadPose(rx=10, ry=20, rz=30, x=0.1, y=0.2, z=0.3)

    store.apply_head_pose(pose)

    assert store.read_head_pose() == pose


def test_apply_dispatches_decoded_frames() -> None:
    store = PoseStore()

    store.apply(decode(b"iFacialMocap_head|10|20|30|0.1|0.2|0.3"))
    store.apply(decode(b"iFacialMocap_blendShapes|eyeBlinkLeft&0.8|eyeBlinkRight&0.3"))

    assert store.read_head_pose().euler == (10.0, 20.0, 30.0)
    assert store.read_head_pose().position == (0.1, 0.2, 0.3)
    assert store.read_weight("eyeBlinkLeft") == 0.8
    assert store.read_weight("eyeBlinkRight") == 0.3
    assert store.frame_count == 2


def test_apply_rejects_other_objects() -> None:
    store = PoseStore()

    with pytest.raises(TypeError):
        store.apply({"jawOpen": 1.0})


def test_has_new_data_reports_each_frame_once() -> None:
    store = PoseStore()
    store.apply(BlendShapeUpdate(weights=(("jawOpen", 0.1),)))

    assert store.has_new_data()
    assert not store.has_new_data()


def test_reset() -> None:
    store = PoseStore()
    store.apply_head_pose(HeadPose(rx=1.0))
    store.apply_weight_updates([("A", 1.0)])

    store.reset()

    assert store.read_head_pose() == HeadPose()
    assert store.read_all_weights() == {}
    assert store.frame_count == 0


def test_concurrent_head_pose_reads_are_never_torn() -> None:
    store = PoseStore()
    writes = 20000
    done = threading.Event()
    torn = []

    def producer() -> None:
        for i in range(1, writes + 1):
            v = float(i)
            store.apply_head_pose(HeadPose(rx=v, ry=v, rz=v, x=v, y=v, z=v))
        done.set()

    def consumer() -> None:
        while not done.is_set():
            pose = store.read_head_pose()
            if len(set(pose.euler + pose.position)) != 1:
                torn.append(pose)

    threads = [threading.Thread(target=producer), threading.Thread(target=consumer)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    assert not torn
    assert store.read_head_pose().position == (float(writes),) * 3


def test_concurrent_weight_batches_are_applied_atomically() -> None:
    store = PoseStore()
    writes = 20000
    done = threading.Event()
    torn = []

    def producer() -> None:
        for i in range(1, writes + 1):
            store.apply_weight_updates([("left", float(i)), ("right", float(i))])
        done.set()

    def consumer() -> None:
        while not done.is_set():
            weights = store.read_all_weights()
            if weights.get("left") != weights.get("right"):
                torn.append(weights)

    threads = [threading.Thread(target=producer), threading.Thread(target=consumer)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    assert not torn
    assert store.read_weight("left") == float(writes)
