"""
PoseStore - Thread-safe holder of the latest head pose and blend shape weights.

Written by the listener thread, read by the consumer at its own cadence.
Every operation takes the same lock for a reference swap, a dict update or a
dict copy, so readers never wait on network I/O.
"""

import threading

from .frame_decoder import BlendShapeUpdate, HeadPose


class PoseStore:
    """
    Latest-value store for decoded iFacialMocap frames.

    HeadPose is immutable and swapped as a whole, so a reader always gets
    the six components of a single write. All (name, value) pairs from one
    apply_weight_updates() call are merged under one lock acquisition.

    Example usage:
        store = PoseStore()
        store.apply_weight_updates([("jawOpen", 0.4)])
        store.read_weight("jawOpen")     # 0.4
        store.read_weight("unknown")     # 0.0
    """

    def __init__(self):
        self.lock = threading.Lock()
        self._head_pose = HeadPose()
        self._weights = {}
        self._has_new_data = False
        self._frame_count = 0

    def reset(self):
        """Reset to identity head pose and no weights."""
        with self.lock:
            self._head_pose = HeadPose()
            self._weights.clear()
            self._has_new_data = False
            self._frame_count = 0

    def apply_head_pose(self, pose: HeadPose):
        """Replace the stored head pose."""
        with self.lock:
            self._head_pose = pose
            self._has_new_data = True
            self._frame_count += 1

    def apply_weight_updates(self, updates):
        """
        Merge (name, value) pairs into the weights, overwriting by name.

        Args:
            updates: Iterable of (name, value) pairs from one datagram
        """
        # Materialize outside the lock so a generator cannot run inside it
        updates = [(str(name), float(value)) for name, value in updates]
        with self.lock:
            self._weights.update(updates)
            self._has_new_data = True
            self._frame_count += 1

    def apply(self, frame):
        """
        Apply a decoded frame.

        Args:
            frame: HeadPose or BlendShapeUpdate from frame_decoder.decode()
        """
        if isinstance(frame, HeadPose):
            self.apply_head_pose(frame)
        elif isinstance(frame, BlendShapeUpdate):
            self.apply_weight_updates(frame.weights)
        else:
            raise TypeError(f"Unsupported frame type: {type(frame).__name__}")

    def read_head_pose(self) -> HeadPose:
        with self.lock:
            return self._head_pose

    def read_weight(self, name: str) -> float:
        """Get one blend shape weight, 0.0 if it was never received."""
        with self.lock:
            return self._weights.get(name, 0.0)

    def read_all_weights(self) -> dict:
        """Get a copy of all blend shape weights."""
        with self.lock:
            return dict(self._weights)

    def has_new_data(self) -> bool:
        """
        Check whether a frame was applied since the previous call.

        Clears the flag, so each applied frame is reported once.
        """
        with self.lock:
            new_data = self._has_new_data
            self._has_new_data = False
            return new_data

    @property
    def frame_count(self) -> int:
        with self.lock:
            return self._frame_count
