"""
FacialMocapReceiver - Real-time iFacialMocap receiver.

This module provides the FacialMocapReceiver class for receiving face
tracking data (head pose and ARKit-style blend shapes) from the iFacialMocap
app over UDP. It owns the listener's lifecycle and exposes the latest
received values to a consumer polling at its own rate.
"""

from .exceptions import BindError
from .frame_decoder import HeadPose
from .pose_store import PoseStore
from .udp_listener import UdpListener
from ..utils.net_utils import get_local_ip_address


# Port the iFacialMocap app sends to
DEFAULT_PORT = 49983


class FacialMocapReceiver:
    """
    Manages the iFacialMocap UDP listener and the latest received frame.

    The data flow:
    1. The iFacialMocap app sends '|'-delimited text datagrams to this host
    2. A background thread decodes each datagram
    3. Head pose / blend shape updates are stored as the latest values
    4. The consumer reads them whenever it wants (pull, never push)

    Example usage:
        receiver = FacialMocapReceiver(port=49983)
        receiver.attach()
        print(f"Enter {receiver.local_address()} in the iFacialMocap app")

        while running:
            blink = receiver.get_weight("eyeBlinkLeft")
            position = receiver.get_head_position()
            rotation = receiver.get_head_rotation()   # (w, x, y, z)

        receiver.detach()
    """

    def __init__(self, port: int = DEFAULT_PORT, debug: bool = False, host: str = "0.0.0.0"):
        """
        Initialize the FacialMocapReceiver.

        Args:
            port: UDP port to listen on (default: 49983)
            debug: Print every decoded frame and dropped datagram
            host: Interface to bind (default: all interfaces)
        """
        self.requested_port = port
        self.debug = debug
        self.host = host
        self.store = PoseStore()
        self.listener = None
        self._local_address = None

    def __enter__(self):
        self.attach()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.detach()

    @property
    def port(self) -> int:
        """Bound port while attached, otherwise the configured port."""
        if self.listener is not None and self.listener.port is not None:
            return self.listener.port
        return self.requested_port

    def attach(self) -> bool:
        """
        Resolve the local address and start listening.

        Returns:
            True if the listener is running, False if the port could not be
            bound (the receiver stays in the "not receiving" state)
        """
        if self.is_receiving():
            return True

        self._local_address = get_local_ip_address()
        self.store = PoseStore()
        listener = UdpListener(self.store, host=self.host, debug=self.debug)
        try:
            listener.start(self.requested_port)
        except BindError as e:
            print(f"[FacialMocapReceiver] Failed to start receiver: {e}")
            self.listener = None
            return False

        self.listener = listener
        print(f"[FacialMocapReceiver] iFacialMocap receiver started on port {listener.port}")
        print(f"[FacialMocapReceiver] IP address to enter in iFacialMocap: {self._local_address}")
        return True

    def detach(self):
        """Stop listening and release the socket. Safe to call repeatedly."""
        listener = self.listener
        self.listener = None
        if listener is not None:
            listener.stop()
            self.store = PoseStore()
            print("[FacialMocapReceiver] iFacialMocap receiver stopped")

    # Aliases matching the other receivers' start()/stop() naming
    start = attach
    stop = detach

    def is_receiving(self) -> bool:
        listener = self.listener
        return listener is not None and listener.is_running

    def local_address(self) -> str:
        """
        IPv4 address to enter in the iFacialMocap app.

        Informational only; datagrams from any address are accepted.
        """
        if self._local_address is None:
            self._local_address = get_local_ip_address()
        return self._local_address

    def get_receive_rate(self) -> float:
        listener = self.listener
        return listener.get_receive_rate() if listener is not None else 0.0

    def has_new_data(self) -> bool:
        return self.store.has_new_data()

    def head_pose(self) -> HeadPose:
        return self.store.read_head_pose()

    def get_head_position(self):
        """Head position (x, y, z)."""
        return self.store.read_head_pose().position

    def get_head_rotation(self):
        """Head orientation as a (w, x, y, z) quaternion."""
        return self.store.read_head_pose().quaternion

    def get_head_euler(self):
        """Head rotation (rx, ry, rz) in degrees, as sent."""
        return self.store.read_head_pose().euler

    def get_weight(self, name: str) -> float:
        """Blend shape weight by name, 0.0 if never received."""
        return self.store.read_weight(name)

    def get_all_weights(self) -> dict:
        """Copy of all received blend shape weights."""
        return self.store.read_all_weights()
