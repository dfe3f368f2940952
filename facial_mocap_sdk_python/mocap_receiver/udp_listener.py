"""
UdpListener - Background UDP receive loop for iFacialMocap datagrams.

The listener owns the socket. Each datagram is decoded on the receive thread
and, if it decodes, applied to a PoseStore. Bad datagrams are counted,
optionally logged, and dropped; they never end the loop.
"""

import socket
import threading
import time

from .exceptions import BindError, DecodeError, DecodeErrorKind
from .frame_decoder import HeadPose, decode


# Always printed; TOO_SHORT and UNKNOWN_TYPE only in debug mode
_LOUD_DECODE_ERRORS = (DecodeErrorKind.ENCODING, DecodeErrorKind.BAD_NUMBER)


class UdpListener:
    """
    Receives iFacialMocap datagrams in a background thread.

    stop() never kills the thread: it sets a stop event that the loop checks
    every cycle (the socket has a receive timeout) and shuts down/closes the
    socket so a blocked receive returns immediately.

    Example usage:
        store = PoseStore()
        listener = UdpListener(store)
        listener.start(49983)      # raises BindError if the port is taken

        while running:
            pose = store.read_head_pose()

        listener.stop()
    """

    def __init__(
        self,
        store,
        host: str = "0.0.0.0",
        buffer_size: int = 65535,
        poll_interval: float = 0.2,
        debug: bool = False,
    ):
        """
        Initialize the listener.

        Args:
            store: PoseStore that receives decoded frames
            host: Interface to bind (default: all interfaces)
            buffer_size: Maximum datagram size read per receive
            poll_interval: Receive timeout in seconds between stop checks
            debug: Print every decoded frame and every dropped datagram
        """
        self.store = store
        self.host = host
        self.buffer_size = buffer_size
        self.poll_interval = poll_interval
        self.debug = debug
        self.thread = None
        self.sock = None
        self._port = None
        self._stop_event = threading.Event()
        self._stop_event.set()
        # Guards the stop flag together with store writes
        self._apply_lock = threading.Lock()
        # Serializes start() and stop()
        self._lifecycle_lock = threading.Lock()
        self.stats_lock = threading.Lock()
        self._reset_stats()

    def _reset_stats(self):
        with self.stats_lock:
            self.datagram_count = 0
            self.decode_error_count = 0
            self.skipped_field_count = 0
            self.recv_count = 0
            self.last_rate_time = time.time()
            self.recv_rate_hz = 0.0

    @property
    def port(self):
        """Bound UDP port, or None if the listener was never started."""
        return self._port

    @property
    def is_running(self) -> bool:
        thread = self.thread
        return thread is not None and thread.is_alive() and not self._stop_event.is_set()

    def start(self, port: int):
        """
        Bind the UDP port and start the receive thread.

        Args:
            port: UDP port to listen on (0 picks a free port)

        Raises:
            BindError: if the socket cannot be bound; no thread is started
            RuntimeError: if the listener is already running
        """
        with self._lifecycle_lock:
            if self.is_running:
                raise RuntimeError("UdpListener is already running")

            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            try:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_RCVBUF, 1024 * 1024)
            except OSError:
                pass
            try:
                sock.bind((self.host, port))
            except OSError as e:
                sock.close()
                raise BindError(port, e) from e
            sock.settimeout(self.poll_interval)

            self.sock = sock
            self._port = sock.getsockname()[1]
            self._reset_stats()
            stop_event = threading.Event()
            self._stop_event = stop_event
            self.thread = threading.Thread(
                target=self._udp_server_loop,
                args=(sock, stop_event),
                name=f"UdpListener-{self._port}",
                daemon=True,
            )
            self.thread.start()
            print(f"[UdpListener] Listening on UDP port {self._port}")

    def stop(self):
        """
        Stop the receive thread and close the socket.

        Safe to call from any thread, before start() and more than once.
        Once it returns, this listener makes no further store writes.
        """
        with self._lifecycle_lock:
            thread, sock = self.thread, self.sock
            if thread is None and sock is None:
                return

            with self._apply_lock:
                self._stop_event.set()

            if sock is not None:
                try:
                    sock.shutdown(socket.SHUT_RDWR)
                except OSError:
                    # Unconnected UDP sockets report ENOTCONN, the receive is still woken
                    pass
                sock.close()

            if thread is not None and thread is not threading.current_thread():
                thread.join(timeout=max(1.0, self.poll_interval * 5))
                if thread.is_alive():
                    print("[UdpListener] Warning: receive thread did not exit in time")

            self.thread = None
            self.sock = None
            print("[UdpListener] Stopped")

    def get_receive_rate(self):
        """
        Get the current datagram receive rate.

        Returns:
            Receive rate in Hz (datagrams per second)
        """
        with self.stats_lock:
            return self.recv_rate_hz

    def _update_stats(self, now):
        with self.stats_lock:
            self.datagram_count += 1
            self.recv_count += 1
            self._refresh_rate(now)

    def _refresh_rate(self, now):
        # Caller holds stats_lock
        dt = now - self.last_rate_time
        if dt >= 1.0:
            self.recv_rate_hz = self.recv_count / dt
            self.recv_count = 0
            self.last_rate_time = now

    def _report_decode_error(self, error: DecodeError):
        with self.stats_lock:
            self.decode_error_count += 1
        if self.debug or error.kind in _LOUD_DECODE_ERRORS:
            print(f"[UdpListener] Dropped datagram ({error.kind.value}): {error}")

    def _log_frame(self, frame):
        if isinstance(frame, HeadPose):
            print(f"[UdpListener] Head - Pos: {frame.position}, Rot: {frame.euler}")
        else:
            print(f"[UdpListener] Received {len(frame.weights)} blend shapes"
                  f"{f' ({frame.skipped} malformed skipped)' if frame.skipped else ''}")

    def _udp_server_loop(self, sock, stop_event):
        """Background thread that receives, decodes and applies datagrams."""
        try:
            while not stop_event.is_set():
                try:
                    data, _addr = sock.recvfrom(self.buffer_size)
                except socket.timeout:
                    # Let the rate fall to zero once the sender goes quiet
                    with self.stats_lock:
                        self._refresh_rate(time.time())
                    continue
                except OSError as e:
                    if not stop_event.is_set():
                        print(f"[UdpListener] Receive error: {e}")
                    break

                # shutdown() wakes the receive with an empty read
                if stop_event.is_set():
                    break

                self._update_stats(time.time())

                try:
                    frame = decode(data)
                except DecodeError as e:
                    self._report_decode_error(e)
                    continue

                if not isinstance(frame, HeadPose) and frame.skipped:
                    with self.stats_lock:
                        self.skipped_field_count += frame.skipped

                with self._apply_lock:
                    if stop_event.is_set():
                        break
                    self.store.apply(frame)

                if self.debug:
                    self._log_frame(frame)
        finally:
            try:
                sock.close()
            except OSError:
                pass
