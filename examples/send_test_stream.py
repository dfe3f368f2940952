#!/usr/bin/env python3
"""
Example: Send a synthetic iFacialMocap stream.

Useful for trying the receiver without a phone. Sends alternating head and
blend shape datagrams: the head slowly nods and turns, the eyes blink and
the jaw opens and closes.

Usage:
    python send_test_stream.py --host 127.0.0.1 --port 49983 --fps 60
"""

import argparse
import math
import socket
import time

from loop_rate_limiters import RateLimiter


def head_message(t):
    rx = 15.0 * math.sin(t * 1.3)
    ry = 25.0 * math.sin(t * 0.7)
    rz = 5.0 * math.sin(t * 0.5)
    x, y, z = 0.02 * math.sin(t), 0.0, 0.01 * math.cos(t)
    return f"iFacialMocap_head|{rx:.3f}|{ry:.3f}|{rz:.3f}|{x:.4f}|{y:.4f}|{z:.4f}"


def blend_shapes_message(t):
    blink = 1.0 if (t % 3.0) < 0.15 else 0.0
    weights = {
        "eyeBlinkLeft": blink,
        "eyeBlinkRight": blink,
        "jawOpen": 0.5 + 0.5 * math.sin(t * 2.0),
        "mouthSmileLeft": 0.3,
        "mouthSmileRight": 0.3,
    }
    pairs = "|".join(f"{name}&{value:.3f}" for name, value in weights.items())
    return f"iFacialMocap_blendShapes|{pairs}"


def main():
    parser = argparse.ArgumentParser(description="Send a synthetic iFacialMocap UDP stream")
    parser.add_argument("--host", default="127.0.0.1", help="Receiver address (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=49983, help="Receiver port (default: 49983)")
    parser.add_argument("--fps", type=float, default=60.0, help="Frames per second (default: 60)")
    args = parser.parse_args()

    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    rate = RateLimiter(frequency=args.fps, warn=False)
    start_time = time.time()
    print(f"[Sender] Sending to {args.host}:{args.port} at {args.fps:.0f} fps (Ctrl+C to stop)")

    try:
        while True:
            t = time.time() - start_time
            sock.sendto(head_message(t).encode("utf-8"), (args.host, args.port))
            sock.sendto(blend_shapes_message(t).encode("utf-8"), (args.host, args.port))
            rate.sleep()
    except KeyboardInterrupt:
        print("\n[Sender] Stopped")
    finally:
        sock.close()


if __name__ == "__main__":
    main()
