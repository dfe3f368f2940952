#!/usr/bin/env python3
"""
Example: Receive and print iFacialMocap data.

This script starts a FacialMocapReceiver, prints the address to enter in
the iFacialMocap app, and polls the latest head pose and blend shape
weights at a fixed rate, the way a renderer loop would.

Usage:
    python receive_facial_mocap.py --port 49983
    python receive_facial_mocap.py --port 49983 --verbose --rate 30
"""

import argparse
import os
import sys
import time

from loop_rate_limiters import RateLimiter

# Allow running without installing the package (add project root to path)
_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _root not in sys.path:
    sys.path.insert(0, _root)

from facial_mocap_sdk_python import FacialMocapReceiver
from facial_mocap_sdk_python.mocap_receiver import DEFAULT_PORT


def main():
    parser = argparse.ArgumentParser(description="Receive and print iFacialMocap data")

    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"UDP port to listen for iFacialMocap data (default: {DEFAULT_PORT})",
    )

    parser.add_argument(
        "--rate",
        type=float,
        default=60.0,
        help="Polling rate in Hz (default: 60)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Print every blend shape weight",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print every decoded datagram from the receive thread",
    )

    args = parser.parse_args()

    receiver = FacialMocapReceiver(port=args.port, debug=args.debug)
    if not receiver.attach():
        print(f"[Main] Could not listen on port {args.port}")
        return 1

    print(f"[Main] Enter {receiver.local_address()}:{receiver.port} in the iFacialMocap app")
    print("[Main] Press Ctrl+C to stop")

    rate = RateLimiter(frequency=args.rate, warn=False)
    stats_start_time = time.time()
    stats_interval = 2.0

    try:
        while receiver.is_receiving():
            if receiver.has_new_data():
                rx, ry, rz = receiver.get_head_euler()
                x, y, z = receiver.get_head_position()
                weights = receiver.get_all_weights()
                print(f"[Head] pos=({x:7.3f}, {y:7.3f}, {z:7.3f}) "
                      f"rot=({rx:7.2f}, {ry:7.2f}, {rz:7.2f})  blend shapes: {len(weights)}")

                if args.verbose:
                    for name in sorted(weights):
                        print(f"  {name:24s} {weights[name]:6.3f}")

            current_time = time.time()
            if current_time - stats_start_time >= stats_interval:
                print(f"[Main] UDP receive rate: {receiver.get_receive_rate():.1f} Hz")
                stats_start_time = current_time

            rate.sleep()

    except KeyboardInterrupt:
        print("\n[Main] Stopping...")
    finally:
        receiver.detach()
        print("[Main] Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
