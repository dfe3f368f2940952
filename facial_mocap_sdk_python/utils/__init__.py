"""
Utility functions for iFacialMocap data.

This module provides:
    - quat_utils: Head rotation conversion (Euler degrees <-> quaternion)
    - net_utils: Local IPv4 address lookup for display
    - heads_tall_blocks: Heads-tall proportion block layout
"""

from .heads_tall_blocks import BlockDescriptor, generate_heads_tall_blocks
from .net_utils import get_local_ip_address
from .quat_utils import euler_to_quat, quat_to_euler

__all__ = [
    "BlockDescriptor",
    "generate_heads_tall_blocks",
    "get_local_ip_address",
    "euler_to_quat",
    "quat_to_euler",
]
