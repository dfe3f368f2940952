#!/usr/bin/env python3
"""
Example: Print the heads-tall proportion block layout.

Usage:
    python heads_tall_blocks.py --height 170 --heads 6.5
    python heads_tall_blocks.py --height 160 --heads 7 --json blocks.json
"""

import argparse
import dataclasses
import json
import os
import sys

# Allow running without installing the package (add project root to path)
_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _root not in sys.path:
    sys.path.insert(0, _root)

from facial_mocap_sdk_python.utils.heads_tall_blocks import generate_heads_tall_blocks, head_size_cm, root_name


def main():
    parser = argparse.ArgumentParser(description="Generate heads-tall proportion blocks")
    parser.add_argument("--height", type=float, default=170.0, help="Body height in cm (default: 170)")
    parser.add_argument("--heads", type=float, default=7.0, help="Heads tall (default: 7)")
    parser.add_argument("--json", default=None, help="Write the layout to this JSON file")
    args = parser.parse_args()

    blocks = generate_heads_tall_blocks(args.height, args.heads)
    print(f"[Blocks] {root_name(args.height, args.heads)}: head size {head_size_cm(args.height, args.heads):.2f} cm")
    for block in blocks:
        sx, sy, sz = block.scale
        px, py, pz = block.position
        print(f"  {block.group:32s} {block.name:20s} "
              f"scale=({sx:.3f}, {sy:.3f}, {sz:.3f}) pos=({px:.3f}, {py:.3f}, {pz:.3f})")

    if args.json:
        with open(args.json, "w") as f:
            json.dump([dataclasses.asdict(b) for b in blocks], f, indent=2)
        print(f"[Blocks] Wrote {len(blocks)} blocks to {args.json}")


if __name__ == "__main__":
    main()
