"""
Heads-tall proportion blocks.

Generates the box layout used as a proportion reference next to an avatar:
a column of head-sized cubes (with a partial cube for fractional ratios),
a column of four quarter-height blocks, and a horizontal row of head cubes
at head height. Pure and deterministic; units are metres, Y up.
"""

import math
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class BlockDescriptor:
    """One box: its group label, its own label, size and centre position."""

    group: str
    name: str
    scale: Tuple[float, float, float]
    position: Tuple[float, float, float]


def head_size_cm(height_cm: float, heads_tall: float) -> float:
    return height_cm / heads_tall


def root_name(height_cm: float, heads_tall: float) -> str:
    return f"HeadsTallBlocks_{height_cm:g}cm_{heads_tall:g}Heads"


def _vertical_head_blocks(group, head, full_blocks, fraction) -> List[BlockDescriptor]:
    blocks = []
    current_y = 0.0

    # Partial block sits at the bottom
    if fraction > 0.0:
        partial_height = head * fraction
        blocks.append(BlockDescriptor(
            group=group,
            name=f"Block_Partial_{fraction:.2f}",
            scale=(head, partial_height, head),
            position=(0.0, partial_height * 0.5, 0.0),
        ))
        current_y += partial_height

    for i in range(full_blocks):
        blocks.append(BlockDescriptor(
            group=group,
            name=f"Block_{i + 1}",
            scale=(head, head, head),
            position=(0.0, current_y + head * 0.5, 0.0),
        ))
        current_y += head

    return blocks


def _vertical_blocks(group, xz_size, y_size, count, x_offset) -> List[BlockDescriptor]:
    return [
        BlockDescriptor(
            group=group,
            name=f"Block_{i + 1}",
            scale=(xz_size, y_size, xz_size),
            position=(x_offset, y_size * i + y_size * 0.5, 0.0),
        )
        for i in range(count)
    ]


def _horizontal_blocks(group, size, count, y_offset) -> List[BlockDescriptor]:
    # Centred on x = 0
    start_x = -(count * size) / 2.0 + size * 0.5
    return [
        BlockDescriptor(
            group=group,
            name=f"Block_{i + 1}",
            scale=(size, size, size),
            position=(start_x + size * i, y_offset, 0.0),
        )
        for i in range(count)
    ]


def generate_heads_tall_blocks(height_cm: float = 170.0, heads_tall: float = 7.0) -> List[BlockDescriptor]:
    """
    Build the proportion block layout for a body height and heads-tall ratio.

    Args:
        height_cm: Body height in centimetres
        heads_tall: Body height expressed in head lengths (e.g. 6.5)

    Returns:
        List of BlockDescriptor: vertical head column, quarter column,
        horizontal head row, in that order

    Raises:
        ValueError: if height_cm or heads_tall is not positive
    """
    if height_cm <= 0:
        raise ValueError(f"height_cm must be positive, got {height_cm}")
    if heads_tall <= 0:
        raise ValueError(f"heads_tall must be positive, got {heads_tall}")

    head_cm = head_size_cm(height_cm, heads_tall)
    head = head_cm / 100.0
    full_blocks = math.floor(heads_tall)
    fraction = heads_tall - full_blocks

    blocks = _vertical_head_blocks(f"Group_Head{head_cm:g}cm_Vertical", head, full_blocks, fraction)

    quarter_cm = height_cm / 4.0
    blocks += _vertical_blocks(f"Group_Quarter{quarter_cm:g}cm", head, quarter_cm / 100.0, 4, head)

    top_y = height_cm / 100.0 - head / 2.0
    row_count = full_blocks + (1 if fraction > 0.0 else 0)
    blocks += _horizontal_blocks(f"Group_Head{head_cm:g}cm_Horizontal", head, row_count, top_y)

    return blocks
