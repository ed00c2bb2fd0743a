"""Region growth: breadth-first flood fill of one terrain over free cells."""

from collections import deque
from typing import Callable

import numpy as np

from ..sampling import shuffled
from ..types import Position
from .config import BiomeDefinition


def roll_region_size(biome: BiomeDefinition, rng: np.random.Generator) -> int:
    """Draw a target region size uniformly from the biome's size range."""
    return biome.size_range.roll(rng)


def grow_region(
    start: Position,
    target_size: int,
    is_free: Callable[[Position], bool],
    rng: np.random.Generator,
) -> list[Position]:
    """Grow a connected set of free cells outward from start.

    Cells are dequeued in FIFO order and their neighbors visited in a
    shuffled order; each unvisited free neighbor joins both the region and
    the queue. Growth stops at target_size cells or when the queue empties,
    so a boxed-in start yields a smaller region (at least the start cell).

    Args:
        start: First cell; assumed free.
        target_size: Soft cap on the number of cells.
        is_free: Whether a cell may be claimed.
        rng: Random number generator for neighbor order.

    Returns:
        Distinct cells in insertion order, each 4-adjacent to an earlier one.
    """
    cells = [start]
    visited = {start}
    queue = deque([start])
    target_size = max(1, target_size)

    while queue and len(cells) < target_size:
        current = queue.popleft()
        for neighbor in shuffled(rng, current.neighbors()):
            if len(cells) >= target_size:
                break
            if neighbor in visited:
                continue
            visited.add(neighbor)
            if not is_free(neighbor):
                continue
            cells.append(neighbor)
            queue.append(neighbor)

    return cells
