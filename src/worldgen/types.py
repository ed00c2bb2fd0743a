"""Core types for world generation."""

from enum import Enum

import numpy as np
from pydantic import BaseModel, model_validator


class Season(str, Enum):
    """Season of the year, selects a row of the season modifier table."""

    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"


# 4-connected neighborhood used for adjacency and region growth
# Coordinate system: +X is East, +Y is South
CARDINAL_DELTAS: tuple[tuple[int, int], ...] = (
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
)


class Position(BaseModel, frozen=True):
    """Immutable 2D chunk coordinate."""

    x: int
    y: int

    def __add__(self, other: "Position") -> "Position":
        return Position(x=self.x + other.x, y=self.y + other.y)

    def neighbors(self) -> list["Position"]:
        """Return the four cardinal neighbors, in CARDINAL_DELTAS order."""
        return [Position(x=self.x + dx, y=self.y + dy) for dx, dy in CARDINAL_DELTAS]

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __repr__(self) -> str:
        return f"Position(x={self.x}, y={self.y})"


class ValueRange(BaseModel, frozen=True):
    """Inclusive integer range used by biome tables, quantities and durations."""

    min: int
    max: int

    @model_validator(mode="after")
    def _check_order(self) -> "ValueRange":
        if self.min > self.max:
            raise ValueError(f"Range min {self.min} exceeds max {self.max}")
        return self

    def roll(self, rng: np.random.Generator) -> int:
        """Draw a uniform integer in [min, max]."""
        return int(rng.integers(self.min, self.max + 1))
