"""Post-generation checks of world invariants."""

import structlog

from .state import WALL_REGION_ID, Chunk, World
from .terrain.attributes import ATTRIBUTE_MAX, ATTRIBUTE_MIN, LIGHT_MAX, LIGHT_MIN
from .terrain_types import Terrain
from .types import Position

logger = structlog.get_logger()

_BOUNDED_ATTRIBUTES = ("temperature", "moisture", "wind_level", "explorability")


class ValidationResult:
    """Result of world validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def validate_world(world: World) -> ValidationResult:
    """Validate a generated world.

    Args:
        world: World to check.

    Returns:
        ValidationResult with any errors/warnings.
    """
    result = ValidationResult()

    # Check 1: Regions are distinct, connected and own their chunks
    _check_regions(world, result)

    # Check 2: Every chunk belongs to a region or is a wall
    _check_chunk_regions(world, result)

    # Check 3: Attributes within their clamp ranges
    for chunk in world.all_chunks().values():
        _check_attribute_ranges(chunk, result)

    if result.passed:
        logger.info(
            "world_validation_passed",
            chunks=world.chunk_count,
            regions=world.region_count,
        )
    else:
        logger.warning("world_validation_failed", errors=len(result.errors))
        for error in result.errors:
            logger.error("world_validation_error", error=error)

    for warning in result.warnings:
        logger.warning("world_validation_warning", warning=warning)

    return result


def _check_regions(world: World, result: ValidationResult) -> None:
    for region_id, region in world.all_regions().items():
        cells = region.cells
        if not cells:
            result.add_error(f"Region {region_id} has no cells")
            continue
        if len(set(cells)) != len(cells):
            result.add_error(f"Region {region_id} contains duplicate cells")

        seen: set[Position] = {cells[0]}
        for cell in cells[1:]:
            if not any(n in seen for n in cell.neighbors()):
                result.add_error(
                    f"Region {region_id} cell {cell} is not adjacent to earlier cells"
                )
            seen.add(cell)

        for cell in cells:
            chunk = world.chunk_at(cell)
            if chunk is None:
                result.add_error(f"Region {region_id} cell {cell} has no chunk")
            elif chunk.region_id != region_id:
                result.add_error(
                    f"Chunk {cell} belongs to region {chunk.region_id}, "
                    f"listed in region {region_id}"
                )
            elif chunk.terrain != region.terrain:
                result.add_error(
                    f"Chunk {cell} terrain {chunk.terrain.value} differs from "
                    f"region {region_id} terrain {region.terrain.value}"
                )


def _check_chunk_regions(world: World, result: ValidationResult) -> None:
    regions = world.all_regions()
    for position, chunk in world.all_chunks().items():
        if chunk.region_id == WALL_REGION_ID:
            if chunk.terrain is not Terrain.WALL:
                result.add_error(f"Chunk {position} has wall region id but is not a wall")
            continue
        if chunk.terrain is Terrain.WALL:
            result.add_error(f"Wall chunk {position} has region id {chunk.region_id}")
        if chunk.region_id not in regions:
            result.add_error(f"Chunk {position} references unknown region {chunk.region_id}")


def _check_attribute_ranges(chunk: Chunk, result: ValidationResult) -> None:
    attributes = chunk.attributes
    for name in _BOUNDED_ATTRIBUTES:
        value = getattr(attributes, name)
        if not ATTRIBUTE_MIN <= value <= ATTRIBUTE_MAX:
            result.add_error(f"Chunk {chunk.position} {name}={value} out of range")
    if not LIGHT_MIN <= attributes.light_level <= LIGHT_MAX:
        result.add_error(
            f"Chunk {chunk.position} light_level={attributes.light_level} out of range"
        )
    if chunk.content.enemy is None and any(
        a.kind == "observe" for a in chunk.content.actions
    ):
        result.add_warning(f"Chunk {chunk.position} offers to observe a missing enemy")
