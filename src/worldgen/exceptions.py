"""Custom exceptions for world generation."""


class WorldGenError(Exception):
    """Base exception for world generation errors."""

    pass


class ChunkNotFoundError(WorldGenError):
    """Raised when no chunk exists at a position."""

    pass


class ChunkAlreadyExistsError(WorldGenError):
    """Raised when trying to add a chunk at an occupied position."""

    pass


class RegionAlreadyExistsError(WorldGenError):
    """Raised when trying to register a region id twice."""

    pass


class RegionNotFoundError(WorldGenError):
    """Raised when a region id is not registered."""

    pass


class UnknownBiomeError(WorldGenError):
    """Raised when a terrain has no entry in the biome table."""

    pass
