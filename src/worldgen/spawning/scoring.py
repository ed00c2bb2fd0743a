"""Spawn probability factors."""

from ..config import GenerationSettings, WorldProfile
from ..state import ChunkAttributes

CHUNK_MULTIPLIER_FLOOR = 0.6
CHUNK_MULTIPLIER_SPAN = 0.8
NEUTRAL_DENSITY = 50.0


def softcap(multiplier: float, k: float = 0.4) -> float:
    """Diminishing returns above 1; values up to 1 pass through.

    softcap(m) = m / (1 + (m - 1) * k) for m > 1, tending to 1/k.
    """
    if multiplier <= 1:
        return multiplier
    return multiplier / (1 + (multiplier - 1) * k)


def _unit(value: float) -> float:
    return max(0.0, min(1.0, value / 100))


def chunk_resource_score(attributes: ChunkAttributes) -> float:
    """Richness of a chunk in [0, 1].

    Mean of vegetation, moisture and the absence of humans, danger and
    predators, each normalised to [0, 1].
    """
    terms = (
        _unit(attributes.vegetation_density),
        _unit(attributes.moisture),
        1 - _unit(attributes.human_presence),
        1 - _unit(attributes.danger_level),
        1 - _unit(attributes.predator_presence),
    )
    return sum(terms) / len(terms)


def chunk_multiplier(score: float) -> float:
    """Map a resource score to a probability multiplier in [0.6, 1.4]."""
    return CHUNK_MULTIPLIER_FLOOR + score * CHUNK_MULTIPLIER_SPAN


def density_bonus(profile: WorldProfile) -> float:
    """Additive bonus from world resource density, about [-0.5, 0.5]."""
    return (profile.resource_density - NEUTRAL_DENSITY) / 100


def tier_multiplier(tier: int | None, decay: float = 0.9) -> float:
    """Rarity factor of an item tier; tier 1 and unknown tiers are neutral."""
    if tier is None:
        return 1.0
    return decay ** (tier - 1)


def spawn_chance(
    base_chance: float,
    tier: int | None,
    attributes: ChunkAttributes,
    profile: WorldProfile,
    settings: GenerationSettings,
) -> float:
    """Final probability that a candidate spawns.

    clamp(((base * tier) + density) * chunk * softcap(spawn_multiplier), 0, max).
    The density bonus is added before the multipliers so a near-zero base
    chance can still spawn in rich chunks; tier rarity applies first.
    """
    tiered = base_chance * tier_multiplier(tier, settings.tier_decay)
    chance = (
        (tiered + density_bonus(profile))
        * chunk_multiplier(chunk_resource_score(attributes))
        * softcap(profile.spawn_multiplier, settings.softcap_k)
    )
    return max(0.0, min(settings.max_spawn_chance, chance))


def max_item_types(
    attributes: ChunkAttributes,
    profile: WorldProfile,
    settings: GenerationSettings,
) -> int:
    """How many distinct item types a chunk may hold.

    floor(base * softcap(spawn_multiplier) * (0.5 + score * density / 100)).
    """
    count_multiplier = 0.5 + chunk_resource_score(attributes) * (
        profile.resource_density / 100
    )
    # No floor of one: a barren chunk may hold no item types at all
    return int(
        settings.base_max_items
        * softcap(profile.spawn_multiplier, settings.softcap_k)
        * count_multiplier
    )
