"""Probabilistic selection of spawn candidates for a chunk."""

from typing import TYPE_CHECKING, Sequence

import numpy as np
import structlog

from ..config import GenerationSettings, WorldProfile
from ..sampling import shuffled
from ..state import ChunkAttributes
from .candidates import CandidateKind, SpawnCandidate
from .conditions import check_conditions
from .scoring import spawn_chance

if TYPE_CHECKING:
    from ..catalog import ItemRegistry

logger = structlog.get_logger()


def _candidate_tier(candidate: SpawnCandidate, items: "ItemRegistry") -> int | None:
    if candidate.kind is not CandidateKind.ITEM or not candidate.name:
        return None
    definition = items.resolve(candidate.name)
    return definition.tier if definition is not None else None


def select_entities(
    candidates: Sequence[SpawnCandidate | None],
    max_count: int,
    attributes: ChunkAttributes,
    items: "ItemRegistry",
    profile: WorldProfile,
    rng: np.random.Generator,
    settings: GenerationSettings | None = None,
) -> list[SpawnCandidate]:
    """Choose which candidates spawn in a chunk.

    Malformed candidates (None, no conditions, no identifying name) are
    logged and skipped. Candidates whose conditions fail are dropped, the
    rest are shuffled and each accepted with its spawn_chance() until
    max_count are accepted.

    Args:
        candidates: Candidate pool; may contain None.
        max_count: Upper bound on accepted candidates.
        attributes: Chunk being populated.
        items: Item registry, for tiers.
        profile: World profile.
        rng: Random number generator.
        settings: Balance settings; defaults apply when omitted.

    Returns:
        Accepted candidates, at most max_count, all passing their conditions.
    """
    settings = settings or GenerationSettings()
    if max_count <= 0:
        return []

    eligible: list[SpawnCandidate] = []
    for index, candidate in enumerate(candidates):
        if candidate is None:
            logger.error("candidate_missing", index=index)
            continue
        if candidate.conditions is None:
            logger.error(
                "candidate_missing_conditions",
                index=index,
                name=candidate.identity,
                kind=candidate.kind.value,
            )
            continue
        if check_conditions(candidate.conditions, attributes):
            eligible.append(candidate)

    selected: list[SpawnCandidate] = []
    for candidate in shuffled(rng, eligible):
        if len(selected) >= max_count:
            break
        if not candidate.identity:
            logger.error("candidate_missing_name", kind=candidate.kind.value)
            continue

        chance = spawn_chance(
            candidate.base_chance,
            _candidate_tier(candidate, items),
            attributes,
            profile,
            settings,
        )
        if rng.random() < chance:
            selected.append(candidate)

    return selected
