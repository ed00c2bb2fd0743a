"""Spawn candidates: things a chunk may contain, with their spawn conditions."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

from ..state import Enemy, LootEntry, Npc, Structure


class CandidateKind(str, Enum):
    """What a candidate turns into when selected."""

    ITEM = "item"
    NPC = "npc"
    ENEMY = "enemy"
    STRUCTURE = "structure"


# Conditions key holding the base spawn probability
CHANCE_KEY = "chance"


class SpawnCandidate(BaseModel, frozen=True):
    """
    Tagged spawn candidate.

    Items are identified by ``name`` (an item id); NPCs, enemies and
    structures carry their spawned form in ``payload`` and take their
    identifying name from it when ``name`` is not given. ``conditions`` maps
    attribute names to ``{min, max}`` ranges, ``soil_type`` to an allow-list,
    and ``chance`` to the base probability. A candidate without conditions
    is malformed and never spawns.
    """

    kind: CandidateKind
    name: str | None = None
    conditions: dict[str, Any] | None = None
    payload: Npc | Enemy | Structure | None = None
    loot: list[LootEntry] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _payload_for_kind(cls, data: Any) -> Any:
        # Npc and Structure share a shape, so dispatch on kind rather than guess
        if not isinstance(data, dict) or not isinstance(data.get("payload"), dict):
            return data
        payload_type = _PAYLOAD_TYPES.get(CandidateKind(data.get("kind")))
        if payload_type is None:
            return data
        return {**data, "payload": payload_type.model_validate(data["payload"])}

    @property
    def identity(self) -> str | None:
        """Name used to recognise the candidate, or None if it has none."""
        if self.name:
            return self.name
        if isinstance(self.payload, Enemy):
            return self.payload.type
        if self.payload is not None:
            return self.payload.name
        return None

    @property
    def base_chance(self) -> float:
        if not self.conditions:
            return 1.0
        chance = self.conditions.get(CHANCE_KEY)
        if isinstance(chance, bool) or not isinstance(chance, (int, float)):
            return 1.0
        return float(chance)

    def with_conditions(self, conditions: dict[str, Any]) -> "SpawnCandidate":
        """Return copy with replaced conditions."""
        return self.model_copy(update={"conditions": conditions})


_PAYLOAD_TYPES: dict[CandidateKind, type[BaseModel]] = {
    CandidateKind.NPC: Npc,
    CandidateKind.ENEMY: Enemy,
    CandidateKind.STRUCTURE: Structure,
}
