"""Chunk content: description, spawned entities, loot and available actions."""

from typing import TYPE_CHECKING, Sequence

import numpy as np
import structlog

from .catalog import ItemDefinition, ItemRegistry, TerrainTemplate, localize
from .sampling import pick
from .spawning.candidates import CHANCE_KEY, CandidateKind, SpawnCandidate
from .spawning.scoring import max_item_types
from .spawning.selection import select_entities
from .state import (
    Action,
    ChunkAttributes,
    ChunkContent,
    ChunkItem,
    Enemy,
    Npc,
    Structure,
)
from .terrain_types import Terrain

if TYPE_CHECKING:
    from .context import GenerationContext

logger = structlog.get_logger()

UNKNOWN_AREA_DESCRIPTION = "An unknown and undescribable area."
DEFAULT_ADJECTIVE = "normal"
DEFAULT_FEATURE = "nothing special"


def build_description(template: TerrainTemplate, rng: np.random.Generator) -> str:
    """Fill a random description template with a random adjective and feature."""
    descriptions = [d for d in template.descriptions if d] or ["A generic area."]
    text = pick(rng, descriptions)
    adjective = pick(rng, template.adjectives) if template.adjectives else DEFAULT_ADJECTIVE
    feature = pick(rng, template.features) if template.features else DEFAULT_FEATURE
    return text.replace("[adjective]", adjective, 1).replace("[feature]", feature, 1)


def registry_item_candidates(
    terrain: Terrain,
    items: ItemRegistry,
    default_chance: float,
    exclude: Sequence[str] = (),
) -> list[SpawnCandidate]:
    """Candidates for registry items that spawn naturally in terrain.

    The chance comes from the item's natural-spawn entry for the terrain,
    whose extra conditions are kept; default_chance applies otherwise.
    """
    candidates = []
    for definition in items.spawnable_in(terrain):
        if definition.id in exclude:
            continue
        natural = definition.natural_spawn_for(terrain)
        conditions = dict(natural.conditions) if natural is not None else {}
        chance = natural.chance if natural is not None else None
        conditions[CHANCE_KEY] = default_chance if chance is None else chance
        candidates.append(
            SpawnCandidate(kind=CandidateKind.ITEM, name=definition.id, conditions=conditions)
        )
    return candidates


def _make_item(definition: ItemDefinition, quantity: int, language: str) -> ChunkItem:
    return ChunkItem(
        id=definition.id,
        name=definition.display_name(language),
        description=localize(definition.description, language),
        tier=definition.tier,
        emoji=definition.emoji,
        quantity=quantity,
    )


def _add_stack(stacks: list[ChunkItem], item: ChunkItem) -> None:
    """Add item to stacks, summing quantities of the same item id."""
    for index, existing in enumerate(stacks):
        if existing.id == item.id:
            stacks[index] = existing.with_quantity(existing.quantity + item.quantity)
            return
    stacks.append(item)


def spawn_items(
    selected: Sequence[SpawnCandidate],
    items: ItemRegistry,
    rng: np.random.Generator,
    language: str = "en",
) -> list[ChunkItem]:
    """Turn selected item candidates into stacks with rolled quantities.

    References that resolve to no registry item are dropped.
    """
    stacks: list[ChunkItem] = []
    for candidate in selected:
        definition = items.resolve(candidate.name or "")
        if definition is None:
            logger.debug("item_reference_unresolved", reference=candidate.name)
            continue
        quantity = definition.base_quantity.roll(rng)
        if quantity <= 0:
            continue
        _add_stack(stacks, _make_item(definition, quantity, language))
    return stacks


def resolve_structure_loot(
    structures: Sequence[SpawnCandidate],
    stacks: Sequence[ChunkItem],
    items: ItemRegistry,
    rng: np.random.Generator,
    language: str = "en",
) -> list[ChunkItem]:
    """Roll every loot entry of the selected structures into the item stacks.

    Each entry rolls its own chance, then its quantity. Loot of an item
    already present is added to that stack, matched by item id.

    Returns:
        New list of stacks.
    """
    result = list(stacks)
    for structure in structures:
        for entry in structure.loot:
            if rng.random() >= entry.chance:
                continue
            definition = items.resolve(entry.item)
            if definition is None:
                logger.debug("loot_reference_unresolved", reference=entry.item)
                continue
            quantity = entry.quantity.roll(rng)
            if quantity <= 0:
                continue
            _add_stack(result, _make_item(definition, quantity, language))
    return result


def _spawned_enemy(selected: Sequence[SpawnCandidate]) -> Enemy | None:
    for candidate in selected:
        if isinstance(candidate.payload, Enemy):
            return candidate.payload.model_copy(update={"satiation": 0})
        if candidate.identity:
            return Enemy(type=candidate.identity)
    return None


def _spawned_npcs(selected: Sequence[SpawnCandidate]) -> list[Npc]:
    npcs = []
    for candidate in selected:
        if isinstance(candidate.payload, Npc):
            npcs.append(candidate.payload)
        elif candidate.identity:
            npcs.append(Npc(name=candidate.identity))
    return npcs


def _spawned_structures(selected: Sequence[SpawnCandidate]) -> list[Structure]:
    structures = []
    for candidate in selected:
        if isinstance(candidate.payload, Structure):
            structures.append(candidate.payload)
        elif candidate.identity:
            structures.append(Structure(name=candidate.identity))
    return structures


def build_actions(
    enemy: Enemy | None, npcs: Sequence[Npc], items: Sequence[ChunkItem]
) -> list[Action]:
    """Actions offered in a chunk, numbered from 1.

    Observe the enemy, talk to the first NPC, pick up each item, then the
    always available explore and listen.
    """
    actions: list[Action] = []

    def add(kind: str, label: str, target: str | None = None) -> None:
        actions.append(Action(id=len(actions) + 1, kind=kind, label=label, target=target))

    if enemy is not None:
        add("observe", f"Observe the {enemy.type}", enemy.type)
    if npcs:
        add("talk", f"Talk to {npcs[0].name}", npcs[0].name)
    for item in items:
        add("pick_up", f"Pick up {item.name}", item.id)
    add("explore", "Explore the area")
    add("listen", "Listen to your surroundings")
    return actions


def generate_chunk_content(
    attributes: ChunkAttributes, ctx: "GenerationContext"
) -> ChunkContent:
    """Populate one chunk.

    Args:
        attributes: Attributes of the chunk.
        ctx: Generation context.

    Returns:
        The chunk's content. A terrain without a template yields an empty
        chunk with a placeholder description.
    """
    terrain = attributes.terrain
    template = ctx.templates.get(terrain)
    if template is None:
        logger.error("template_missing", terrain=terrain.value)
        return ChunkContent(description=UNKNOWN_AREA_DESCRIPTION)

    rng = ctx.rng
    settings = ctx.settings

    def select(candidates: Sequence[SpawnCandidate | None], max_count: int) -> list[SpawnCandidate]:
        return select_entities(
            candidates, max_count, attributes, ctx.items, ctx.profile, rng, settings
        )

    description = build_description(template, rng)

    template_items = [c for c in template.items if c is not None]
    item_pool: list[SpawnCandidate | None] = list(template.items) + registry_item_candidates(
        terrain,
        ctx.items,
        settings.default_custom_chance,
        exclude=[c.name for c in template_items if c.name],
    )
    max_items = max_item_types(attributes, ctx.profile, settings)
    stacks = spawn_items(select(item_pool, max_items), ctx.items, rng, ctx.language)

    npcs = _spawned_npcs(select(template.npcs, settings.npc_cap))
    enemy = _spawned_enemy(select(template.enemies, settings.enemy_cap))
    structure_refs = select(template.structures, settings.structure_cap)
    stacks = resolve_structure_loot(structure_refs, stacks, ctx.items, rng, ctx.language)
    structures = _spawned_structures(structure_refs)

    logger.debug(
        "chunk_content_generated",
        terrain=terrain.value,
        items=len(stacks),
        npcs=len(npcs),
        structures=len(structures),
        enemy=enemy.type if enemy else None,
    )

    return ChunkContent(
        description=description,
        items=stacks,
        npcs=npcs,
        structures=structures,
        enemy=enemy,
        actions=build_actions(enemy, npcs, stacks),
    )
