"""Spawn condition evaluation against a chunk's attributes."""

from typing import Any, Mapping

import structlog

from ..state import ChunkAttributes
from .candidates import CHANCE_KEY

logger = structlog.get_logger()

SOIL_KEY = "soil_type"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def check_conditions(conditions: Mapping[str, Any], attributes: ChunkAttributes) -> bool:
    """Whether a chunk satisfies every spawn condition.

    ``chance`` is not a condition and is ignored here. ``soil_type`` must
    list the chunk's soil. Other keys are ``{min, max}`` ranges over the
    attribute of the same name; a missing bound is unconstrained. Keys that
    name no numeric attribute are skipped so data may carry extra keys.
    """
    values = attributes.condition_values()

    for key, condition in conditions.items():
        if key == CHANCE_KEY:
            continue

        if key == SOIL_KEY:
            if isinstance(condition, str):
                allowed = [condition]
            elif isinstance(condition, (list, tuple)):
                allowed = list(condition)
            else:
                logger.debug("condition_skipped", key=key)
                continue
            if values[SOIL_KEY] not in allowed:
                return False
            continue

        value = values.get(key)
        if not _is_number(value) or not isinstance(condition, Mapping):
            logger.debug("condition_skipped", key=key)
            continue

        low = condition.get("min")
        high = condition.get("max")
        if _is_number(low) and value < low:
            return False
        if _is_number(high) and value > high:
            return False

    return True
