"""Record keys and event types written to run artifacts.

All schemas are plain dicts describing expected keys and types,
used for documentation and optional validation in tests.
"""

from __future__ import annotations

from enum import Enum


# ---------------------------------------------------------------------------
# Turn metric keys (one record per player per turn)
# ---------------------------------------------------------------------------

STEP_METRIC_SCHEMA: dict[str, str] = {
    "episode": "int",
    "step": "int",
    "agent_id": "str",
    "action": "any",
    "reward": "float",
    "terminated": "bool",
}

STEP_METRIC_KEYS: list[str] = list(STEP_METRIC_SCHEMA)


# ---------------------------------------------------------------------------
# Boundary events
# ---------------------------------------------------------------------------

class EventType(Enum):
    """Boundary events emitted during an experiment."""

    EPISODE_END = "episode_end"
    EXPERIMENT_END = "experiment_end"


EVENT_SCHEMAS: dict[str, dict[str, str]] = {
    EventType.EPISODE_END.value: {
        "event": "str",
        "episode": "int",
        "agent_id": "str",
        "steps": "int",
        "total_reward": "float",
        "terminated": "bool",
    },
    EventType.EXPERIMENT_END.value: {
        "event": "str",
        "agent_id": "str",
        "episodes": "int",
        "total_steps": "int",
    },
}
