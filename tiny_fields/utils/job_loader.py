"""Loaders for job roster configuration."""

import json
import logging
from functools import lru_cache
from pathlib import Path

from tiny_fields.models import (
    JobArchetype,
    JobBaseValues,
    JobDefinition,
    LevelCurve,
    Roster,
)

logger = logging.getLogger(__name__)

DEFAULT_ROSTER_PATH = Path(__file__).parent.parent / "data" / "jobs.json"


def parse_job_definition(entry: dict) -> JobDefinition:
    """
    Parse one entry of the "jobs" list.

    Expected keys:
        archetype, money_per_action, actions_until_level_up
    Optional keys:
        action_duration (default 10), timeslot_cost (default 1), name
    """
    try:
        archetype = JobArchetype(entry["archetype"])
    except ValueError:
        raise ValueError(f"Unknown job archetype: {entry['archetype']!r}") from None
    except KeyError:
        raise ValueError(f"Job entry without archetype: {entry}") from None

    try:
        base_values = JobBaseValues(
            money_per_action=int(entry["money_per_action"]),
            actions_until_level_up=int(entry["actions_until_level_up"]),
        )
    except KeyError as e:
        raise ValueError(f"Job entry {archetype.value!r} is missing {e.args[0]!r}") from None

    return JobDefinition(
        archetype=archetype,
        base_values=base_values,
        action_duration=float(entry.get("action_duration", 10)),
        timeslot_cost=int(entry.get("timeslot_cost", 1)),
        name=entry.get("name"),
    )


def load_roster_from_json(json_path: Path | None = None) -> Roster:
    """Load a job roster from a JSON file (the bundled one by default)."""
    if json_path is None:
        json_path = DEFAULT_ROSTER_PATH

    with open(json_path) as f:
        data = json.load(f)

    curve_data = data.get("level_curve", {})
    level_curve = LevelCurve(
        money_growth=float(curve_data.get("money_growth", 1.3)),
        actions_growth=float(curve_data.get("actions_growth", 1.5)),
    )

    jobs = tuple(parse_job_definition(entry) for entry in data.get("jobs", []))

    initial_time_slots = int(data.get("initial_time_slots", 3))
    if initial_time_slots < 1:
        raise ValueError(f"initial_time_slots must be at least 1, got {initial_time_slots}")

    logger.info("Loaded %d jobs from %s", len(jobs), json_path)

    return Roster(
        jobs=jobs,
        level_curve=level_curve,
        initial_time_slots=initial_time_slots,
    )


@lru_cache(maxsize=1)
def get_default_roster() -> Roster:
    """Get the roster every new game starts with."""
    return load_roster_from_json()
