import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from tiny_fields.models import (  # noqa: E402
    AddItem,
    Item,
    Job,
    JobArchetype,
    JobBaseValues,
)
from tiny_fields.simulation.game_state import GameState  # noqa: E402


@pytest.fixture()
def state() -> GameState:
    """A fresh game with the default roster."""
    return GameState()


@pytest.fixture()
def make_job():
    """Build a woodcutting job with overridable parameters."""

    def _make(**overrides) -> Job:
        params = {
            "archetype": JobArchetype.WOODCUTTING,
            "name": "Woodcutting",
            "action_duration": 10.0,
            "timeslot_cost": 1,
            "base_values": JobBaseValues(money_per_action=3, actions_until_level_up=10),
            "completion_effect": AddItem(item=Item.WOOD, amount=1),
        }
        params.update(overrides)
        return Job(**params)

    return _make
