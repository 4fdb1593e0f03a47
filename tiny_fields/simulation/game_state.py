"""Tick-driven game state: applies player intents and advances running jobs."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from tiny_fields.models import (
    AddItem,
    Effect,
    EffectWithSource,
    GameMeta,
    Inventory,
    Job,
    PerformanceFlags,
    Roster,
    TimeSlots,
)
from tiny_fields.models.intent import BuyTimeSlot, Intent, SkipSeconds, ToggleJob
from tiny_fields.utils.job_loader import get_default_roster

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """
    Aggregate root of a game.

    Jobs are addressed by their index in `jobs`. All mutation goes
    through `step`.
    """

    jobs: list[Job] = field(default_factory=lambda: get_default_roster().build_jobs())
    total_money: int = 0
    time_slots: TimeSlots = field(
        default_factory=lambda: TimeSlots(total=get_default_roster().initial_time_slots)
    )
    performance_flags: PerformanceFlags = field(default_factory=PerformanceFlags)
    inventory: Inventory = field(default_factory=Inventory)
    meta: GameMeta = field(default_factory=GameMeta)

    @classmethod
    def from_roster(cls, roster: Roster) -> "GameState":
        """Create a fresh game from a job roster."""
        return cls(
            jobs=roster.build_jobs(),
            time_slots=TimeSlots(total=roster.initial_time_slots),
        )

    def step(self, intents: Sequence[Intent], dt: float) -> list[EffectWithSource]:
        """
        Apply intents in order, then advance the world by `dt` seconds.

        All toggles in one step see the free slot count from before the
        step started.

        Returns: effects produced by the `dt` advance (not by skipped seconds)
        """
        free_slots = self.time_slots.free

        for intent in intents:
            if isinstance(intent, ToggleJob):
                self._toggle_job(intent.index, free_slots)
            elif isinstance(intent, BuyTimeSlot):
                self._buy_time_slot()
            elif isinstance(intent, SkipSeconds):
                for _ in range(intent.seconds):
                    self.update_progress(1.0)
            else:
                logger.debug("Ignoring unknown intent %r", intent)

        effects = self.update_progress(dt)

        if self.performance_flags.timeslots_changed:
            self.time_slots.used = sum(job.timeslot_cost for job in self.jobs if job.running)
            self.performance_flags.timeslots_changed = False

        return effects

    def update_progress(self, dt: float) -> list[EffectWithSource]:
        """Advance every running job, then apply the effects they produced."""
        produced: list[EffectWithSource] = []

        for index, job in enumerate(self.jobs):
            if not job.running:
                continue
            level_before = job.level
            effect = job.update_progress(dt)
            if effect is not None:
                produced.append(EffectWithSource(job_index=index, effect=effect))
            if job.level != level_before:
                logger.debug("%s reached level %d", job.name, job.level)

        # Applied after all jobs advanced so every job sees the same inventory
        for effect_with_source in produced:
            self._apply_effect(effect_with_source.effect)

        return produced

    def _toggle_job(self, index: int, free_slots: int) -> None:
        if not 0 <= index < len(self.jobs):
            logger.debug("Ignoring toggle for unknown job index %d", index)
            return
        self.jobs[index].toggle_running(free_slots)
        self.performance_flags.timeslots_changed = True

    def _buy_time_slot(self) -> None:
        cost = self.time_slots.upgrade_cost
        if self.total_money < cost:
            logger.debug("Cannot afford time slot: have %d, need %d", self.total_money, cost)
            return
        self.total_money -= cost
        self.time_slots.total += 1
        self.performance_flags.timeslots_changed = True
        logger.debug("Bought time slot %d for %d", self.time_slots.total, cost)

    def _apply_effect(self, effect: Effect) -> None:
        if isinstance(effect, AddItem):
            self.inventory.add(effect.item, effect.amount)
        else:
            raise TypeError(f"Unknown effect: {effect!r}")
