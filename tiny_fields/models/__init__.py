"""Data models for Tiny Fields game entities."""

from dataclasses import dataclass, field
from enum import Enum


class InvalidJobError(ValueError):
    """Raised when a job is built with parameters the simulation cannot run."""


class Item(Enum):
    """Kinds of items that can be held in the inventory."""

    COIN = "coin"
    WOOD = "wood"
    IRON = "iron"
    HERB = "herb"
    MEAT = "meat"
    BERRY = "berry"

    @property
    def display_name(self) -> str:
        """Human-readable item name."""
        return self.value.replace("_", " ").title()


class JobArchetype(Enum):
    """Kinds of jobs a time slot can be assigned to."""

    WOODCUTTING = "woodcutting"
    MINING = "mining"
    HERBALISM = "herbalism"
    HUNTING = "hunting"
    FORAGING = "foraging"

    @property
    def display_name(self) -> str:
        """Human-readable job name."""
        return self.value.title()

    @property
    def product(self) -> Item:
        """Item granted by one completed action of this job."""
        return _ARCHETYPE_PRODUCTS[self]

    def completion_effect(self) -> "AddItem":
        """Effect produced by one completed action of this job."""
        return AddItem(item=self.product, amount=1)


_ARCHETYPE_PRODUCTS = {
    JobArchetype.WOODCUTTING: Item.WOOD,
    JobArchetype.MINING: Item.IRON,
    JobArchetype.HERBALISM: Item.HERB,
    JobArchetype.HUNTING: Item.MEAT,
    JobArchetype.FORAGING: Item.BERRY,
}


@dataclass
class Progress:
    """A fraction in [0, 1] backing a progress bar."""

    value: float = 0.0

    def set(self, value: float) -> None:
        """Set the value, clamped to [0, 1]."""
        self.value = min(max(value, 0.0), 1.0)

    def get(self) -> float:
        return self.value

    def reset(self) -> None:
        self.value = 0.0


@dataclass(frozen=True)
class AddItem:
    """Adds `amount` of `item` to the inventory."""

    item: Item
    amount: int


# Every effect variant a completed action can produce.
Effect = AddItem


@dataclass(frozen=True)
class EffectWithSource:
    """An applied effect together with the index of the job that emitted it."""

    job_index: int
    effect: Effect


@dataclass
class Inventory:
    """Item counts owned by the player."""

    item_amounts: dict[Item, int] = field(default_factory=lambda: {Item.COIN: 0})

    def add(self, item: Item, amount: int) -> None:
        """Add a non-negative amount of an item."""
        if amount < 0:
            raise ValueError(f"Cannot add a negative amount of {item.value}: {amount}")
        self.item_amounts[item] = self.item_amounts.get(item, 0) + amount

    def get(self, item: Item) -> int:
        """Get the count of an item, 0 if never added."""
        return self.item_amounts.get(item, 0)

    def items(self) -> list[tuple[Item, int]]:
        return list(self.item_amounts.items())

    def __getitem__(self, item: Item) -> int:
        return self.get(item)


@dataclass
class TimeSlots:
    """Time slots owned by the player and how many running jobs occupy."""

    total: int = 3
    used: int = 0

    @property
    def free(self) -> int:
        return self.total - self.used

    @property
    def upgrade_cost(self) -> int:
        """Money needed to buy the next slot: 10^(total - 1)."""
        return 10 ** (self.total - 1)


@dataclass(frozen=True)
class JobBaseValues:
    """Level 1 values a job's derived quantities grow from."""

    money_per_action: int
    actions_until_level_up: int


@dataclass(frozen=True)
class LevelCurve:
    """Per-level growth factors applied to a job's base values."""

    money_growth: float = 1.3
    actions_growth: float = 1.5


@dataclass
class Job:
    """
    One activity instance a player can run in their time slots.

    A running job accumulates time; every `action_duration` seconds it
    completes an action, which yields its completion effect and counts
    towards the next level.
    """

    archetype: JobArchetype
    name: str
    action_duration: float
    timeslot_cost: int
    base_values: JobBaseValues
    completion_effect: Effect
    level_curve: LevelCurve = field(default_factory=LevelCurve)
    level: int = 1
    running: bool = False
    time_accumulator: float = 0.0
    actions_done: int = 0
    actions_done_total: int = 0
    action_progress: Progress = field(default_factory=Progress)
    level_up_progress: Progress = field(default_factory=Progress)

    def __post_init__(self) -> None:
        # The renderer flips animation frames on `time_accumulator % 2 < 1`,
        # which only lines up with the action boundary for even durations.
        if self.action_duration <= 0 or self.action_duration % 2 != 0:
            raise InvalidJobError(
                f"{self.name}: action_duration must be a positive even number, "
                f"got {self.action_duration}"
            )
        if self.timeslot_cost < 1:
            raise InvalidJobError(
                f"{self.name}: timeslot_cost must be at least 1, got {self.timeslot_cost}"
            )

    @property
    def money_per_action(self) -> int:
        return int(
            self.base_values.money_per_action
            * self.level_curve.money_growth ** (self.level - 1)
        )

    @property
    def actions_to_level_up(self) -> int:
        """Actions needed at the current level to reach the next one."""
        return int(
            self.base_values.actions_until_level_up
            * self.level_curve.actions_growth ** (self.level - 1)
        )

    def toggle_running(self, free_slots: int) -> None:
        """Stop the job, or start it if enough slots are free."""
        if self.running:
            self.running = False
        elif free_slots >= self.timeslot_cost:
            self.running = True

    def update_progress(self, dt: float) -> Effect | None:
        """
        Advance a running job by `dt` seconds.

        At most one action completes per call; time beyond one full
        action period stays in the accumulator.

        Returns: the completion effect if an action finished, else None
        """
        self.time_accumulator += dt
        self.action_progress.set(self.time_accumulator / self.action_duration)

        if self.time_accumulator < self.action_duration:
            return None

        self.time_accumulator -= self.action_duration
        self.actions_done += 1
        self.actions_done_total += 1

        actions_needed = self.actions_to_level_up
        self.level_up_progress.set(self.actions_done / actions_needed)
        if self.actions_done >= actions_needed:
            self.level_up()

        return self.completion_effect

    def level_up(self) -> None:
        """Move to the next level; an action in flight carries over."""
        self.level += 1
        self.actions_done = 0
        self.level_up_progress.reset()


@dataclass(frozen=True)
class JobDefinition:
    """Configuration entry a fresh Job is built from."""

    archetype: JobArchetype
    base_values: JobBaseValues
    action_duration: float = 10.0
    timeslot_cost: int = 1
    name: str | None = None

    def build(self, level_curve: LevelCurve) -> Job:
        """Create a new level 1, idle job from this definition."""
        return Job(
            archetype=self.archetype,
            name=self.name or self.archetype.display_name,
            action_duration=self.action_duration,
            timeslot_cost=self.timeslot_cost,
            base_values=self.base_values,
            completion_effect=self.archetype.completion_effect(),
            level_curve=level_curve,
        )


@dataclass(frozen=True)
class Roster:
    """Starting content of a new game: jobs, level curve and slots."""

    jobs: tuple[JobDefinition, ...]
    level_curve: LevelCurve = field(default_factory=LevelCurve)
    initial_time_slots: int = 3

    def build_jobs(self) -> list[Job]:
        return [definition.build(self.level_curve) for definition in self.jobs]


@dataclass
class PerformanceFlags:
    """Markers set while processing intents so a tick can refresh cached values."""

    timeslots_changed: bool = False


@dataclass
class GameMeta:
    """Frame timings reported by the outer loop. Not read by the simulation."""

    effective_fps: float = 0.0
    raw_fps: float = 0.0
    frame_time: float = 0.0

    def record_frame(self, elapsed: float, effective_fps: float | None = None) -> None:
        """Store the duration of the last frame in seconds."""
        self.frame_time = elapsed
        self.raw_fps = 1.0 / elapsed if elapsed > 0 else 0.0
        if effective_fps is not None:
            self.effective_fps = effective_fps
