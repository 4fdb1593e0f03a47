"""Player intent models fed into a simulation step."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToggleJob:
    """Start or stop the job at `index`."""

    index: int


@dataclass(frozen=True)
class BuyTimeSlot:
    """Spend money on one more time slot."""


@dataclass(frozen=True)
class SkipSeconds:
    """Simulate `seconds` whole seconds at once."""

    seconds: int


Intent = ToggleJob | BuyTimeSlot | SkipSeconds
