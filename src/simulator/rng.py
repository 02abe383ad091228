"""Seeded Park-Miller (Lehmer) generator with named draws.

The generator is an immutable state value advanced by ``next_value``,
which returns the drawn float together with the next state. Nothing is
shared between instances, so any number of simulations can run side by
side with the same seed and see the same sequence.

``DrawStream`` wraps the state for the simulator. Every draw is tagged
with a ``Draw`` name; the order in which names are drawn is the protocol
that makes the output reproducible, and an optional trace records it.
"""

from dataclasses import dataclass
from enum import Enum

from src.simulator.errors import InvalidConfigError

MODULUS = 2147483647  # 2**31 - 1
MULTIPLIER = 16807  # 7**5


class Draw(str, Enum):
    VIEWS_JITTER = "views-jitter"
    VISITOR_RATE = "visitor-rate"
    BOOKING_RATE = "booking-rate"
    PREPAID_JITTER = "prepaid-jitter"
    HOUR_PICK = "hour-pick"
    HOUR_OVERRIDE_CHECK = "hour-override-check"
    EVENING_HOUR_PICK = "evening-hour-pick"


@dataclass(frozen=True)
class LehmerState:
    state: int


def seed_state(seed: int) -> LehmerState:
    """Build the initial generator state for ``seed``.

    Seeds that reduce to 0 modulo 2**31 - 1 are rejected: the recurrence
    would stay at 0 forever.
    """
    state = seed % MODULUS
    if state == 0:
        raise InvalidConfigError(f"Seed {seed} is degenerate for the Lehmer generator")
    return LehmerState(state)


def next_value(current: LehmerState) -> tuple[float, LehmerState]:
    """Advance one step. Returns a float in (0, 1) and the new state."""
    state = (current.state * MULTIPLIER) % MODULUS
    return state / MODULUS, LehmerState(state)


class DrawStream:
    """Sequential named draws from a seeded Lehmer generator."""

    def __init__(self, seed: int, record: bool = False):
        self.seed = seed
        self._state = seed_state(seed)
        self.count = 0
        self.trace: list[tuple[Draw, float]] | None = [] if record else None

    def draw(self, name: Draw) -> float:
        value, self._state = next_value(self._state)
        self.count += 1
        if self.trace is not None:
            self.trace.append((name, value))
        return value
