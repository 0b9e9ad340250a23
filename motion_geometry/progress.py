"""Elapsed time within a fixed duration, used to drive easing curves."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Progress:
    """A ``(time, duration)`` pair with ``0 <= time <= duration``.

    Negative durations become 0 and ``time`` is clamped into range, so every
    instance has a completion ``fraction`` in ``[0, 1]``. A zero duration counts
    as already complete.
    """

    time: float
    duration: float

    def __post_init__(self) -> None:
        duration = max(0.0, float(self.duration))
        object.__setattr__(self, "duration", duration)
        object.__setattr__(self, "time", min(duration, max(0.0, float(self.time))))

    @property
    def fraction(self) -> float:
        return self.time / self.duration if self.duration > 0 else 1.0

    @property
    def remaining_fraction(self) -> float:
        return 1.0 - self.fraction

    @property
    def is_complete(self) -> bool:
        return self.time >= self.duration

    def advanced(self, delta: float) -> "Progress":
        """Progress after another ``delta`` of elapsed time."""
        return Progress(self.time + delta, self.duration)


__all__ = ["Progress"]
