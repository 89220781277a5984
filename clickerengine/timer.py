from __future__ import annotations

import math

# Accumulated float deltas within this of the duration count as finished
_EPSILON = 1e-9


class CooldownTimer:
    """Single-shot countdown gating a repeatable action.

    Elapsed time saturates at the duration, so a finished timer stays
    finished until it is reset.
    """

    def __init__(self, duration: float = 1.0) -> None:
        if not math.isfinite(duration) or duration <= 0:
            raise ValueError(f"Timer duration must be positive, got {duration!r}")
        self.duration = duration
        self.elapsed = 0.0

    def tick(self, delta: float) -> None:
        if not math.isfinite(delta) or delta < 0:
            raise ValueError(f"Timer delta must be finite and >= 0, got {delta!r}")
        self.elapsed = min(self.elapsed + delta, self.duration)
        if self.duration - self.elapsed <= _EPSILON:
            self.elapsed = self.duration

    def finished(self) -> bool:
        return self.elapsed >= self.duration

    def reset(self) -> None:
        self.elapsed = 0.0

    def progress(self) -> float:
        """Fraction of the cooldown elapsed, in [0, 1]."""
        return max(0.0, min(self.elapsed / self.duration, 1.0))

    def __repr__(self) -> str:
        return f"CooldownTimer(elapsed={self.elapsed:.3f}, duration={self.duration})"
