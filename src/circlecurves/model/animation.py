"""Stepped grow animation for the selected curve."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GrowAnimation:
    """
    Progress counter advanced once per frame, from 0 to 1 in fixed steps.

    The host drives it: after each `advance()` it schedules the next frame
    only while `running` is still True.
    """
    step: float = 0.05
    frame: int = 0
    running: bool = False

    @property
    def total_frames(self) -> int:
        return max(1, round(1.0 / self.step))

    @property
    def progress(self) -> float:
        return min(1.0, self.frame / self.total_frames)

    def start(self) -> None:
        self.frame = 0
        self.running = True

    def stop(self) -> None:
        self.running = False

    def advance(self) -> float:
        """Move one frame forward and return the new progress."""
        if not self.running:
            return self.progress
        self.frame += 1
        if self.frame >= self.total_frames:
            self.running = False
        return self.progress
