"""Schedule labels and the loop that runs them."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Callable, Iterable


@dataclass(frozen=True, order=True)
class ScheduleLabel:
    """Names a point in the frame at which systems run."""

    label: str

    def __str__(self) -> str:
        return self.label


class Schedule:
    """The built-in schedule labels."""

    STARTUP = ScheduleLabel("Startup")
    UPDATE = ScheduleLabel("Update")


class ScheduleRunner:
    """Runs the startup labels once, then the frame labels over and over."""

    def __init__(
        self,
        startup_labels: Iterable[ScheduleLabel] | None = None,
        labels: Iterable[ScheduleLabel] | None = None,
    ) -> None:
        self.startup_labels = tuple(startup_labels) if startup_labels is not None else (Schedule.STARTUP,)
        self.labels = tuple(labels) if labels is not None else (Schedule.UPDATE,)

    def run(self, callback: Callable[[ScheduleLabel], None], frames: int | None = None) -> None:
        """Call ``callback`` per label; loop forever unless ``frames`` limits the frame count."""
        if frames is not None and frames < 0:
            raise ValueError(f"frames must not be negative, got {frames}")
        for label in self.startup_labels:
            callback(label)
        frame_iter = itertools.count() if frames is None else range(frames)
        for _ in frame_iter:
            for label in self.labels:
                callback(label)