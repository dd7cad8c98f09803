"""Page replacement: FIFO and optimal."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

Frames = tuple["int | None", ...]


@dataclass(frozen=True)
class PagingResult:
    """Frame contents after each reference and whether it faulted.

    Empty frames are None.
    """

    references: tuple[int, ...]
    frame_count: int
    snapshots: tuple[Frames, ...]
    faults: tuple[bool, ...]

    @property
    def page_faults(self) -> int:
        return sum(self.faults)

    @property
    def hits(self) -> int:
        return len(self.faults) - self.page_faults


def _prepare(references: Sequence[int], frame_count: int) -> tuple[int, ...]:
    if frame_count < 1:
        raise ValueError("at least one frame is required")
    return tuple(int(page) for page in references)


def fifo_replacement(references: Sequence[int], frame_count: int) -> PagingResult:
    """Replace the page that has been resident longest."""
    refs = _prepare(references, frame_count)
    frames: list[int | None] = [None] * frame_count
    oldest = 0
    snapshots = []
    faults = []
    for page in refs:
        fault = page not in frames
        if fault:
            frames[oldest] = page
            oldest = (oldest + 1) % frame_count
        snapshots.append(tuple(frames))
        faults.append(fault)
    return PagingResult(refs, frame_count, tuple(snapshots), tuple(faults))


def optimal_replacement(references: Sequence[int], frame_count: int) -> PagingResult:
    """Replace the page whose next use lies furthest ahead, or never comes."""
    refs = _prepare(references, frame_count)
    frames: list[int | None] = [None] * frame_count
    snapshots = []
    faults = []
    for position, page in enumerate(refs):
        fault = page not in frames
        if fault:
            if None in frames:
                frames[frames.index(None)] = page
            else:
                future = refs[position + 1:]

                def next_use(slot: int) -> float:
                    resident = frames[slot]
                    return future.index(resident) if resident in future else math.inf

                frames[max(range(frame_count), key=next_use)] = page
        snapshots.append(tuple(frames))
        faults.append(fault)
    return PagingResult(refs, frame_count, tuple(snapshots), tuple(faults))