"""CPU scheduling algorithms: FCFS, round robin, priority and preemptive SJF."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence, TypeVar

_T = TypeVar("_T")


@dataclass(frozen=True)
class ProcessResult:
    """Timing of one process once the schedule has run."""

    pid: int
    burst_time: int
    waiting_time: int
    turnaround_time: int
    priority: int | None = None
    arrival_time: int = 0


@dataclass(frozen=True)
class ScheduleResult:
    """The processes of a schedule, with averaged timings."""

    processes: tuple[ProcessResult, ...]

    def __iter__(self) -> Iterator[ProcessResult]:
        return iter(self.processes)

    def __len__(self) -> int:
        return len(self.processes)

    def _mean(self, values: list[int]) -> float:
        if not values:
            raise ValueError("schedule holds no processes")
        return sum(values) / len(values)

    def average_waiting_time(self) -> float:
        """Mean waiting time over all processes."""
        return self._mean([p.waiting_time for p in self.processes])

    def average_turnaround_time(self) -> float:
        """Mean turnaround time over all processes."""
        return self._mean([p.turnaround_time for p in self.processes])


def _validate_bursts(burst_times: Sequence[int], *, allow_zero: bool = True) -> list[int]:
    bursts = [int(b) for b in burst_times]
    if not bursts:
        raise ValueError("at least one process is required")
    lowest = 0 if allow_zero else 1
    for burst in bursts:
        if burst < lowest:
            raise ValueError(f"invalid burst time: {burst}")
    return bursts


def _check_same_length(first: Sequence[int], second: Sequence[int], what: str) -> None:
    if len(first) != len(second):
        raise ValueError(f"burst times and {what} differ in length")


def fcfs(burst_times: Sequence[int]) -> ScheduleResult:
    """Run processes in the order given, each to completion."""
    bursts = _validate_bursts(burst_times)
    results = []
    elapsed = 0
    for pid, burst in enumerate(bursts):
        results.append(ProcessResult(pid, burst, elapsed, elapsed + burst))
        elapsed += burst
    return ScheduleResult(tuple(results))


def round_robin(burst_times: Sequence[int], quantum: int) -> ScheduleResult:
    """Cycle through the processes, giving each at most ``quantum`` units per turn."""
    bursts = _validate_bursts(burst_times)
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    finish = {pid: 0 for pid, burst in enumerate(bursts) if burst == 0}
    queue = deque((pid, burst) for pid, burst in enumerate(bursts) if burst > 0)
    clock = 0
    while queue:
        pid, remaining = queue.popleft()
        run = min(quantum, remaining)
        clock += run
        if remaining > run:
            queue.append((pid, remaining - run))
        else:
            finish[pid] = clock
    return ScheduleResult(
        tuple(
            ProcessResult(pid, burst, finish[pid] - burst, finish[pid])
            for pid, burst in enumerate(bursts)
        )
    )


def _exchange_sorted(items: Sequence[_T], key: Callable[[_T], int]) -> list[_T]:
    # Exchange sort rather than sorted(): it fixes the order of equal priorities.
    ordered = list(items)
    for i in range(len(ordered)):
        for k in range(i + 1, len(ordered)):
            if key(ordered[i]) > key(ordered[k]):
                ordered[i], ordered[k] = ordered[k], ordered[i]
    return ordered


def priority_schedule(burst_times: Sequence[int], priorities: Sequence[int]) -> ScheduleResult:
    """Run processes non-preemptively, lowest priority number first.

    The result lists processes in execution order.
    """
    bursts = _validate_bursts(burst_times)
    _check_same_length(bursts, priorities, "priorities")
    jobs = _exchange_sorted(
        [(pid, burst, int(prio)) for pid, (burst, prio) in enumerate(zip(bursts, priorities))],
        key=lambda job: job[2],
    )
    results = []
    elapsed = 0
    for pid, burst, prio in jobs:
        results.append(ProcessResult(pid, burst, elapsed, elapsed + burst, priority=prio))
        elapsed += burst
    return ScheduleResult(tuple(results))


def sjf_preemptive(arrival_times: Sequence[int], burst_times: Sequence[int]) -> ScheduleResult:
    """Shortest remaining time first, re-evaluated at every time unit.

    Ties go to the process listed first; the CPU idles until the next arrival
    when nothing is ready.
    """
    bursts = _validate_bursts(burst_times, allow_zero=False)
    _check_same_length(bursts, arrival_times, "arrival times")
    arrivals = [int(a) for a in arrival_times]
    if any(a < 0 for a in arrivals):
        raise ValueError("arrival times must not be negative")

    remaining = list(bursts)
    pending = set(range(len(bursts)))
    finish: dict[int, int] = {}
    clock = 0
    while pending:
        ready = [pid for pid in pending if arrivals[pid] <= clock]
        if not ready:
            clock = min(arrivals[pid] for pid in pending)
            continue
        pid = min(ready, key=lambda p: (remaining[p], p))
        remaining[pid] -= 1
        clock += 1
        if remaining[pid] == 0:
            pending.discard(pid)
            finish[pid] = clock

    results = []
    for pid, (arrival, burst) in enumerate(zip(arrivals, bursts)):
        turnaround = finish[pid] - arrival
        results.append(
            ProcessResult(pid, burst, turnaround - burst, turnaround, arrival_time=arrival)
        )
    return ScheduleResult(tuple(results))