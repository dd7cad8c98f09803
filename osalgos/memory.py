"""Contiguous memory allocation: first fit, best fit and worst fit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

_Candidate = tuple[int, int]


@dataclass(frozen=True)
class Allocation:
    """Where one request was placed; ``block`` is None when nothing fitted."""

    request: int
    request_size: int
    block: int | None = None
    block_size: int | None = None

    @property
    def allocated(self) -> bool:
        return self.block is not None

    @property
    def fragment(self) -> int | None:
        """Space left unused in the chosen block."""
        if self.block_size is None:
            return None
        return self.block_size - self.request_size


def _sizes(values: Sequence[int], what: str) -> list[int]:
    sizes = [int(v) for v in values]
    for size in sizes:
        if size < 0:
            raise ValueError(f"{what} size must not be negative: {size}")
    return sizes


def _allocate(
    blocks: Sequence[int],
    requests: Sequence[int],
    pick: Callable[[list[_Candidate]], _Candidate],
) -> list[Allocation]:
    block_sizes = _sizes(blocks, "block")
    request_sizes = _sizes(requests, "request")
    used: set[int] = set()
    allocations = []
    for rid, size in enumerate(request_sizes):
        candidates = [
            (bid, bsize - size)
            for bid, bsize in enumerate(block_sizes)
            if bid not in used and bsize >= size
        ]
        if not candidates:
            allocations.append(Allocation(rid, size))
            continue
        bid, _ = pick(candidates)
        used.add(bid)
        allocations.append(Allocation(rid, size, bid, block_sizes[bid]))
    return allocations


def first_fit(blocks: Sequence[int], requests: Sequence[int]) -> list[Allocation]:
    """Give each request the first free block large enough for it."""
    return _allocate(blocks, requests, lambda candidates: candidates[0])


def best_fit(blocks: Sequence[int], requests: Sequence[int]) -> list[Allocation]:
    """Give each request the free block that leaves the least space over."""
    return _allocate(blocks, requests, lambda candidates: min(candidates, key=lambda c: c[1]))


def worst_fit(blocks: Sequence[int], requests: Sequence[int]) -> list[Allocation]:
    """Give each request the free block that leaves the most space over."""
    return _allocate(blocks, requests, lambda candidates: max(candidates, key=lambda c: c[1]))


def block_table(
    blocks: Sequence[int],
    requests: Sequence[int],
    allocations: Sequence[Allocation],
) -> list[tuple[int, int, int | None, int | None]]:
    """One row per block: (block, block size, request, request size).

    The request fields are None for blocks that hold nothing.
    """
    block_sizes = _sizes(blocks, "block")
    request_sizes = _sizes(requests, "request")
    owners: dict[int, int] = {}
    for alloc in allocations:
        if alloc.block is None:
            continue
        if not 0 <= alloc.block < len(block_sizes):
            raise ValueError(f"allocation refers to unknown block {alloc.block}")
        if not 0 <= alloc.request < len(request_sizes):
            raise ValueError(f"allocation refers to unknown request {alloc.request}")
        if alloc.block in owners:
            raise ValueError(f"block {alloc.block} is allocated twice")
        owners[alloc.block] = alloc.request
    rows = []
    for bid, bsize in enumerate(block_sizes):
        rid = owners.get(bid)
        rows.append((bid, bsize, rid, None if rid is None else request_sizes[rid]))
    return rows