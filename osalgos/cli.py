"""Command-line front end for the scheduling, memory and paging algorithms."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from osalgos.memory import Allocation, best_fit, block_table, first_fit, worst_fit
from osalgos.paging import PagingResult, fifo_replacement, optimal_replacement
from osalgos.scheduling import (
    ScheduleResult,
    fcfs,
    priority_schedule,
    round_robin,
    sjf_preemptive,
)

_ALLOCATORS = {
    "first-fit": first_fit,
    "best-fit": best_fit,
    "worst-fit": worst_fit,
}

_REPLACERS = {
    "fifo": fifo_replacement,
    "optimal": optimal_replacement,
}


def _pair(text: str) -> tuple[int, int]:
    parts = text.split(":")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected two numbers as A:B, got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a pair of integers: {text!r}") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="osalgos",
        description="Run classic operating-system algorithms and print their tables.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    cmd = commands.add_parser("fcfs", help="first come, first served scheduling")
    cmd.add_argument("bursts", nargs="+", type=int, metavar="BURST")

    cmd = commands.add_parser("rr", help="round robin scheduling")
    cmd.add_argument("-q", "--quantum", type=int, required=True)
    cmd.add_argument("bursts", nargs="+", type=int, metavar="BURST")

    cmd = commands.add_parser("priority", help="non-preemptive priority scheduling")
    cmd.add_argument("jobs", nargs="+", type=_pair, metavar="BURST:PRIORITY")

    cmd = commands.add_parser("sjf", help="preemptive shortest job first")
    cmd.add_argument("jobs", nargs="+", type=_pair, metavar="ARRIVAL:BURST")

    for name in _ALLOCATORS:
        cmd = commands.add_parser(name, help=f"{name.replace('-', ' ')} memory allocation")
        cmd.add_argument("-b", "--blocks", nargs="+", type=int, required=True)
        cmd.add_argument("-r", "--requests", nargs="+", type=int, required=True)
        cmd.add_argument(
            "--by-block", action="store_true", help="list blocks rather than requests"
        )

    for name in _REPLACERS:
        cmd = commands.add_parser(name, help=f"{name} page replacement")
        cmd.add_argument("-f", "--frames", type=int, required=True)
        cmd.add_argument("pages", nargs="+", type=int, metavar="PAGE")

    return parser


def _print_schedule(result: ScheduleResult, *, priority: bool = False, arrival: bool = False) -> None:
    header = ["PROCESS"]
    if arrival:
        header.append("ARRIVAL TIME")
    if priority:
        header.append("PRIORITY")
    header += ["BURST TIME", "WAITING TIME", "TURNAROUND TIME"]
    print("\t".join(header))
    for proc in result:
        row = [f"P{proc.pid}"]
        if arrival:
            row.append(str(proc.arrival_time))
        if priority:
            row.append(str(proc.priority))
        row += [str(proc.burst_time), str(proc.waiting_time), str(proc.turnaround_time)]
        print("\t".join(row))
    print(f"Average Waiting Time -- {result.average_waiting_time():.6f}")
    print(f"Average Turnaround Time -- {result.average_turnaround_time():.6f}")


def _print_allocations(allocations: list[Allocation]) -> None:
    print("Request_no\tRequest_size\tBlock_no\tBlock_size\tFragment")
    for alloc in allocations:
        if alloc.allocated:
            print(
                f"{alloc.request + 1}\t{alloc.request_size}\t{alloc.block + 1}"
                f"\t{alloc.block_size}\t{alloc.fragment}"
            )
        else:
            print(f"{alloc.request + 1}\t{alloc.request_size}\tNot allocated")


def _print_block_table(rows: list[tuple[int, int, int | None, int | None]]) -> None:
    print("Block_no\tBlock_size\tRequest_no\tRequest_size")
    for bid, bsize, rid, rsize in rows:
        if rid is None:
            print(f"{bid + 1}\t{bsize}\tNot allocated")
        else:
            print(f"{bid + 1}\t{bsize}\t{rid + 1}\t{rsize}")


def _print_paging(result: PagingResult) -> None:
    print("Reference\tPage frames")
    for page, frames, fault in zip(result.references, result.snapshots, result.faults):
        if fault:
            shown = "\t".join("-1" if f is None else str(f) for f in frames)
            print(f"{page}\t{shown}")
        else:
            print(f"{page}")
    print(f"Total Page Faults = {result.page_faults}")


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line, run the chosen algorithm and print its table."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "fcfs":
            _print_schedule(fcfs(args.bursts))
        elif args.command == "rr":
            _print_schedule(round_robin(args.bursts, args.quantum))
        elif args.command == "priority":
            bursts, priorities = zip(*args.jobs)
            _print_schedule(priority_schedule(bursts, priorities), priority=True)
        elif args.command == "sjf":
            arrivals, bursts = zip(*args.jobs)
            _print_schedule(sjf_preemptive(arrivals, bursts), arrival=True)
        elif args.command in _ALLOCATORS:
            allocations = _ALLOCATORS[args.command](args.blocks, args.requests)
            if args.by_block:
                _print_block_table(block_table(args.blocks, args.requests, allocations))
            else:
                _print_allocations(allocations)
        else:
            _print_paging(_REPLACERS[args.command](args.pages, args.frames))
    except ValueError as exc:
        print(f"osalgos: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())