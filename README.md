# osalgos

Small, dependency-free implementations of algorithms taught in an
operating-systems course:

- **CPU scheduling** (`osalgos.scheduling`): first come first served, round
  robin, non-preemptive priority and preemptive shortest job first (shortest
  remaining time).
- **Contiguous memory allocation** (`osalgos.memory`): first fit, best fit and
  worst fit.
- **Page replacement** (`osalgos.paging`): FIFO and optimal.

The functions take plain sequences of integers and return immutable result
objects. Nothing is printed unless you use the `osalgos` command.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## CPU scheduling

```python
from osalgos.scheduling import fcfs, round_robin, priority_schedule, sjf_preemptive

result = fcfs([24, 3, 3])
result.average_waiting_time()     # 17.0
result.average_turnaround_time()  # 27.0

rr = round_robin([24, 3, 3], quantum=4)
rr.average_waiting_time()         # 5.666...

prio = priority_schedule([10, 1, 2, 1, 5], priorities=[3, 1, 4, 5, 2])

srtf = sjf_preemptive(arrival_times=[0, 1, 2, 3], burst_times=[8, 4, 9, 5])
srtf.average_waiting_time()       # 6.5
```

Each function returns a `ScheduleResult`, which holds a tuple of
`ProcessResult` in `processes` and can be iterated over and measured with
`len()`. A `ProcessResult` has `pid` (the 0-based position in the input),
`burst_time`, `waiting_time`, `turnaround_time`, `priority` (set by
`priority_schedule` only) and `arrival_time` (set by `sjf_preemptive`,
otherwise 0). `average_waiting_time()` and `average_turnaround_time()` give
the means.

Behaviour worth knowing:

- `fcfs` and `round_robin` report processes in input order; all processes are
  taken to arrive at time 0. Zero burst times are allowed and finish at 0.
- `round_robin` requires a positive `quantum`.
- `priority_schedule` runs the lowest priority number first and reports the
  processes in execution order. Processes with equal priority keep the order
  an exchange sort leaves them in, which is not always input order.
- `sjf_preemptive` picks, at every time unit, the ready process with the least
  remaining time, breaking ties by input position; the CPU idles until the
  next arrival when nothing is ready. Burst times must be at least 1 and
  arrival times must not be negative.
- Empty input, negative burst times and sequences of different lengths raise
  `ValueError`.

## Memory allocation

```python
from osalgos.memory import first_fit, best_fit, worst_fit, block_table

blocks = [100, 500, 200, 300, 600]
requests = [212, 417, 112, 426]

allocations = first_fit(blocks, requests)
[a.block for a in allocations]         # [1, 4, 2, None]
[a.fragment for a in allocations]      # [288, 183, 88, None]

[a.block for a in best_fit(blocks, requests)]   # [3, 1, 2, 4]
[a.block for a in worst_fit(blocks, requests)]  # [4, 1, 3, None]

block_table(blocks, requests, allocations)
# [(0, 100, None, None), (1, 500, 0, 212), (2, 200, 2, 112),
#  (3, 300, None, None), (4, 600, 1, 417)]
```

Each function returns one `Allocation` per request, in request order, with
`request`, `request_size`, `block` and `block_size`, plus the properties
`allocated` and `fragment` (space left over in the chosen block). Indices are
0-based. A block is given to at most one request; a request that fits no free
block has `block` set to `None`.

`block_table` turns a list of allocations into one row per block:
`(block, block_size, request, request_size)`, with `None` for blocks that hold
nothing. It raises `ValueError` for allocations that name unknown blocks or
requests, or that use a block twice. Negative sizes raise `ValueError`
everywhere.

## Page replacement

```python
from osalgos.paging import fifo_replacement, optimal_replacement

references = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2]

fifo = fifo_replacement(references, frame_count=3)
optimal = optimal_replacement(references, frame_count=3)
fifo.page_faults, fifo.hits
```

Both return a `PagingResult` with `references`, `frame_count`, `snapshots`
(the frame contents after each reference, `None` for an empty frame) and
`faults` (one boolean per reference), and the properties `page_faults` and
`hits`. FIFO replaces the page that has been resident longest; optimal fills
empty frames first, then replaces the page whose next use is furthest ahead or
never comes, taking the lowest frame on a tie. A `frame_count` below 1 raises
`ValueError`.

## Command line

Installing the package provides the `osalgos` command. Each algorithm is a
subcommand, and the numbers are given as arguments:

```
osalgos fcfs 24 3 3
osalgos rr --quantum 4 24 3 3
osalgos priority 10:3 1:1 2:4 1:5 5:2        # BURST:PRIORITY
osalgos sjf 0:8 1:4 2:9 3:5                  # ARRIVAL:BURST
osalgos first-fit --blocks 100 500 200 300 600 --requests 212 417 112 426
osalgos best-fit -b 100 500 200 300 600 -r 212 417 112 426 --by-block
osalgos worst-fit -b 100 500 200 300 600 -r 212 417 112 426
osalgos fifo --frames 3 7 0 1 2 0 3 0 4 2 3 0 3 2
osalgos optimal -f 3 7 0 1 2 0 3 0 4 2 3 0 3 2
```

Output is tab-separated. Scheduling commands print one row per process
(`P0`, `P1`, ...) and the two averages to six decimal places. Allocation
commands list requests with 1-based request and block numbers, or blocks with
`--by-block`; unplaced entries show `Not allocated`. Paging commands print the
frames after each fault (`-1` for an empty frame), only the page on a hit, and
the total number of page faults. Invalid input makes the command print an
error to standard error and exit with status 1.

See everything it accepts with:

```
osalgos --help
```

## Limits

The command does not prompt for input interactively; all values go on the
command line. There is no visualisation such as Gantt charts, and processes in
`fcfs`, `round_robin` and `priority_schedule` cannot be given arrival times.