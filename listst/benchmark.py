"""
Timing harness for :class:`OrderedListMap`.

Every operation on the table is a linear scan, so doubling the number of
keys should roughly double the per-operation time. This module measures
that for each public operation and writes the results to CSV.

Usage:
    python -m listst.cli bench --path ordered_map_performance.csv
"""

from __future__ import annotations

import csv
import logging
import random
import statistics
import time
from typing import Callable, Dict, List, Tuple

from .datastructures import OrderedListMap

logger = logging.getLogger(__name__)

Pairs = List[Tuple[int, int]]

# Number of lookups each query benchmark performs against a filled table.
LOOKUPS = 3

# Operations that populate the table themselves and must start from empty.
EMPTY_START = frozenset({"put"})

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_pairs(size: int) -> Pairs:
    """Generate a list of random key-value pairs."""
    return [(random.randint(0, size * 10), random.randint(0, 1000000)) for _ in range(size)]


def build_table(data: Pairs) -> OrderedListMap[int, int]:
    st: OrderedListMap[int, int] = OrderedListMap()
    for k, v in data:
        st.put(k, v)
    return st


def measure_operation_time(operation: Callable[[OrderedListMap, Pairs], object],
                           input_size: int, iterations: int = 5,
                           prefill: bool = True) -> Tuple[float, float]:
    """Run the operation multiple times and return average + std deviation (ms).

    With *prefill* the table is filled before the clock starts, so only
    *operation* is timed; otherwise it starts empty.
    """
    times = []
    for _ in range(iterations):
        data = generate_random_pairs(input_size)
        st = build_table(data) if prefill else OrderedListMap()
        start = time.perf_counter()
        operation(st, data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_put(st, data):
    for k, v in data:
        st.put(k, v)


def bench_get(st, data):
    for k, _ in data[:LOOKUPS]:
        st.get(k)


def bench_rank(st, data):
    for k, _ in data[:LOOKUPS]:
        st.rank(k)


def bench_select(st, data):
    n = st.size()
    for i in range(LOOKUPS):
        st.select(n - 1 - i)


def bench_floor(st, data):
    for k, _ in data[:LOOKUPS]:
        st.floor(k)


def bench_ceiling(st, data):
    for k, _ in data[:LOOKUPS]:
        st.ceiling(k)


def bench_delete(st, data):
    for k, _ in data[:LOOKUPS]:
        st.delete(k)


def bench_keys(st, data):
    for _ in st.keys():
        pass


OPERATIONS: Dict[str, Callable[[OrderedListMap, Pairs], object]] = {
    "put": bench_put,
    "get": bench_get,
    "rank": bench_rank,
    "select": bench_select,
    "floor": bench_floor,
    "ceiling": bench_ceiling,
    "delete": bench_delete,
    "keys": bench_keys,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, rounds: int = 6,
                   iterations: int = 5) -> List[List[str]]:
    """Run exponential performance tests for every operation in :data:`OPERATIONS`.

    Input sizes are ``base_input * 2**i`` for ``i in range(rounds)``. Rows are
    written to *output_file* and also returned.
    """
    if base_input < 1 or rounds < 1 or iterations < 1:
        raise ValueError("base_input, rounds and iterations must be positive")

    input_sizes = [base_input * (2 ** i) for i in range(rounds)]
    rows: List[List[str]] = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(
                    op_func, size, iterations, prefill=op_name not in EMPTY_START)
                row = [str(size), op_name, f"{avg_time:.3f}", f"{std_time:.3f}"]
                writer.writerow(row)
                rows.append(row)
                logger.info("%-8s | size=%-8d | avg=%.3f ms | std=%.3f ms",
                            op_name, size, avg_time, std_time)

    return rows
