"""Timing and memory benchmarks for :class:`HashtableMap`.

Each operation is run on exponentially growing inputs of random, unique
integer keys. Results are printed and written to a CSV file with one row per
(input size, operation).
"""

from __future__ import annotations

import csv
import logging
import random
import statistics
import sys
import time
from typing import Callable, Dict, List, Tuple

from .datastructures.hashtable_map import HashtableMap

logger = logging.getLogger(__name__)

Pairs = List[Tuple[int, int]]

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_pairs(size: int) -> Pairs:
    """Generate *size* key-value pairs with distinct keys."""
    keys = random.sample(range(size * 10), size)
    return [(k, random.randint(0, 1000000)) for k in keys]


def measure_operation_time(operation: Callable[[Pairs], HashtableMap], input_size: int,
                           iterations: int = 5) -> Tuple[float, float]:
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_pairs(input_size)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


def measure_space_efficiency(operation: Callable[[Pairs], HashtableMap], input_size: int,
                             iterations: int = 3) -> float:
    """Return average memory held by the table, its slot list and stored pairs (bytes)."""
    sizes = []
    for _ in range(iterations):
        data = generate_random_pairs(input_size)
        table = operation(data)
        total_size = sys.getsizeof(table) + sys.getsizeof(table._slots)
        for k, v in table.items():
            total_size += sys.getsizeof(k)
            total_size += sys.getsizeof(v)
        sizes.append(total_size)
    return statistics.mean(sizes)

# ----------------------------
# Operations to Benchmark
# ----------------------------

def _filled(data: Pairs) -> HashtableMap:
    table: HashtableMap[int, int] = HashtableMap()
    for k, v in data:
        table.put(k, v)
    return table


def op_put(data: Pairs) -> HashtableMap:
    return _filled(data)


def op_get(data: Pairs) -> HashtableMap:
    table = _filled(data)
    for k, _ in data:
        table.get(k)
    return table


def op_contains_key(data: Pairs) -> HashtableMap:
    table = _filled(data)
    for k, _ in data:
        table.contains_key(k)
    return table


def op_remove(data: Pairs) -> HashtableMap:
    table = _filled(data)
    for k, _ in data[: len(data) // 2]:
        table.remove(k)
    return table


def op_clear(data: Pairs) -> HashtableMap:
    table = _filled(data)
    table.clear()
    return table


def op_items(data: Pairs) -> HashtableMap:
    table = _filled(data)
    _ = list(table.items())
    return table


OPERATIONS: Dict[str, Callable[[Pairs], HashtableMap]] = {
    "put": op_put,
    "get": op_get,
    "contains_key": op_contains_key,
    "remove": op_remove,
    "clear": op_clear,
    "items": op_items,
}

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, rounds: int = 12,
                   iterations: int = 5) -> int:
    """Run exponential performance tests for HashtableMap operations.

    Input sizes are ``base_input * 2**i`` for ``i`` in ``range(rounds)``.
    Returns the number of result rows written.
    """
    input_sizes = [base_input * (2 ** i) for i in range(rounds)]
    rows = 0

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, iterations)
                avg_space = measure_space_efficiency(op_func, size)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"])
                rows += 1
                logger.info(
                    "%-12s | Size: %-8d | Avg Time: %.3f ms | Std: %.3f ms | Avg Space: %.0f bytes",
                    op_name, size, avg_time, std_time, avg_space,
                )

    return rows
