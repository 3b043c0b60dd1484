"""
Hashtable Command-Line Interface (CLI)

Subcommands:
- demo   insert a few integer keys into a small table and print its slot
         layout, showing linear probing, tombstones and growth
- bench  run the benchmark harness and write the results to a CSV file

Usage examples:
    python -m hashtable.cli demo --capacity 10 --keys 1 2 3 11 --remove 2
    python -m hashtable.cli bench --path results.csv --base-input 100 --rounds 6
"""

import argparse
import logging
import sys

from . import benchmark
from .datastructures.hashtable_map import HashtableMap


# -------------------------------------------------------------------
# Utility: pretty-print slot layout
# -------------------------------------------------------------------
def print_slots(table):
    """Display one line per slot: index, state, and entry if occupied."""
    for idx, slot in enumerate(table._slots):
        if hasattr(slot, "key"):
            print(f"  [{idx}] {slot.key!r} -> {slot.value!r}")
        else:
            print(f"  [{idx}] <{slot.value}>")
    print(f"size={table.size} capacity={table.capacity} load_factor={table.load_factor:.2f}")


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_demo(args):
    """Fill a table with integer keys, optionally remove some, and show it."""
    table = HashtableMap(args.capacity)
    for key in args.keys:
        table.put(key, f"value-{key}")
    for key in args.remove:
        table.remove(key)
    print_slots(table)


def cmd_bench(args):
    """Run the benchmark suite and write a CSV report."""
    rows = benchmark.run_benchmarks(
        args.path,
        base_input=args.base_input,
        rounds=args.rounds,
        iterations=args.iterations,
    )
    print(f"Benchmark completed. {rows} rows saved to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m hashtable.cli", description="Hashtable CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("demo", help="Show the slot layout after some insertions")
    s.add_argument("--capacity", type=int, default=HashtableMap.DEFAULT_CAPACITY)
    s.add_argument("--keys", type=int, nargs="*", default=[1, 2, 3, 11])
    s.add_argument("--remove", type=int, nargs="*", default=[])
    s.set_defaults(func=cmd_demo)

    s = sub.add_parser("bench", help="Benchmark table operations to CSV")
    s.add_argument("--path", required=True)
    s.add_argument("--base-input", type=int, default=100)
    s.add_argument("--rounds", type=int, default=12)
    s.add_argument("--iterations", type=int, default=5)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m hashtable.cli`."""
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except (ValueError, KeyError) as exc:
        parser.exit(2, f"error: {exc}\n")


if __name__ == "__main__":
    main()
