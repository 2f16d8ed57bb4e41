"""
Ordered Symbol Table Command-Line Interface (CLI)

Subcommands:
- index: read whitespace-separated tokens, store each one with its position
  in the stream as value, and print the table in key order
- stats: build the same table and print size, min, max and order statistics
  for the given query keys
- bench: time every table operation over doubling input sizes and write CSV

Usage examples:
    echo "S E A R C H E X A M P L E" | python -m listst.cli index
    python -m listst.cli stats --path tinyST.txt --query D Q Z
    python -m listst.cli bench --path ordered_map_performance.csv --rounds 8
"""

import argparse
import logging
import sys

from .benchmark import run_benchmarks
from .datastructures import OrderedListMap

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# -------------------------------------------------------------------
# Utility: build the token table
# -------------------------------------------------------------------
def read_tokens(path):
    """Return the whitespace-separated tokens of *path* ("-" means stdin)."""
    if path == "-":
        return sys.stdin.read().split()
    with open(path, "r", encoding="utf-8") as f:
        return f.read().split()


def build_token_table(tokens):
    """Map each token to the position of its last occurrence in *tokens*."""
    st = OrderedListMap()
    for i, token in enumerate(tokens):
        st.put(token, i)
    return st


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_index(args):
    """Print every "<key> <value>" pair in ascending key order."""
    st = build_token_table(read_tokens(args.path))
    for key in st.keys():
        print(f"{key} {st.get(key)}")


def cmd_stats(args):
    """Print size/min/max and rank, floor and ceiling of each query key."""
    st = build_token_table(read_tokens(args.path))
    print(f"size: {st.size()}")
    if st.is_empty():
        print("min: -")
        print("max: -")
    else:
        print(f"min: {st.min()}")
        print(f"max: {st.max()}")
    for q in args.query:
        floor = st.floor(q)
        ceiling = st.ceiling(q)
        print(
            f"{q}: rank={st.rank(q)} "
            f"floor={'-' if floor is None else floor} "
            f"ceiling={'-' if ceiling is None else ceiling}"
        )


def cmd_bench(args):
    """Run the benchmark and write the results to CSV."""
    rows = run_benchmarks(args.path, base_input=args.base_input,
                          rounds=args.rounds, iterations=args.iterations)
    print(f"Benchmark completed: {len(rows)} rows written to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m listst.cli", description="Ordered symbol table CLI")
    p.add_argument("--log-level", default=DEFAULT_LOG_LEVEL,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("index", help="Index tokens by their position in the input")
    s.add_argument("--path", default="-", help="input file (default: stdin)")
    s.set_defaults(func=cmd_index)

    s = sub.add_parser("stats", help="Show order statistics of the token table")
    s.add_argument("--path", default="-", help="input file (default: stdin)")
    s.add_argument("--query", nargs="*", default=[], help="keys to rank/floor/ceiling")
    s.set_defaults(func=cmd_stats)

    s = sub.add_parser("bench", help="Benchmark table operations to CSV")
    s.add_argument("--path", required=True)
    s.add_argument("--base-input", type=int, default=100)
    s.add_argument("--rounds", type=int, default=6)
    s.add_argument("--iterations", type=int, default=5)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m listst.cli`."""
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    args.func(args)


if __name__ == "__main__":
    main()
