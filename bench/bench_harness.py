"""Benchmark harness for the grid search engine with deterministic seeding.

Usage: python -m bench.bench_harness --query positional --map open --size 64 --seed 42 --repeats 10

Outputs CSV with columns: query, map_family, size, seed, repeat, runtime_ms, states_finalized, cost
"""
import argparse
import csv
import logging
import random
import sys
import time

import numpy as np

from gridpath import GridMap, SearchOptions
from gridpath.simulation import PathCopyCollector, PredecessorCollector, ShortestPathSearch

logger = logging.getLogger(__name__)

QUERIES = ('positional', 'reindeer', 'paths_dag', 'paths_copy')
MAP_FAMILIES = ('open', 'maze', 'corridor', 'random')


def generate_map(family: str, size: int, seed: int) -> GridMap:
    """Square benchmark map; (0, 0) and (size-1, size-1) are always open."""
    rnd = random.Random(seed)
    cells = np.zeros((size, size), dtype=np.uint8)
    if family == 'maze':
        for y in range(size):
            for x in range(size):
                cells[y, x] = 1 if rnd.random() < 0.3 else 0
    elif family == 'corridor':
        # vertical walls every third column, each with one gap
        for i, x in enumerate(range(2, size - 1, 3)):
            cells[:, x] = 1
            cells[(i * 7) % size, x] = 0
    elif family != 'open':
        for y in range(size):
            for x in range(size):
                cells[y, x] = 1 if rnd.random() < 0.15 else 0
    cells[0, 0] = 0
    cells[size - 1, size - 1] = 0
    return GridMap.from_array(cells)


def run_once(query: str, grid: GridMap, start, goal):
    """Return (runtime_ms, states_finalized, cost) for one query."""
    t0 = time.perf_counter()
    if query == 'positional':
        result = ShortestPathSearch(grid, SearchOptions()).run(start, goal)
        diag, cost = result.diagnostics, result.cost
    elif query == 'reindeer':
        result = ShortestPathSearch(grid, SearchOptions.for_variant('reindeer')).run(start, goal)
        diag, cost = result.diagnostics, result.cost
    elif query == 'paths_dag':
        collector = PredecessorCollector(grid, SearchOptions.for_variant('reindeer'))
        cost = collector.collect(start, goal).cost
        diag = collector.diagnostics
    elif query == 'paths_copy':
        collector = PathCopyCollector(grid, SearchOptions.for_variant('reindeer'))
        cost = collector.collect(start, goal).cost
        diag = collector.diagnostics
    else:
        raise ValueError(f'Unknown query {query!r}')
    runtime_ms = (time.perf_counter() - t0) * 1000.0
    return runtime_ms, diag.states_finalized, cost if cost is not None else -1


def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument('--query', choices=QUERIES, default='positional')
    p.add_argument('--map', choices=MAP_FAMILIES, default='open')
    p.add_argument('--size', type=int, default=64)
    p.add_argument('--seed', type=int, default=42)
    p.add_argument('--repeats', type=int, default=10)
    p.add_argument('--out', default='-', help="CSV path, '-' for stdout")
    p.add_argument('--verbose', action='store_true')
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    out = sys.stdout if args.out == '-' else open(args.out, 'w', newline='')
    try:
        writer = csv.writer(out)
        writer.writerow(['query', 'map_family', 'size', 'seed', 'repeat',
                         'runtime_ms', 'states_finalized', 'cost'])
        for r in range(args.repeats):
            grid = generate_map(args.map, args.size, args.seed + r)
            start = (0, 0)
            goal = (args.size - 1, args.size - 1)
            t, states, cost = run_once(args.query, grid, start, goal)
            writer.writerow([args.query, args.map, args.size, args.seed, r, f'{t:.3f}', states, cost])
            logger.info(f"{args.query} {args.map} repeat={r} time={t:.2f}ms states={states} cost={cost}")
    finally:
        if out is not sys.stdout:
            out.close()


if __name__ == '__main__':
    main()
