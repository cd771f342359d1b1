"""Automated benchmark suite comparing the search queries across map families.

Produces CSV with fields: query, map_type, size, time_sec, states_finalized, cost
"""
import csv
import logging
import os

from bench.bench_harness import generate_map, run_once

logger = logging.getLogger(__name__)

DEFAULT_MAPS = [
    ('open', 40, 1),
    ('random', 40, 2),
    ('corridor', 40, 3),
    ('maze', 40, 4),
]


def run_suite(out_csv='bench/results.csv', maps=None, queries=('positional', 'reindeer', 'paths_dag')):
    maps = maps or DEFAULT_MAPS
    rows = []
    for map_type, size, seed in maps:
        grid = generate_map(map_type, size, seed)
        for query in queries:
            t_ms, states, cost = run_once(query, grid, (0, 0), (size - 1, size - 1))
            rows.append({'query': query, 'map_type': map_type, 'size': size,
                         'time_sec': t_ms / 1000.0, 'states_finalized': states, 'cost': cost})
            logger.info(f"{query} {map_type} time={t_ms:.1f}ms states={states} cost={cost}")

    if out_csv:
        os.makedirs(os.path.dirname(out_csv) or '.', exist_ok=True)
        with open(out_csv, 'w', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            for r in rows:
                writer.writerow(r)
        logger.info(f'Wrote results to {out_csv}')
    return rows


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(levelname)s - %(message)s')
    run_suite()
