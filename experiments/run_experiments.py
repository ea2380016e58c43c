# experiments/run_experiments.py
# Time the generators over sweeps of counts and universe sizes, collect time statistics.
# Runs in-process; no service needed.

import argparse
import csv
import logging
import os
import time

from uniqseq import config
from uniqseq.check import check
from uniqseq.strategies import CHOOSERS

OUT_DIR = 'results'
MODES = ['qpr', 'bitmap', 'naive']
HUGE_UNIVERSE = 1000000000


def sweep_phases(universe_size):
    # (phase, start, end, inc) as fractions of the universe size
    fractions = [
        ('small', 0.01, 0.1, 0.001),
        ('medium', 0.4, 0.6, 0.1),
        ('high', 0.8, 1.0, 0.1),
        ('full', 0.05, 1.0, 0.5),
    ]
    for phase, start, end, inc in fractions:
        yield (phase, int(universe_size * start), int(universe_size * end),
               max(1, int(universe_size * inc)))


def time_strategy(mode, universe_size, count_start, count_end, count_inc,
                  check_valid=False, seed=0x1):
    """
    Get one sequence of `count` numbers out of universe_size for every count
    in range(count_start, count_end, count_inc); returns elapsed microseconds.
    With check_valid, a sequence holding a duplicate raises DuplicateDetected.
    """
    choose = CHOOSERS[mode]
    t0 = time.perf_counter()
    for count in range(count_start, count_end, count_inc):
        seq = choose(count, universe_size, seed)
        if check_valid:
            check(seq).raise_for_duplicate()
    return int((time.perf_counter() - t0) * 1e6)


def ensure_results_dir():
    os.makedirs(OUT_DIR, exist_ok=True)


def run_universe(writer, universe_size, modes, check_valid, seed, phases=None):
    for phase, start, end, inc in (phases or sweep_phases(universe_size)):
        print(f"\n - with a {phase} count\n")
        for mode in modes:
            elapsed = time_strategy(mode, universe_size, start, end, inc, check_valid, seed)
            print(f"Time for '{mode}' (universeSize: {universe_size}, "
                  f"count range {start}:{end}:{inc}): {elapsed}us")
            writer.writerow([universe_size, phase, mode, start, end, inc, elapsed])


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--universe_sizes', type=str, default='1000,10000,100000', help='comma list')
    parser.add_argument('--modes', type=str, default=','.join(MODES), help='comma list')
    parser.add_argument('--seed', type=int, default=0x1, help='seed for every generator')
    parser.add_argument('--check', action='store_true', help='validate every sequence (slow)')
    parser.add_argument('--huge', action='store_true',
                        help=f'add a full range run on {HUGE_UNIVERSE} values (qpr and bitmap only)')
    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))

    if args.check:
        print("!!! Attention: running with validity check will slow down a lot !!!")
    universe_sizes = [int(x) for x in args.universe_sizes.split(',')]
    modes = args.modes.split(',')
    ensure_results_dir()
    csv_path = os.path.join(OUT_DIR, f'experiments_{int(time.time())}.csv')
    with open(csv_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['universe_size', 'phase', 'mode', 'count_start', 'count_end', 'count_inc', 'time_us'])
        for universe_size in universe_sizes:
            print(f"\n\nRun for universeSize {universe_size}")
            run_universe(writer, universe_size, modes, args.check, args.seed)
            f.flush()
        if args.huge:
            # naive version is non-practicable here
            print(f"\n\nRun for a huge universeSize {HUGE_UNIVERSE}")
            full = [p for p in sweep_phases(HUGE_UNIVERSE) if p[0] == 'full']
            run_universe(writer, HUGE_UNIVERSE, [m for m in modes if m != 'naive'],
                         args.check, args.seed, phases=full)
    print("Experiments complete. CSV saved at:", csv_path)
