# apps/cli/run.py
"""
CLI entry point for simulation runs: a solver plays many puzzles.

This script:
  1) Loads the dictionary and cuts it down to --length lowercase words.
  2) Instantiates the requested solver.
  3) Plays --iterations puzzles (random solutions drawn by seed, or a fixed
     --solution) with a live progress indicator, then writes:
       - CSV:  per-game results + guess/verdict history columns
       - JSON: manifest with config, summary, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time

from tqdm import tqdm

from wordler.datasets import DictionaryLoader, DEFAULT_DICTIONARY_PATH
from wordler.engine import (
    DEFAULT_GUESSES,
    DEFAULT_WORD_LENGTH,
    WordlerError,
    keep_only_filter,
    lowercase_word,
)
from wordler.harness import run_case, summarize, write_report
from wordler.solvers import DEFAULT_SOLVER, create_solver, get_solver_ids


def main():
    """
    Parse CLI args, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordler - run solver simulations")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--length", type=int, default=DEFAULT_WORD_LENGTH, help="word length")
    ap.add_argument("--guesses", type=int, default=DEFAULT_GUESSES, help="number of guesses allowed")
    ap.add_argument("--easy", dest="hard", action="store_false", help="turn off hard rules")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY_PATH, help="word list, one word per line")
    ap.add_argument("--solution", help="always use this solution")
    ap.add_argument("--iterations", type=int, default=10, help="number of games to play")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    ap.add_argument("opening", nargs="*", help="first guesses for every game, in order")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Load the dictionary once; every game copies from the cache.
    loader = DictionaryLoader(args.dictionary)
    filters = [keep_only_filter(lowercase_word(args.length))]
    try:
        words = loader.load(filters)
    except OSError as e:
        raise SystemExit(f"Failed to load dictionary: {e}")
    if not words:
        raise SystemExit(f"No {args.length}-letter words in {args.dictionary}")
    print(f"{len(words)} {args.length}-letter words from {args.dictionary}")

    # 2) Instantiate solver by id
    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        raise SystemExit(str(e))

    # 3) Choose solutions (deterministic by seed)
    rng = random.Random(args.seed)
    if args.solution:
        cases = [args.solution] * args.iterations
    else:
        cases = [rng.choice(words) for _ in range(args.iterations)]
    total = len(cases)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    # 5) Run batch with live progress
    for idx, ans in enumerate(iterator, 1):
        per_seed = args.seed + idx * 1013904223  # LCG-ish stride to avoid collisions
        try:
            r = run_case(solver, ans, loader=loader, word_length=args.length,
                         guesses=args.guesses, hard=args.hard, seed=per_seed,
                         opening=args.opening)
        except WordlerError as e:
            raise SystemExit(f"Failed to make a puzzle for {ans!r}: {e}")
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    summary = summarize(results, max_turns=args.guesses)
    print(f"I won {100.0 * summary['win_rate']:.2f}% of games played "
          f"with an average of {summary['mean_guesses']:.2f} guesses.")

    # 6) Write outputs (CSV + manifest)
    csv_path, manifest_path = write_report(
        results,
        {
            "config": vars(args),
            "dictionary": {"path": args.dictionary, "words": len(words)},
            "solver_id": solver.id,
            "summary": summary,
        },
        args.outdir,
        max_turns=args.guesses,
        N=args.length,
    )

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
