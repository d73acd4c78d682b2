"""
Game harness: connects a Puzzle to a Solver.

- play_game:  drive one puzzle with one solver until it is won or the budget
              runs out.
- run_case:   build a puzzle for a given answer, reset the solver, play.
- run_batch:  run many answers in sequence.
- summarize:  win rate and guess statistics over a batch.

The puzzle and solver never share state; the harness only passes guesses one
way and verdicts the other. Both are built from the same loader and filters,
so their remaining counts should agree after every round; a disagreement is
logged as a warning.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Sequence, Tuple

import numpy as np

from wordler.engine import (
    DEFAULT_GUESSES,
    DEFAULT_WORD_LENGTH,
    InvalidGuessError,
    NoWordsRemainingError,
    NotInDictionaryError,
    OutOfGuessesError,
    Puzzle,
    Verdict,
    WordFilter,
    is_winning,
    keep_only_filter,
    lowercase_word,
)
from wordler.solvers import BaseSolver

log = logging.getLogger(__name__)


def play_game(puzzle: Puzzle, solver: BaseSolver, *, opening: Sequence[str] = ()) -> Dict:
    """
    Execute one game until the solver wins or the puzzle runs out of guesses.

    Args:
        puzzle:   a fresh Puzzle
        solver:   a solver already reset to the same word list
        opening:  scripted first guesses, played before the solver's own

    Returns:
        dict with keys:
            success (bool), guesses (int), invalid_guesses (int),
            time_ms (float), history (list[(guess, Verdict)])
    """
    scripted = list(opening)
    history: List[Tuple[str, Verdict]] = []
    invalid = 0
    success = False

    t0 = time.perf_counter()
    while puzzle.guesses_left > 0:
        if puzzle.remaining != solver.remaining:
            log.warning("%d puzzle words != %d solver words (continuing anyway)",
                        puzzle.remaining, solver.remaining)

        # Loop until the puzzle accepts a guess.
        try:
            while True:
                guess = scripted.pop(0) if scripted else solver.next_guess()
                try:
                    verdict = puzzle.guess(guess)
                    break
                except (InvalidGuessError, NotInDictionaryError) as e:
                    log.info("guess %r rejected: %s", guess, e)
                    invalid += 1
                    solver.not_in_wordle(guess)
        except OutOfGuessesError:
            break
        except NoWordsRemainingError as e:
            log.warning("game stopped: %s", e)
            break

        history.append((guess, verdict))
        if is_winning(verdict):
            success = True
            break
        solver.react(guess, verdict)

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "success": success,
        "guesses": len(history),
        "invalid_guesses": invalid,
        "time_ms": dt,
        "history": history,
    }


def run_case(
        solver: BaseSolver,
        answer: str,
        *,
        loader,
        word_length: int = DEFAULT_WORD_LENGTH,
        guesses: int = DEFAULT_GUESSES,
        hard: bool = True,
        filters: Sequence[WordFilter] = (),
        seed: int | None = None,
        opening: Sequence[str] = (),
) -> Dict:
    """
    Play one game with a fixed `answer`.

    The puzzle and the solver both see `loader`'s words cut down by `filters`
    and to `word_length` lowercase letters.

    Returns the play_game() dict plus `answer`.
    """
    filters = list(filters) + [keep_only_filter(lowercase_word(word_length))]
    puzzle = Puzzle(loader, word_length=word_length, guesses=guesses, hard=hard,
                    solution=answer, filters=filters)
    solver.reset(words=loader.load(filters), seed=seed, hard=hard)

    result = play_game(puzzle, solver, opening=opening)
    result["answer"] = answer
    result["solver_id"] = solver.id
    return result


def run_batch(
        solver: BaseSolver,
        answers: Iterable[str],
        *,
        loader,
        word_length: int = DEFAULT_WORD_LENGTH,
        guesses: int = DEFAULT_GUESSES,
        hard: bool = True,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K answers
    (after filtering to word_length) are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    pool = [w for w in answers if len(w) == word_length]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(
            solver, ans, loader=loader, word_length=word_length,
            guesses=guesses, hard=hard, seed=case_seed,
        ))
    return out


def summarize(results: List[Dict], max_turns: int = DEFAULT_GUESSES) -> Dict:
    """
    Aggregate a batch.

    Returns:
        dict with games, wins, win_rate, mean_guesses (over wins; NaN when
        there are none), invalid_guesses, and histogram: a list where
        histogram[k] is the number of games won in k guesses (index 0 unused).
    """
    games = len(results)
    won = np.array([r["guesses"] for r in results if r["success"]], dtype=int)
    hist = np.bincount(won, minlength=max_turns + 1) if won.size else np.zeros(max_turns + 1, dtype=int)
    return {
        "games": games,
        "wins": int(won.size),
        "win_rate": float(won.size / games) if games else 0.0,
        "mean_guesses": float(won.mean()) if won.size else float("nan"),
        "invalid_guesses": int(sum(r.get("invalid_guesses", 0) for r in results)),
        "histogram": hist.tolist(),
    }
