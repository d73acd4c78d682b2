# apps/cli/solve.py
"""
Interactive solver: it suggests guesses, you type the puzzle's response.

Responses use '+' (right letter, right place), '*' (right letter, wrong
place) and '_' (letter not in the word). 'y' means the guess was right and
'n' means the puzzle didn't accept the word. Positional arguments are played
as the first guesses.
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordler.datasets import DictionaryLoader, DEFAULT_DICTIONARY_PATH
from wordler.engine import (
    DEFAULT_GUESSES,
    DEFAULT_WORD_LENGTH,
    InvalidResponseError,
    encode_verdict,
    is_winning,
    keep_only_filter,
    lowercase_word,
    winning_verdict,
)
from wordler.solvers import DEFAULT_SOLVER, SolverState, get_solver_ids, new_solver


def main():
    ap = argparse.ArgumentParser(description="wordler - solve a puzzle interactively")
    ap.add_argument("--length", type=int, default=DEFAULT_WORD_LENGTH, help="word length")
    ap.add_argument("--guesses", type=int, default=DEFAULT_GUESSES, help="number of guesses allowed")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY_PATH, help="word list, one word per line")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--seed", type=int, help="RNG seed for randomized solvers")
    ap.add_argument("--hard", action="store_true", help="only guess words that could be the answer")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    ap.add_argument("opening", nargs="*", help="first guesses to play, in order")
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        s = new_solver(DictionaryLoader(args.dictionary), solver_id=args.solver, seed=args.seed,
                       hard=args.hard, filters=[keep_only_filter(lowercase_word(args.length))])
    except (ValueError, OSError) as e:
        print(f"Failed to make a solver: {e}")
        sys.exit(2)

    print(f"I'm a wordle solver! I'll make up to {args.guesses} guesses, you tell me wordle's response.")
    print(f"I only allow {args.length}-letter words found in {args.dictionary}.")
    print("Use '+' for \"right letter in the right place\"")
    print("Use '*' for \"right letter in the wrong place\"")
    print("Use '_' for \"letter not in the word\"")
    print("Respond with the letter 'n' by itself to tell me that my guess isn't in wordle's dictionary.")
    print("Respond with the letter 'y' by itself to tell me that I've solved the wordle.")
    print("Ready? Here we go!")
    print()

    opening = [w.lower() for w in args.opening]
    guesses = args.guesses
    while guesses > 0:
        if s.state is SolverState.IMPOSSIBLE:
            print("ERROR: no words left; one of the responses must have been wrong.")
            sys.exit(1)
        if s.state is SolverState.SOLVED:
            print("The word is " + s.next_guess())
            return

        print(f"I've got {s.remaining} possible words and {guesses} guesses left.")
        guess = opening.pop(0) if opening else s.next_guess()
        print("Guess: " + guess)

        while True:
            try:
                response = input("Response? ").strip()
            except EOFError:
                print()
                sys.exit(1)

            if response == "n":
                s.not_in_wordle(guess)
                break
            if response == "y":
                response = encode_verdict(winning_verdict(len(guess)))
            try:
                verdict = s.react(guess, response)
            except InvalidResponseError as e:
                print(f"ERROR: {e}")
                print(f"Guess was \"{guess}\"")
                continue

            guesses -= 1
            if is_winning(verdict):
                print("Solved in", args.guesses - guesses, "guesses!")
                return
            break
        print()

    print("Out of guesses :-(")


if __name__ == "__main__":
    main()
