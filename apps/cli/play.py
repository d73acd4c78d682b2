# apps/cli/play.py
"""
Interactive puzzle: you type guesses, the puzzle scores them.

Responses use '+' (right letter, right place), '*' (right letter, wrong
place) and '_' (letter not in the word).
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from wordler.datasets import DictionaryLoader, DEFAULT_DICTIONARY_PATH
from wordler.engine import (
    DEFAULT_GUESSES,
    DEFAULT_WORD_LENGTH,
    NoWordsRemainingError,
    OutOfGuessesError,
    Puzzle,
    WordlerError,
    encode_verdict,
    is_well_formed,
    is_winning,
)


def main():
    ap = argparse.ArgumentParser(description="wordler - play a puzzle")
    ap.add_argument("--length", type=int, default=DEFAULT_WORD_LENGTH, help="word length")
    ap.add_argument("--guesses", type=int, default=DEFAULT_GUESSES, help="number of guesses allowed")
    ap.add_argument("--easy", dest="hard", action="store_false",
                    help="turn off hard rules ('any revealed hints must be used in subsequent guesses')")
    ap.add_argument("--solution", help="use this solution instead of a random word")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY_PATH, help="word list, one word per line")
    ap.add_argument("--seed", type=int, help="RNG seed for picking the solution")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        p = Puzzle(DictionaryLoader(args.dictionary), word_length=args.length, guesses=args.guesses,
                   hard=args.hard, solution=args.solution, rng=random.Random(args.seed))
    except (WordlerError, OSError) as e:
        print(f"Failed to make a puzzle: {e}")
        sys.exit(2)

    print("I'm a wordle puzzle! You make guesses, I'll score them.")
    print(f"I only allow {args.length}-letter words found in {args.dictionary}.")
    print("I'll use '+' for \"right letter in the right place\"")
    print("I'll use '*' for \"right letter in the wrong place\"")
    print("I'll use '_' for \"letter not in the word\"")
    print("Ready? Here we go!")
    print()

    won = False
    while p.guesses_left > 0 and not won:
        print(f"{p.guesses_left} guesses and {p.remaining} words remain.")

        # Loop until the puzzle accepts a guess.
        while True:
            try:
                guess = input("Your guess? ").strip().lower()
            except EOFError:
                print()
                p.give_up()
                break
            if not is_well_formed(guess, args.length):
                print(f"Invalid guess: expected {args.length} lowercase letters")
                continue
            try:
                verdict = p.guess(guess)
            except (OutOfGuessesError, NoWordsRemainingError) as e:
                print(f"Game over: {e}")
                p.give_up()
                break
            except WordlerError as e:
                print(f"Invalid guess: {e}")
                continue

            if is_winning(verdict):
                print("YOU WIN!")
                won = True
            else:
                print(f"Response:  {encode_verdict(verdict)}")
                print()
            break

    if not won:
        print("YOU LOSE!")
    print(f"The solution is '{p.give_up()}'.")


if __name__ == "__main__":
    main()
