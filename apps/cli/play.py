# apps/cli/play.py
"""
Interactive entry point for wordg.

Two modes:
  --run    the program thinks of a word (or takes --word) and scores your
           guesses, printing verdict tokens such as "ynnpn"
  --guess  the program guesses a word someone else is thinking of; you reply
           to each guess with its verdict token

Verdict token: one character per letter, y = right letter right spot,
p = right letter wrong spot, n = letter not in the word. Typing "q" at any
prompt ends the game.

Two copies can play each other across terminals: one in --run mode, the
other in --guess mode, with a human relaying guesses and tokens.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, TextIO

from wordg.datasets import DEFAULT_WORDS_PATH, load_dictionary
from wordg.engine import (
    DictionaryError, InvalidLength, MalformedVerdict, NoCandidate, Outcome, UnknownWord,
    WORD_LENGTH, format_verdicts, require_word,
)
from wordg.harness import Mode, OracleSession, SolverSession

log = logging.getLogger(__name__)

QUIT_TOKEN = "q"


def _prompt(text: str, inp: TextIO, out: TextIO) -> str | None:
    """Write a prompt and read one line; None on end of input."""
    out.write(text)
    out.flush()
    line = inp.readline()
    if not line:
        out.write("\n")
        return None
    return line.strip()


def run_oracle(session: OracleSession, inp: TextIO = sys.stdin, out: TextIO = sys.stdout) -> bool:
    """
    Score guesses read from `inp` until the word is found or the player quits.
    Returns True when the word was guessed.
    """
    while True:
        guess = _prompt(" Guess: ", inp, out)
        if guess is None or guess == QUIT_TOKEN:
            print(f"The word was {session.secret}", file=out)
            return False
        try:
            verdicts = session.guess(guess)
        except InvalidLength:
            print(f"Guesses must be exactly {WORD_LENGTH} lowercase letters", file=out)
            continue
        except UnknownWord:
            print(f"{guess} is not a valid word", file=out)
            continue

        print(f"Result: {format_verdicts(verdicts)}", file=out)
        if session.won:
            print("Congratulations!", file=out)
            return True


def run_solver(session: SolverSession, inp: TextIO = sys.stdin, out: TextIO = sys.stdout) -> bool:
    """
    Propose guesses and read their verdict tokens from `inp` until solved,
    out of candidates, or the player quits. Returns True when solved.
    """
    while True:
        try:
            guess = session.propose()
        except NoCandidate as e:
            print(str(e), file=out)
            return False
        print(guess, file=out)

        while True:
            token = _prompt("Resp: ", inp, out)
            if token is None or token == QUIT_TOKEN:
                return False
            try:
                outcome = session.feedback(token)
            except MalformedVerdict:
                print(f"Response must be {WORD_LENGTH} characters of y, p or n", file=out)
                continue
            break

        if outcome is Outcome.SOLVED:
            print(f"Solved: {guess}", file=out)
            return True


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wordg", description="wordg — play Wordle either way round")
    mode = ap.add_mutually_exclusive_group(required=True)
    mode.add_argument("--run", dest="mode", action="store_const", const=Mode.ORACLE,
                      help="the program thinks of a word and you guess it")
    mode.add_argument("--guess", dest="mode", action="store_const", const=Mode.SOLVER,
                      help="the program guesses a word some other entity is thinking of")
    ap.add_argument("--word", help="--run only: the word to think of (default: random pick)")
    ap.add_argument("--words", default=str(DEFAULT_WORDS_PATH),
                    help="dictionary file, one word per line (default: bundled list)")
    ap.add_argument("--seed", type=int, help="RNG seed for the random word pick")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="debug logging to stderr (shows constraint state after each verdict)")
    return ap


def main(argv: List[str] | None = None, *, inp: TextIO | None = None,
         out: TextIO | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    inp = inp or sys.stdin
    out = out or sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.word and args.mode is not Mode.ORACLE:
        ap.error("--word applies only to --run")
    if args.word:
        try:
            require_word(args.word)
        except InvalidLength as e:
            ap.error(str(e))

    # Setup failures are fatal before any session starts.
    try:
        dictionary = load_dictionary(args.words)
    except DictionaryError as e:
        print(f"wordg: {e}", file=sys.stderr)
        return 1

    if args.mode is Mode.ORACLE:
        session = OracleSession(dictionary, secret=args.word, rng=random.Random(args.seed))
        log.debug("secret chosen: %s", session.secret)
        run_oracle(session, inp, out)
    elif args.mode is Mode.SOLVER:
        run_solver(SolverSession(dictionary), inp, out)
    else:
        raise AssertionError(f"unhandled mode {args.mode!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
