# apps/cli/play.py
"""
Interactive assistant for a live game.

Each turn:
  1) Recommends the highest-entropy word among the remaining candidates.
  2) Asks which word was actually played (Enter accepts the recommendation).
  3) Asks for the feedback the game showed, typed as five symbols:
       '.' correct position   '/' elsewhere in the word   'x' absent
  4) Narrows the candidates and repeats until the feedback is all '.'.

Bad input is reported and asked for again. If no candidate fits the feedback
entered so far, the session stops and says so.

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --first raise --show 10
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional

from ezwordle.datasets import load_corpus
from ezwordle.engine import EzWordleError, Word, Wordlist, parse_feedback, parse_word
from ezwordle.harness import MAX_TURNS

# Exit codes
SOLVED = 0
OUT_OF_TURNS = 1
CONTRADICTION = 2


def _ask(prompt: str, parse, read: Callable[[str], str], write: Callable[[str], None],
         default: str = ""):
    """Prompt until `parse` accepts the answer; blank input means `default`."""
    while True:
        text = read(prompt)
        if not text.strip() and default:
            text = default
        res = parse(text)
        if res.ok:
            return res.value
        write(f"  {res.error}")


def run_session(
        candidates: Wordlist,
        *,
        max_turns: int = MAX_TURNS,
        first: Optional[Word] = None,
        show: int = 0,
        progress: bool = False,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
) -> int:
    """
    Drive one game through `read`/`write`. Returns an exit code.

    `candidates` must not be empty; guessing from an empty list raises
    EmptyCandidatesError.
    """
    for turn in range(1, max_turns + 1):
        if turn == 1 and first is not None:
            recommended = first
        else:
            recommended = candidates.guess(progress=progress)

        write(f"[{turn}/{max_turns}] try: {recommended}  ({len(candidates)} candidates)")

        guess = _ask(f"word played [{recommended}]: ", parse_word, read, write,
                     default=str(recommended))
        feedback = _ask("feedback (. / x): ", parse_feedback, read, write)

        if feedback.is_winning():
            write(f"Solved in {turn}.")
            return SOLVED

        candidates = candidates.filter(guess, feedback)
        if not len(candidates):
            write("No word fits all the feedback so far; check what was entered.")
            return CONTRADICTION

        if show and 0 < len(candidates) <= show:
            write("  remaining: " + " ".join(str(w) for w in candidates))

    write(f"Out of turns with {len(candidates)} candidate(s) left.")
    return OUT_OF_TURNS


def positive_int(text: str) -> int:
    n = int(text)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="ezwordle: recommend guesses for a live game")
    ap.add_argument("--corpus", help="word list file (default: packaged corpus)")
    ap.add_argument("--first", help="opening word to suggest instead of computing one")
    ap.add_argument("--max-turns", type=positive_int, default=MAX_TURNS, help="turn budget")
    ap.add_argument("--show", type=int, default=10,
                    help="list the remaining candidates when at most this many are left (0=never)")
    ap.add_argument("--progress", action=argparse.BooleanOptionalAction, default=True,
                    help="show a progress bar while scoring")
    args = ap.parse_args(argv)

    try:
        candidates = Wordlist.from_corpus(load_corpus(args.corpus))
        first = parse_word(args.first).unwrap() if args.first else None
    except (EzWordleError, OSError, UnicodeDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    if not len(candidates):
        print("error: the corpus has no words", file=sys.stderr)
        return 2

    try:
        return run_session(candidates, max_turns=args.max_turns, first=first,
                           show=args.show, progress=args.progress)
    except (EOFError, KeyboardInterrupt):
        print()
        return OUT_OF_TURNS


if __name__ == "__main__":
    sys.exit(main())
