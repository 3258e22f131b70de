"""
Self-play harness.

- run_case:  play one game against a known secret, always taking the
             engine's recommended guess.
- run_batch: play many games from the same starting candidate list.
- summarize: aggregate statistics over a batch of results.

A game starts from the full candidate list. Each turn the harness asks the
list for its best guess, scores it against the secret and either stops on
an all-green feedback or narrows the list with the new feedback.

These functions print nothing so they can back a CLI, a notebook or a test.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from ezwordle.engine import Feedback, Word, Wordlist

# Turn budget of the standard game.
MAX_TURNS = 6


def run_case(
        secret: Word,
        *,
        candidates: Wordlist,
        max_turns: int = MAX_TURNS,
        first_guess: Optional[Word] = None,
        progress: bool = False,
) -> Dict:
    """
    Play one game until the engine finds `secret` or runs out of turns.

    Args:
        secret:      the hidden word; must be one of `candidates`
        candidates:  starting candidate list (usually the whole corpus)
        max_turns:   turn budget
        first_guess: opening word to play instead of computing it; the opening
                     depends only on `candidates`, so batches compute it once
        progress:    show a tqdm bar while scoring each turn

    Returns:
        dict with keys:
            secret (str), success (bool), guesses (int), time_ms (float),
            history (list[(Word, Feedback)])
    """
    if max_turns < 1:
        raise ValueError(f"max_turns must be positive; got {max_turns}")
    if secret not in candidates:
        raise ValueError(f"secret {secret} is not in the candidate list")

    history: List[Tuple[Word, Feedback]] = []
    success = False
    t0 = time.perf_counter()

    for turn in range(1, max_turns + 1):
        if turn == 1 and first_guess is not None:
            guess = first_guess
        else:
            guess = candidates.guess(progress=progress)

        feedback = guess.check(secret)
        history.append((guess, feedback))

        if feedback.is_winning():
            success = True
            break

        # The secret always survives its own feedback, so this never empties
        candidates = candidates.filter(guess, feedback)

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "secret": str(secret),
        "success": success,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
    }


def run_batch(
        secrets: Iterable[Word],
        *,
        candidates: Wordlist,
        max_turns: int = MAX_TURNS,
        on_result=None,
) -> List[Dict]:
    """
    Run `run_case` for every secret, sharing one computed opening guess.

    `on_result`, if given, is called with each result as it completes
    (the CLI uses it to advance its progress bar).
    """
    if max_turns < 1:
        raise ValueError(f"max_turns must be positive; got {max_turns}")
    secrets = list(secrets)
    if not secrets:
        return []

    opening = candidates.guess()

    out: List[Dict] = []
    for s in secrets:
        r = run_case(s, candidates=candidates, max_turns=max_turns, first_guess=opening)
        out.append(r)
        if on_result is not None:
            on_result(r)
    return out


def summarize(results: List[Dict], max_turns: int = MAX_TURNS) -> Dict:
    """
    Aggregate a batch.

    Returns:
        dict with num_cases, wins, win_rate, mean_guesses (over wins),
        max_guesses (over wins), mean_time_ms and distribution, where
        distribution[k] is the number of wins in exactly k guesses (k >= 1).
    """
    n = len(results)
    if n == 0:
        return {"num_cases": 0, "wins": 0, "win_rate": 0.0, "mean_guesses": 0.0,
                "max_guesses": 0, "mean_time_ms": 0.0, "distribution": {}}

    success = np.array([r["success"] for r in results], dtype=bool)
    guesses = np.array([r["guesses"] for r in results], dtype=np.int64)
    times = np.array([r["time_ms"] for r in results], dtype=float)

    won = guesses[success]
    counts = np.bincount(won, minlength=max_turns + 1)
    distribution = {int(k): int(c) for k, c in enumerate(counts) if k >= 1}

    return {
        "num_cases": n,
        "wins": int(success.sum()),
        "win_rate": float(success.mean()),
        "mean_guesses": float(won.mean()) if won.size else 0.0,
        "max_guesses": int(won.max()) if won.size else 0,
        "mean_time_ms": float(times.mean()),
        "distribution": distribution,
    }
