# apps/cli/run.py
"""
CLI entry point for self-play runs.

This script:
  1) Validates the corpus (prints counts + SHA, fails on malformed lines).
  2) Builds the starting candidate list and picks the secrets to play
     (all of them, or a seeded sample).
  3) Plays every secret with the entropy engine under a progress bar and writes:
       - CSV:  per-game results + guess/feedback history columns
       - JSON: manifest with config, corpus report, summary and git commit
  4) Prints the summary (win rate, mean guesses, guess-count distribution).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
from tqdm import tqdm

from ezwordle.datasets import load_corpus, pretty_summary, validate_corpus
from ezwordle.engine import EzWordleError, Wordlist
from ezwordle.harness import MAX_TURNS, run_batch, summarize
from ezwordle.harness.io import write_csv, write_manifest, timestamp_id

from apps.cli.play import positive_int


def _format_summary(s: dict) -> str:
    dist = " ".join(f"{k}:{v}" for k, v in s["distribution"].items())
    return (f"games={s['num_cases']} wins={s['wins']} ({100.0 * s['win_rate']:.1f}%) "
            f"mean={s['mean_guesses']:.3f} max={s['max_guesses']} | {dist}")


def main(argv=None) -> int:
    """
    Parse CLI args, validate the corpus, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="ezwordle: self-play the entropy engine")
    ap.add_argument("--corpus", help="word list file (default: packaged corpus)")
    ap.add_argument("--sample", type=int,
                    help="play only this many secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--max-turns", type=positive_int, default=MAX_TURNS,
                    help="turn budget per game")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar (auto=only when stderr is a terminal)")
    args = ap.parse_args(argv)

    # 1) Validate corpus and print the one-liner
    rep = validate_corpus(args.corpus)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for issue in rep["issues"]:
            print(f"  - {issue}", file=sys.stderr)
        return 2

    # 2) Starting candidates and secrets
    try:
        candidates = Wordlist.from_corpus(load_corpus(args.corpus))
    except (EzWordleError, OSError, UnicodeDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    secrets = list(candidates)
    if args.sample and args.sample < len(secrets):
        rng = np.random.default_rng(args.seed)
        picked = rng.choice(len(secrets), size=args.sample, replace=False)
        secrets = [secrets[i] for i in picked]

    # 3) Run batch with live progress
    show_bar = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    with tqdm(total=len(secrets), ncols=80, desc="Playing", unit="game",
              disable=not show_bar) as bar:
        results = run_batch(secrets, candidates=candidates, max_turns=args.max_turns,
                            on_result=lambda r: bar.update(1))

    summary = summarize(results, max_turns=args.max_turns)

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, csv_path, max_turns=args.max_turns)
    write_manifest(manifest_path, run_id=run_id, config=vars(args), corpus=rep,
                   summary=summary)

    print(_format_summary(summary))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
