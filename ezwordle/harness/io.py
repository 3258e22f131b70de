"""
Report files for self-play runs.

A run produces two files:
  - run_<id>.csv: one row per game. Turn k fills guess_k (the word),
    feedback_k (symbols as typed in the interactive app, e.g. "x/.xx") and
    code_k (the feedback's base-3 index, 0 = all green). Unused turns are blank.
  - run_<id>_manifest.json: run id, git commit, CLI config, corpus report and
    the batch summary.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence, Tuple
import csv
import json
import subprocess
import datetime as dt

from ezwordle.engine import Feedback, Word, format_feedback

RESULT_FIELDS = ["secret", "success", "guesses", "time_ms"]


def turn_fields(max_turns: int) -> List[str]:
    out: List[str] = []
    for k in range(1, max_turns + 1):
        out += [f"guess_{k}", f"feedback_{k}", f"code_{k}"]
    return out


def history_row(history: Sequence[Tuple[Word, Feedback]], max_turns: int) -> Dict[str, object]:
    """Spread a game's (guess, feedback) history over the per-turn columns."""
    row: Dict[str, object] = dict.fromkeys(turn_fields(max_turns), "")
    for k, (guess, feedback) in enumerate(history[:max_turns], start=1):
        row[f"guess_{k}"] = str(guess)
        row[f"feedback_{k}"] = format_feedback(feedback)
        row[f"code_{k}"] = feedback.code
    return row


def write_csv(results: List[Dict], path: Path | str, max_turns: int) -> str:
    """Write harness results (see `run_case`) as CSV; returns the path written."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=RESULT_FIELDS + turn_fields(max_turns))
        w.writeheader()
        for r in results:
            row = {k: r[k] for k in RESULT_FIELDS}
            row["time_ms"] = round(float(r["time_ms"]), 3)
            row.update(history_row(r["history"], max_turns))
            w.writerow(row)

    return str(p)


def write_manifest(path: Path | str, *, run_id: str, config: Dict, corpus: Dict,
                   summary: Dict) -> str:
    """Write the run manifest JSON; returns the path written."""
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": config,
        "corpus": corpus,
        "summary": summary,
    }
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short git hash of HEAD, or 'unknown' when git is missing or fails."""
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            stderr=subprocess.DEVNULL,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()
