"""
Corpus validator for ezwordle.

What this module does:
- Check a word corpus the way the engine will read it: blank lines are
  skipped, every other line must be exactly 5 characters.
- Flag softer problems that the engine tolerates: uppercase or non a-z
  entries and duplicate words.
- Compute the SHA-256 of the raw file so run manifests can pin the corpus.
- Return a machine-readable dict (for manifests) and a one-line summary.

Typical use:
    from ezwordle.datasets import validate_corpus, pretty_summary
    rep = validate_corpus()            # packaged corpus
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Optional
import hashlib

from ezwordle.engine.feedback import WORD_LENGTH
from .corpus import CORPUS_RESOURCE, read_resource_text


# -----------------------------
# Structured report
# -----------------------------

@dataclass
class CorpusReport:
    """Diagnostics for one corpus file."""
    path: str              # file path, or "<package>/words.txt" for the bundled corpus
    exists: bool           # did the file exist?
    count: int             # number of well-formed (5-char) entries
    unique_count: int      # distinct well-formed entries
    invalid_lines: int     # non-blank lines that are not 5 characters (fatal for the engine)
    nonstandard: int       # 5-char entries that are not lowercase a-z (tolerated)
    sha256: str            # SHA-256 of raw bytes, empty if missing
    passed: bool
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_bytes(raw: bytes) -> str:
    return hashlib.sha256(raw).hexdigest()


def _check_lines(lines: List[str]) -> Dict:
    """
    Classify every line.

    Returns a dict with the valid entries, the (lineno, entry) pairs that
    break the engine's length rule, and the count of odd-but-legal entries.
    """
    valid: List[str] = []
    invalid: List[tuple] = []
    nonstandard = 0

    for lineno, raw in enumerate(lines, start=1):
        w = raw.strip()
        if not w:
            continue
        if len(w) != WORD_LENGTH:
            invalid.append((lineno, w))
            continue
        if not (w.isalpha() and w.isascii() and w == w.lower()):
            nonstandard += 1
        valid.append(w)

    return {"valid": valid, "invalid": invalid, "nonstandard": nonstandard}


# -----------------------------
# Public API
# -----------------------------

def validate_corpus(path: Optional[Path | str] = None) -> Dict:
    """
    Validate a corpus file, or the packaged corpus when `path` is None.

    Returns
    -------
    Dict
        JSON-serializable CorpusReport. `passed` is True when the corpus is
        non-empty and has no invalid lines; duplicates and non-lowercase
        entries are reported in `issues` but do not fail the check.
    """
    issues: List[str] = []

    if path is None:
        label = f"<package>/{CORPUS_RESOURCE}"
        text = read_resource_text()
        raw = text.encode("utf-8")
    else:
        p = Path(path)
        label = str(p)
        if not p.exists():
            issues.append(f"corpus file not found: {path}")
            rep = CorpusReport(label, False, 0, 0, 0, 0, "", False, issues)
            return asdict(rep)
        raw = p.read_bytes()
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            issues.append(f"corpus is not valid UTF-8: {e}")
            rep = CorpusReport(label, True, 0, 0, 0, 0, _sha256_bytes(raw), False, issues)
            return asdict(rep)

    checked = _check_lines(text.splitlines())
    valid = checked["valid"]
    invalid = checked["invalid"]
    unique_count = len(set(valid))

    if not valid:
        issues.append("corpus contains 0 valid words")
    if invalid:
        # Surface a few examples to debug quickly
        sample = ", ".join(f"{n}:{w!r}" for n, w in invalid[:5])
        issues.append(f"corpus has {len(invalid)} invalid line(s) (e.g., {sample})")
    if checked["nonstandard"]:
        issues.append(f"corpus has {checked['nonstandard']} entry(ies) outside lowercase a-z")
    if unique_count != len(valid):
        issues.append("corpus contains duplicate lines")

    rep = CorpusReport(
        path=label,
        exists=True,
        count=len(valid),
        unique_count=unique_count,
        invalid_lines=len(invalid),
        nonstandard=checked["nonstandard"],
        sha256=_sha256_bytes(raw),
        passed=bool(valid) and not invalid,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        corpus=<package>/words.txt | words=487 (uniq=487, sha=abc123def456) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"corpus={report['path']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
