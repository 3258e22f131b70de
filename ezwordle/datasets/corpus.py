"""
Word corpus loading.

The corpus is a newline-separated list of lowercase 5-letter words. The
default one ships inside the package (`ezwordle/datasets/data/words.txt`);
callers may point at any other file with the same format.

Only blank lines are dropped here. Shape errors are left for
`Wordlist.from_corpus`, which refuses to build from a malformed corpus.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import List, Optional

CORPUS_RESOURCE = "words.txt"


def read_resource_text(name: str = CORPUS_RESOURCE) -> str:
    """Raw text of a file in the packaged data directory."""
    data = resources.files("ezwordle.datasets").joinpath("data")
    return data.joinpath(name).read_text(encoding="utf-8")


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines without their line endings.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8").splitlines()


def load_corpus(path: Optional[Path | str] = None) -> List[str]:
    """
    Load corpus entries from `path`, or the packaged corpus when `path` is None.
    Entries are stripped; blank lines are skipped.
    """
    if path is None:
        lines = read_resource_text().splitlines()
    else:
        lines = read_lines(path)
    return [ln.strip() for ln in lines if ln.strip()]
