"""
Exception types raised by the engine.

  - FormatError          : a word was built from text of the wrong shape
  - CorpusError          : the word corpus has a malformed entry (fatal at startup)
  - EmptyCandidatesError : asked for a guess when no candidate is left

Text coming from a user is parsed with `ezwordle.engine.parsing`, which reports
bad input as a ParseResult instead of raising.
"""

from __future__ import annotations


class EzWordleError(Exception):
    """Base class for every error the engine raises on purpose."""


class FormatError(EzWordleError, ValueError):
    """Text could not be turned into a Word or Feedback."""


class CorpusError(EzWordleError):
    """A corpus entry is not a 5-letter word."""

    def __init__(self, lineno: int, entry: str):
        self.lineno = lineno
        self.entry = entry
        super().__init__(f"corpus line {lineno}: {entry!r} is not a 5-letter word")


class EmptyCandidatesError(EzWordleError):
    """No candidate word is consistent with the feedback seen so far."""

    def __init__(self, message: str = "no candidates left to guess from"):
        super().__init__(message)
