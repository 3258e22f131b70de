"""
Text encodings for words and feedback.

Feedback symbols:
  - '.' : GREEN   (correct position)
  - '/' : YELLOW  (present elsewhere)
  - 'x' : GRAY    (absent)

    parse_feedback("x/.xx").value -> Feedback(GRAY, YELLOW, GREEN, GRAY, GRAY)

Parsing never raises on bad input. It returns a ParseResult whose `error`
says what was wrong, so an interactive caller can simply prompt again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, Optional, TypeVar

from .errors import FormatError
from .feedback import WORD_LENGTH, Feedback, Outcome
from .word import Word

T = TypeVar("T")

SYMBOLS: Dict[str, Outcome] = {
    ".": Outcome.GREEN,
    "/": Outcome.YELLOW,
    "x": Outcome.GRAY,
}
_SYMBOL_OF: Dict[Outcome, str] = {o: s for s, o in SYMBOLS.items()}


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """The parsed value, or FormatError if parsing failed."""
        if self.error is not None:
            raise FormatError(self.error)
        return self.value


def parse_word(text: str) -> ParseResult[Word]:
    """Strip and lowercase `text`; it must then be exactly five characters."""
    w = text.strip().lower()
    if len(w) != WORD_LENGTH:
        return ParseResult(error=f"expected {WORD_LENGTH} letters, got {len(w)}: {text!r}")
    return ParseResult(value=Word(w))


def parse_feedback(text: str) -> ParseResult[Feedback]:
    """Decode five symbols from SYMBOLS. Surrounding whitespace is ignored."""
    s = text.strip()
    if len(s) != WORD_LENGTH:
        return ParseResult(error=f"expected {WORD_LENGTH} symbols, got {len(s)}: {text!r}")

    outcomes = []
    for ch in s:
        o = SYMBOLS.get(ch)
        if o is None:
            allowed = " ".join(repr(k) for k in SYMBOLS)
            return ParseResult(error=f"unknown symbol {ch!r} (use {allowed})")
        outcomes.append(o)
    return ParseResult(value=Feedback(outcomes))


def format_feedback(feedback: Feedback) -> str:
    return "".join(_SYMBOL_OF[o] for o in feedback)
