"""
Word model and the feedback rule.

Feedback rule (two passes, order matters):
  1) Every position where guess and secret agree is GREEN.
  2) Every remaining guess position i becomes YELLOW if some secret position j
     holds the same letter and position j is not GREEN in the result.
     Secret letters are not consumed, so a single non-green secret letter can
     turn several guess positions YELLOW:
         check("eerie", "cheek") -> YELLOW, YELLOW, GRAY, GRAY, YELLOW
     while conventional Wordle accounting would color only two of them.
  3) Everything else stays GRAY.

Scoring:
  - contribution(word, candidates, f) = -p * log2(p), where p is the share of
    candidates that would answer `word` with feedback f (0.0 if p == 0 or the
    candidate list is empty).
  - entropy(word, candidates) = sum of the contributions over all 243 feedbacks.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import log2
from typing import TYPE_CHECKING, Iterator, Tuple

from .errors import FormatError
from .feedback import NUM_FEEDBACKS, WORD_LENGTH, Feedback, Outcome, enumerate_all

if TYPE_CHECKING:
    from .wordlist import Wordlist


@dataclass(frozen=True)
class Word:
    """Five lowercase letters. Only the length is enforced."""

    letters: Tuple[str, ...]

    def __init__(self, text: str):
        if len(text) != WORD_LENGTH:
            raise FormatError(f"a word has {WORD_LENGTH} letters, got {text!r}")
        object.__setattr__(self, "letters", tuple(text.lower()))

    def __str__(self) -> str:
        return "".join(self.letters)

    def __repr__(self) -> str:
        return f"Word({str(self)!r})"

    def __iter__(self) -> Iterator[str]:
        return iter(self.letters)

    def __getitem__(self, i: int) -> str:
        return self.letters[i]

    def __len__(self) -> int:
        return WORD_LENGTH

    def __contains__(self, letter: str) -> bool:
        return self.contains(letter)

    def contains(self, letter: str) -> bool:
        return letter.lower() in self.letters

    def check(self, secret: "Word") -> Feedback:
        """Feedback for playing this word when `secret` is the answer."""
        return Feedback(self._check_values(secret))

    def _check_values(self, secret: "Word") -> list:
        result = [Outcome.GRAY] * WORD_LENGTH
        guess = self.letters
        answer = secret.letters

        # Pass 1: greens
        for i in range(WORD_LENGTH):
            if guess[i] == answer[i]:
                result[i] = Outcome.GREEN

        # Pass 2: yellows, without consuming secret letters
        for i in range(WORD_LENGTH):
            if result[i] is Outcome.GREEN:
                continue
            for j in range(WORD_LENGTH):
                if answer[j] == guess[i] and result[j] is not Outcome.GREEN:
                    result[i] = Outcome.YELLOW
                    break

        return result

    def feedback_code(self, secret: "Word") -> int:
        """Same as `self.check(secret).code` without building a Feedback."""
        c = 0
        for o in self._check_values(secret):
            c = c * 3 + o.value
        return c

    def contribution(self, candidates: "Wordlist", feedback: Feedback) -> float:
        filtered_len = candidates.filter(self, feedback).size()
        original_len = candidates.size()

        # log2(0) is undefined; an impossible outcome carries no information
        if filtered_len == 0.0 or original_len == 0.0:
            return 0.0

        p = filtered_len / original_len
        return -p * log2(p)

    def entropy(self, candidates: "Wordlist") -> float:
        """
        Expected information, in bits, of guessing this word against `candidates`.

        Equal to summing `contribution` over `enumerate_all()`: each candidate
        is scored once and the bucket sizes are the filtered sizes, so the
        per-feedback terms and their order of summation are the same.
        """
        original_len = candidates.size()
        if original_len == 0.0:
            return 0.0

        counts = [0] * NUM_FEEDBACKS
        for secret in candidates:
            counts[self.feedback_code(secret)] += 1

        H = 0.0
        for c in counts:
            if c == 0:
                continue
            p = c / original_len
            H += -p * log2(p)
        return H


def generate_feedback(guess: Word, secret: Word) -> Feedback:
    return guess.check(secret)


def contains_letter(word: Word, letter: str) -> bool:
    return word.contains(letter)


def score_contribution(word: Word, candidates: "Wordlist", feedback: Feedback) -> float:
    return word.contribution(candidates, feedback)


def score_entropy(word: Word, candidates: "Wordlist") -> float:
    return word.entropy(candidates)


def score_entropy_bruteforce(word: Word, candidates: "Wordlist") -> float:
    """Reference form of `score_entropy`: one filter pass per possible feedback."""
    H = 0.0
    for feedback in enumerate_all():
        H += word.contribution(candidates, feedback)
    return H
