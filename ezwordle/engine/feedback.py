"""
Feedback model: the per-letter outcome and the 5-outcome pattern.

Conventions:
  - GREEN  : correct letter in the correct position
  - YELLOW : letter present elsewhere in the secret
  - GRAY   : letter absent

Every feedback has a base-3 code in [0, 243). The digit of each position is
the outcome value (GREEN=0, YELLOW=1, GRAY=2) and position 0 is the most
significant digit, so code 0 is all-green and code 242 is all-gray.
`enumerate_all()` lists the feedbacks in ascending code order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from itertools import product
from typing import Iterator, Sequence, Tuple

WORD_LENGTH = 5
NUM_FEEDBACKS = 3 ** WORD_LENGTH  # 243


class Outcome(Enum):
    GREEN = 0
    YELLOW = 1
    GRAY = 2

    def __repr__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Feedback:
    """An immutable pattern of exactly five outcomes, one per letter position."""

    outcomes: Tuple[Outcome, ...]

    def __init__(self, outcomes: Sequence[Outcome]):
        outcomes = tuple(outcomes)
        if len(outcomes) != WORD_LENGTH:
            raise ValueError(f"feedback needs {WORD_LENGTH} outcomes, got {len(outcomes)}")
        for o in outcomes:
            if not isinstance(o, Outcome):
                raise TypeError(f"not an Outcome: {o!r}")
        object.__setattr__(self, "outcomes", outcomes)

    def __iter__(self) -> Iterator[Outcome]:
        return iter(self.outcomes)

    def __getitem__(self, i: int) -> Outcome:
        return self.outcomes[i]

    def __len__(self) -> int:
        return WORD_LENGTH

    def __repr__(self) -> str:
        return "Feedback(" + ", ".join(o.name for o in self.outcomes) + ")"

    def is_winning(self) -> bool:
        return all(o is Outcome.GREEN for o in self.outcomes)

    @property
    def code(self) -> int:
        """Base-3 index of this feedback in `enumerate_all()`."""
        c = 0
        for o in self.outcomes:
            c = c * 3 + o.value
        return c

    @classmethod
    def from_code(cls, code: int) -> "Feedback":
        if not 0 <= code < NUM_FEEDBACKS:
            raise ValueError(f"feedback code out of range: {code}")
        digits = []
        for _ in range(WORD_LENGTH):
            code, d = divmod(code, 3)
            digits.append(Outcome(d))
        return cls(reversed(digits))

    @classmethod
    def winning(cls) -> "Feedback":
        return cls([Outcome.GREEN] * WORD_LENGTH)


def is_winning(feedback: Feedback) -> bool:
    return feedback.is_winning()


@lru_cache(maxsize=1)
def enumerate_all() -> Tuple[Feedback, ...]:
    """
    All 243 feedbacks, ascending by base-3 code.

    `product` varies the last position fastest and walks Outcome in
    declaration order (GREEN, YELLOW, GRAY), which is exactly the counter
    order with position 0 as the most significant digit.
    """
    return tuple(Feedback(p) for p in product(Outcome, repeat=WORD_LENGTH))
