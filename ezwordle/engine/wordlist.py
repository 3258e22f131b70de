"""
Candidate set ("wordlist") of still-possible secrets.

A Wordlist is never changed in place. Feeding it a (guess, feedback) pair with
`filter` returns a new, smaller Wordlist holding the words that would have
produced exactly that feedback; the old one can be dropped:

    wl = Wordlist.from_resource()
    wl = wl.filter(Word("raise"), parse_feedback("x/xxx").value)
    best = wl.guess()

`guess` scores every remaining candidate by expected information (entropy)
and returns the best one. Guesses are always drawn from the candidates
themselves; ties go to the word that comes first in the list.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from tqdm import tqdm

from .errors import CorpusError, EmptyCandidatesError, FormatError
from .feedback import Feedback
from .word import Word

# History is a sequence of (guess, feedback) pairs observed in a game.
History = Iterable[Tuple[Word, Feedback]]


class Wordlist:
    __slots__ = ("_words",)

    def __init__(self, words: Iterable[Word] = ()):
        self._words: Tuple[Word, ...] = tuple(words)

    @classmethod
    def from_corpus(cls, corpus: Iterable[str]) -> "Wordlist":
        """
        Parse corpus entries into a Wordlist.

        Blank entries are skipped. Any other entry that is not exactly five
        characters raises CorpusError and no Wordlist is built.
        """
        words: List[Word] = []
        for lineno, raw in enumerate(corpus, start=1):
            entry = raw.strip()
            if not entry:
                continue
            try:
                words.append(Word(entry))
            except FormatError as e:
                raise CorpusError(lineno, entry) from e
        return cls(words)

    @classmethod
    def from_resource(cls) -> "Wordlist":
        """The full packaged corpus (start-of-session candidate set)."""
        from ezwordle.datasets.corpus import load_corpus

        return cls.from_corpus(load_corpus())

    @property
    def words(self) -> Tuple[Word, ...]:
        return self._words

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: Word) -> bool:
        return self.contains(word)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wordlist):
            return NotImplemented
        return self._words == other._words

    def __hash__(self) -> int:
        return hash(self._words)

    def __repr__(self) -> str:
        head = ", ".join(str(w) for w in self._words[:5])
        more = ", ..." if len(self._words) > 5 else ""
        return f"Wordlist([{head}{more}], size={len(self._words)})"

    def size(self) -> float:
        """Number of words, as a float since it feeds probability arithmetic."""
        return float(len(self._words))

    def contains(self, word: Word) -> bool:
        return word in self._words

    def filter(self, word: Word, feedback: Feedback) -> "Wordlist":
        """Words w with word.check(w) == feedback, in their original order."""
        return Wordlist(w for w in self._words if word.check(w) == feedback)

    def apply(self, history: History) -> "Wordlist":
        """Filter successively by every (guess, feedback) pair in `history`."""
        out = self
        for guess, feedback in history:
            out = out.filter(guess, feedback)
        return out

    def scores(self, *, progress: bool = False) -> List[Tuple[Word, float]]:
        """(word, entropy) for every candidate, in list order."""
        it: Sequence[Word] = self._words
        if progress:
            it = tqdm(self._words, ncols=80, desc="Scoring", unit="word", leave=False)
        return [(w, w.entropy(self)) for w in it]

    def guess(self, *, progress: bool = False) -> Word:
        """
        The candidate with the highest entropy.

        Only a strictly higher score replaces the current best, so the first
        word in list order wins a tie.
        """
        if not self._words:
            raise EmptyCandidatesError()

        best_word = None
        best_H = None
        for w, H in self.scores(progress=progress):
            if best_H is None or H > best_H:
                best_word, best_H = w, H
        return best_word


def new_from_corpus(corpus: Iterable[str]) -> Wordlist:
    return Wordlist.from_corpus(corpus)
