from .errors import CorpusError, EmptyCandidatesError, EzWordleError, FormatError
from .feedback import Feedback, Outcome, enumerate_all, is_winning
from .parsing import ParseResult, format_feedback, parse_feedback, parse_word
from .word import (Word, contains_letter, generate_feedback, score_contribution,
                   score_entropy)
from .wordlist import Wordlist, new_from_corpus

__all__ = [
    "Outcome", "Feedback", "enumerate_all", "is_winning",
    "Word", "generate_feedback", "contains_letter", "score_entropy", "score_contribution",
    "Wordlist", "new_from_corpus",
    "ParseResult", "parse_word", "parse_feedback", "format_feedback",
    "EzWordleError", "FormatError", "CorpusError", "EmptyCandidatesError",
]
