from .validator import validate_corpus, pretty_summary
from .corpus import load_corpus, read_lines

__all__ = ["validate_corpus", "pretty_summary", "load_corpus", "read_lines"]
