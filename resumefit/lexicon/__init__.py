from functools import lru_cache

from .local_lexicon import Lexicon, TermCategory, load_lexicon


@lru_cache(maxsize=1)
def get_default_lexicon() -> Lexicon:
    return load_lexicon()


__all__ = ["Lexicon", "TermCategory", "load_lexicon", "get_default_lexicon"]
