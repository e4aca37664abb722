"""
Search Results Package
"""
from .raw_word_result import (
    RawWordResult,
    TermOffset,
    PhraseCountMismatchError,
    parse_offsets,
    check_phrase_count
)

__all__ = [
    'RawWordResult',
    'TermOffset',
    'PhraseCountMismatchError',
    'parse_offsets',
    'check_phrase_count'
]
