"""
Matchinfo Package
"""
from .matchinfo_types import ColumnTermStats, PhraseStats, DecodedStats
from .matchinfo_decoder import (
    MatchInfoError,
    MatchInfoTooShortError,
    MatchInfoTruncatedError,
    decode_matchinfo
)

__all__ = [
    'ColumnTermStats',
    'PhraseStats',
    'DecodedStats',
    'MatchInfoError',
    'MatchInfoTooShortError',
    'MatchInfoTruncatedError',
    'decode_matchinfo'
]
