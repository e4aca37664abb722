# core/search/raw_word_result.py
"""
Raw Word Search Results
=======================
One row of a full-text search over the dictionary, as it comes out of
SQLite before any ranking. The row carries the matchinfo('pcnalx') blob
and the offsets() string alongside the entry itself.
"""
import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence
from core.matchinfo import DecodedStats, MatchInfoError, decode_matchinfo
from core.utilities.config_manager import config_manager

logger = logging.getLogger(__name__)

class PhraseCountMismatchError(MatchInfoError):
    """The blob describes a different number of phrases than the query has."""

    def __init__(self, message: str, expected_count: int, actual_count: int):
        super().__init__(message)
        self.expected_count = expected_count
        self.actual_count = actual_count


class TermOffset(NamedTuple):
    """One entry of an FTS offsets() string."""
    column: int       # column number the term was found in
    term: int         # index of the matching term in the query
    byte_offset: int  # byte offset of the term within the column value
    size: int         # size of the matching term in bytes


def parse_offsets(offsets: str) -> List[TermOffset]:
    """
    Parse the space-separated integers returned by offsets().

    Args:
        offsets: e.g. "0 0 6 5 1 0 24 5"

    Returns:
        List of TermOffset, one per group of four integers

    Raises:
        ValueError: If a value is not an integer or the count is not a multiple of 4
    """
    if not offsets or not offsets.strip():
        return []

    values = [int(value) for value in offsets.split()]
    if len(values) % 4:
        raise ValueError(f"Offsets string has {len(values)} values, expected a multiple of 4")

    return [TermOffset(*values[i:i + 4]) for i in range(0, len(values), 4)]

def check_phrase_count(stats: DecodedStats, phrases: Optional[Sequence[str]]):
    """
    Compare the number of query phrases against the blob's phrase count.
    Skipped when phrases is None or verify_phrase_count is off.
    """
    if phrases is None or not config_manager.get_verify_phrase_count():
        return
    if len(phrases) != stats.phrase_count:
        raise PhraseCountMismatchError(
            f"Query has {len(phrases)} phrase(s) but the matchinfo blob "
            f"describes {stats.phrase_count}",
            expected_count=len(phrases),
            actual_count=stats.phrase_count
        )


@dataclass
class RawWordResult:
    """A dictionary entry matched by a full-text search, with its raw statistics."""
    id: int
    arabic_word: str
    definition: str
    root_word_id: int
    is_root: bool
    raw_match_info: Optional[bytes]
    offsets: str = ""

    @classmethod
    def from_row(cls, row: Sequence) -> "RawWordResult":
        """
        Build a result from a sqlite row selected in field order:
        id, arabic_word, definition, root_word_id, is_root, matchinfo, offsets
        """
        row_id, arabic_word, definition, root_word_id, is_root, raw_match_info, *rest = row
        return cls(
            id=row_id,
            arabic_word=arabic_word,
            definition=definition,
            root_word_id=root_word_id,
            is_root=bool(is_root),
            raw_match_info=bytes(raw_match_info) if raw_match_info is not None else None,
            offsets=rest[0] if rest and rest[0] is not None else ""
        )

    def match_info(self, phrases: Optional[Sequence[str]] = None,
                   strict: Optional[bool] = None) -> DecodedStats:
        """
        Decode this row's matchinfo blob.

        Args:
            phrases: Phrases of the MATCH expression, in query order. Only their
                count is used, to cross-check the blob's phrase count.
            strict: Reject trailing bytes. Defaults to the configured policy.

        Raises:
            MatchInfoError: If the blob is malformed or disagrees with phrases
        """
        if strict is None:
            strict = config_manager.get_reject_trailing_bytes()

        try:
            stats = decode_matchinfo(self.raw_match_info, strict=strict)
        except MatchInfoError as e:
            logger.debug(f"Unusable statistics for word {self.id}: {e}")
            raise

        check_phrase_count(stats, phrases)
        return stats

    @property
    def term_offsets(self) -> List[TermOffset]:
        """Parsed offsets() string."""
        return parse_offsets(self.offsets)

    @property
    def display_text(self) -> str:
        """Formatted display string for CLI."""
        marker = " (root)" if self.is_root else ""
        return f"{self.arabic_word}{marker} - {self.definition}"
