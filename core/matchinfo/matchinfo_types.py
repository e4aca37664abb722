# core/matchinfo/matchinfo_types.py
"""
Decoded matchinfo statistics
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple

@dataclass(frozen=True)
class ColumnTermStats:
    """Hit counts of one phrase in one column."""
    current_row_term_frequency: int  # hits in this column of the current row
    total_term_frequency: int        # hits in this column across all rows
    matching_row_count: int          # rows with at least one hit in this column

@dataclass(frozen=True)
class PhraseStats:
    """Per-column hit counts of one query phrase, indexed by column."""
    column_stats: Tuple[ColumnTermStats, ...]

@dataclass(frozen=True)
class DecodedStats:
    """
    Statistics decoded from one matchinfo(table, 'pcnalx') blob.

    phrase_stats is indexed by the position of the phrase in the
    MATCH expression, not by phrase text.
    """
    phrase_count: int
    column_count: int
    row_count: int
    average_token_counts: Tuple[int, ...]
    current_row_token_counts: Tuple[int, ...]
    phrase_stats: Tuple[PhraseStats, ...]

    def column_stats(self, phrase_index: int, column_index: int) -> ColumnTermStats:
        """Get the hit counts of a phrase in a column."""
        return self.phrase_stats[phrase_index].column_stats[column_index]

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict with lists instead of tuples (for JSON output)."""
        return {
            'phrase_count': self.phrase_count,
            'column_count': self.column_count,
            'row_count': self.row_count,
            'average_token_counts': list(self.average_token_counts),
            'current_row_token_counts': list(self.current_row_token_counts),
            'phrase_stats': [
                {'column_stats': [asdict(stats) for stats in phrase.column_stats]}
                for phrase in self.phrase_stats
            ]
        }
