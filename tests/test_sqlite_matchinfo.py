"""
Decode real matchinfo('pcnalx') output from an in-memory FTS4 table.
"""
import sqlite3
import sys
import pytest
from core.matchinfo import ColumnTermStats, decode_matchinfo
from core.search import RawWordResult, TermOffset

pytestmark = pytest.mark.skipif(
    sys.byteorder != "little", reason="matchinfo blobs use native byte order"
)

WORDS = [
    (1, "kataba", "to write", 1, 1),
    (2, "kitab", "book", 1, 0),
    (3, "maktab", "office desk", 1, 0),
]

@pytest.fixture
def conn():
    conn = sqlite3.connect(":memory:")
    try:
        conn.execute("CREATE VIRTUAL TABLE words USING fts4(arabic_word, definition)")
    except sqlite3.OperationalError as e:
        conn.close()
        pytest.skip(f"FTS4 not available: {e}")
    conn.executemany(
        "INSERT INTO words(rowid, arabic_word, definition) VALUES (?, ?, ?)",
        [(row_id, word, definition) for row_id, word, definition, _, _ in WORDS]
    )
    yield conn
    conn.close()

def search(conn, match):
    rows = conn.execute(
        """
        SELECT rowid, arabic_word, definition, 1, rowid = 1,
               matchinfo(words, 'pcnalx'), offsets(words)
        FROM words
        WHERE words MATCH ?
        ORDER BY rowid
        """,
        (match,)
    ).fetchall()
    return [RawWordResult.from_row(row) for row in rows]


def test_single_phrase(conn):
    [result] = search(conn, "book")

    stats = result.match_info(phrases=["book"])

    assert result.id == 2
    assert stats.phrase_count == 1
    assert stats.column_count == 2
    assert stats.row_count == 3
    assert stats.average_token_counts == (1, 2)
    assert stats.current_row_token_counts == (1, 1)
    assert stats.column_stats(0, 0) == ColumnTermStats(0, 0, 0)
    assert stats.column_stats(0, 1) == ColumnTermStats(1, 1, 1)
    assert result.term_offsets == [TermOffset(column=1, term=0, byte_offset=0, size=4)]


def test_two_phrases(conn):
    [result] = search(conn, "kataba write")

    stats = decode_matchinfo(result.raw_match_info)

    assert result.is_root is True
    assert stats.phrase_count == 2
    assert len(result.raw_match_info) == 12 + 8 * 2 + 12 * 2 * 2
    assert stats.column_stats(0, 0) == ColumnTermStats(1, 1, 1)
    assert stats.column_stats(0, 1) == ColumnTermStats(0, 0, 0)
    assert stats.column_stats(1, 0) == ColumnTermStats(0, 0, 0)
    assert stats.column_stats(1, 1) == ColumnTermStats(1, 1, 1)
