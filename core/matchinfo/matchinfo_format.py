# core/matchinfo/matchinfo_format.py
"""
Matchinfo Blob Format Specifications
====================================

This module documents the binary blob returned by SQLite's FTS3/FTS4
auxiliary function matchinfo(table, 'pcnalx'). The blob is what
matchinfo_decoder.py turns into a DecodedStats value.

The blob is a flat array of unsigned 32-bit integers in the byte order
of the machine that ran the query. Only little-endian blobs are supported.
Nothing in the blob describes its own layout: the array sizes are derived
from the first two integers, so the header has to be read before any
other offset can be computed.


Blob Structure: matchinfo(table, 'pcnalx')
------------------------------------------

[Header: 12 bytes]
    Offset  Type    Description
    0       uint32  p: Number of phrases in the MATCH expression
    4       uint32  c: Number of user-defined columns in the FTS table
    8       uint32  n: Total number of rows in the FTS table

[Average Token Counts: 4*c bytes]
    Offset 12. For each column, the average number of tokens
    stored in that column across all rows ('a').

[Current Row Token Counts: 4*c bytes]
    Offset 12 + 4*c. For each column, the number of tokens stored
    in that column of the current row ('l').

[Phrase Data: 12*p*c bytes]
    Offset 12 + 8*c. For each phrase, for each column, 3 values ('x'):

    Offset  Type    Description
    0       uint32  Hits of the phrase in this column of the current row
    4       uint32  Hits of the phrase in this column across all rows
    8       uint32  Number of rows with at least one hit in this column

    Triples are ordered phrase-major, column-minor:
    (phrase 0, col 0), (phrase 0, col 1), ..., (phrase 1, col 0), ...


Size Properties
---------------

- Exact blob size: 12 + 8*c + 12*p*c bytes
- Smallest real blob: 32 bytes (p = 1, c = 1). SQLite never returns a
  matchinfo blob for a query without phrases or a table without columns.
- No padding, no magic bytes, no version field
- Integer endianness: little
"""
from config import UINT32_SIZE, HEADER_SIZE, PHRASE_TRIPLE_SIZE

PHRASE_COUNT_POSITION = 0
COLUMN_COUNT_POSITION = 4
ROW_COUNT_POSITION = 8
AVERAGE_TOKEN_COUNTS_POSITION = HEADER_SIZE

HEADER_STRUCT = "<III"
UINT32_DTYPE = "<u4"
VALUES_PER_TRIPLE = PHRASE_TRIPLE_SIZE // UINT32_SIZE

def token_counts_position(column_count: int) -> int:
    """Offset of the current row token counts ('l')."""
    return AVERAGE_TOKEN_COUNTS_POSITION + column_count * UINT32_SIZE

def phrase_data_position(column_count: int) -> int:
    """Offset of the first phrase/column triple ('x')."""
    return token_counts_position(column_count) + column_count * UINT32_SIZE

def expected_blob_size(phrase_count: int, column_count: int) -> int:
    """Exact size in bytes of a well-formed blob with the given header."""
    return phrase_data_position(column_count) + phrase_count * column_count * PHRASE_TRIPLE_SIZE
