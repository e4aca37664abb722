# core/matchinfo/matchinfo_decoder.py
"""
Matchinfo Blob Decoder
======================
Decodes the blob returned by matchinfo(table, 'pcnalx') into DecodedStats.
See matchinfo_format.py for the byte layout.

Decoding happens in two phases: the fixed-offset header is read first,
then a cursor walks the three variable-length regions using offsets
derived from the header. Every read is bounds-checked before it happens.
"""
import logging
import struct
import numpy as np
from typing import Union
from config import MIN_BLOB_SIZE, UINT32_SIZE, HEADER_SIZE
from core.matchinfo.matchinfo_format import (
    HEADER_STRUCT,
    UINT32_DTYPE,
    VALUES_PER_TRIPLE,
    expected_blob_size
)
from core.matchinfo.matchinfo_types import ColumnTermStats, PhraseStats, DecodedStats

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

class MatchInfoError(ValueError):
    """Raised when a matchinfo blob cannot be decoded."""
    pass

class MatchInfoTooShortError(MatchInfoError):
    """The blob is missing or smaller than the smallest real blob."""
    pass

class MatchInfoTruncatedError(MatchInfoError):
    """The blob size does not match the size implied by its own header."""

    def __init__(self, message: str, expected_size: int, actual_size: int):
        super().__init__(message)
        self.expected_size = expected_size
        self.actual_size = actual_size


class BlobCursor:
    """Forward-only reader of little-endian uint32 values with bounds checks."""

    def __init__(self, data: memoryview, start: int, expected_size: int):
        self.data = data
        self.position = start
        self.expected_size = expected_size

    def read_uint32s(self, count: int) -> np.ndarray:
        """
        Read count uint32 values at the cursor and advance past them.

        Raises:
            MatchInfoTruncatedError: If the read would run past the end of the blob
        """
        end = self.position + count * UINT32_SIZE
        if end > len(self.data):
            raise MatchInfoTruncatedError(
                f"Blob truncated at byte {len(self.data)}: reading {count} value(s) "
                f"at offset {self.position} needs {end} bytes "
                f"(header implies {self.expected_size})",
                expected_size=self.expected_size,
                actual_size=len(self.data)
            )
        if count == 0:
            return np.empty(0, dtype=UINT32_DTYPE)
        values = np.frombuffer(self.data, dtype=UINT32_DTYPE, count=count, offset=self.position)
        self.position = end
        return values


def read_header(data: memoryview):
    """Read (phrase_count, column_count, row_count) from the fixed-offset header."""
    return struct.unpack_from(HEADER_STRUCT, data, 0)

def decode_matchinfo(raw: BytesLike, strict: bool = True) -> DecodedStats:
    """
    Decode a matchinfo(table, 'pcnalx') blob.

    Args:
        raw: The blob exactly as returned by SQLite
        strict: Reject bytes past the end implied by the header.
            When False, trailing bytes are ignored.

    Returns:
        DecodedStats with every array sized from the header

    Raises:
        MatchInfoTooShortError: If raw is None or shorter than MIN_BLOB_SIZE
        MatchInfoTruncatedError: If the blob size disagrees with its header
    """
    data = memoryview(raw if raw is not None else b"").cast("B")
    if len(data) < MIN_BLOB_SIZE:
        raise MatchInfoTooShortError(
            f"Matchinfo blob has {len(data)} bytes, expected at least {MIN_BLOB_SIZE}"
        )

    # Phase 1: header
    phrase_count, column_count, row_count = read_header(data)
    expected_size = expected_blob_size(phrase_count, column_count)

    # Header values are untrusted until the size checks out; never size
    # anything from them before this point
    if len(data) < expected_size:
        raise MatchInfoTruncatedError(
            f"Matchinfo blob has {len(data)} bytes but its header "
            f"(p={phrase_count}, c={column_count}) implies {expected_size}",
            expected_size=expected_size,
            actual_size=len(data)
        )

    # Phrase data without columns has no bytes to bound the phrase count
    if column_count == 0 and phrase_count > 0:
        raise MatchInfoTruncatedError(
            f"Matchinfo blob header claims {phrase_count} phrase(s) over 0 columns",
            expected_size=expected_size,
            actual_size=len(data)
        )

    trailing = len(data) - expected_size
    if trailing:
        if strict:
            raise MatchInfoTruncatedError(
                f"Matchinfo blob has {trailing} trailing byte(s) past "
                f"the {expected_size} bytes implied by its header",
                expected_size=expected_size,
                actual_size=len(data)
            )
        logger.debug(f"Ignoring {trailing} trailing byte(s) in matchinfo blob")

    # Phase 2: walk the regions
    cursor = BlobCursor(data, HEADER_SIZE, expected_size)

    average_token_counts = tuple(cursor.read_uint32s(column_count).tolist())
    current_row_token_counts = tuple(cursor.read_uint32s(column_count).tolist())

    # Phrase-major, column-minor: C order of a (p, c, 3) array
    triples = cursor.read_uint32s(phrase_count * column_count * VALUES_PER_TRIPLE)
    triples = triples.reshape(phrase_count, column_count, VALUES_PER_TRIPLE).tolist()
    phrase_stats = tuple(
        PhraseStats(column_stats=tuple(
            ColumnTermStats(
                current_row_term_frequency=current_hits,
                total_term_frequency=total_hits,
                matching_row_count=matching_rows
            )
            for current_hits, total_hits, matching_rows in columns
        ))
        for columns in triples
    )

    logger.debug(
        f"Decoded matchinfo blob: {phrase_count} phrase(s), "
        f"{column_count} column(s), {row_count} row(s)"
    )
    return DecodedStats(
        phrase_count=phrase_count,
        column_count=column_count,
        row_count=row_count,
        average_token_counts=average_token_counts,
        current_row_token_counts=current_row_token_counts,
        phrase_stats=phrase_stats
    )
