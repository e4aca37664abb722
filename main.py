# main.py
import sys
import json
import logging
import argparse
from pathlib import Path
from config import VERSION, MATCHINFO_FORMAT
from core.matchinfo import DecodedStats, MatchInfoError, decode_matchinfo
from core.search import check_phrase_count
from core.utilities.config_manager import config_manager
from ui.cli.console_utils import print_header, print_table

def read_blob(args) -> bytes:
    """Read the blob from --hex or from a file path."""
    if args.hex is not None:
        return bytes.fromhex(args.hex)
    return Path(args.blob_file).read_bytes()

def print_stats(stats: DecodedStats):
    """Print decoded statistics as tables."""
    print_header(f"matchinfo('{MATCHINFO_FORMAT}')")
    print(f"  Phrases: {stats.phrase_count}")
    print(f"  Columns: {stats.column_count}")
    print(f"  Rows:    {stats.row_count}\n")

    print_table(
        ["column", "avg tokens", "row tokens"],
        [
            (i, avg, current)
            for i, (avg, current) in enumerate(
                zip(stats.average_token_counts, stats.current_row_token_counts)
            )
        ]
    )

    for phrase_index, phrase in enumerate(stats.phrase_stats):
        print(f"\n  Phrase {phrase_index}")
        print_table(
            ["column", "row hits", "total hits", "rows hit"],
            [
                (column_index, s.current_row_term_frequency,
                 s.total_term_frequency, s.matching_row_count)
                for column_index, s in enumerate(phrase.column_stats)
            ]
        )

def main(argv=None):
    """Decode one matchinfo blob and print it."""
    parser = argparse.ArgumentParser(
        description=f"Inspect SQLite FTS matchinfo('{MATCHINFO_FORMAT}') blobs"
    )
    parser.add_argument('blob_file', nargs='?', help='File holding the raw blob')
    parser.add_argument('--hex', help='Blob as a hex string instead of a file')
    parser.add_argument('--json', action='store_true', help='Print JSON instead of tables')
    parser.add_argument(
        '--allow-trailing',
        action='store_true',
        help='Ignore bytes past the size implied by the header'
    )
    parser.add_argument('--phrases', nargs='+', help='Query phrases, to cross-check the phrase count')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f"ftsrank {VERSION}")
    args = parser.parse_args(argv)

    if args.blob_file is None and args.hex is None:
        parser.error("a blob file or --hex is required")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        raw = read_blob(args)
    except (OSError, ValueError) as e:
        print(f"\n  ❗️ Could not read blob: {e}")
        return 1

    strict = config_manager.get_reject_trailing_bytes() and not args.allow_trailing
    try:
        stats = decode_matchinfo(raw, strict=strict)
        check_phrase_count(stats, args.phrases)
    except MatchInfoError as e:
        print(f"\n  ❗️ {e}")
        return 1

    if args.json or config_manager.get_output_format() == 'json':
        print(json.dumps(stats.to_dict(), indent=2))
    else:
        print_stats(stats)
    return 0

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nGoodbye!")
        sys.exit(0)
