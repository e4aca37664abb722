# ui/cli/console_utils.py
from typing import List, Sequence
from config import FRAME_WIDTH

def print_header(title):
    """Print a clean header with title."""
    print("\n" + "═" * FRAME_WIDTH)
    print(f"  {title}")
    print("═" * FRAME_WIDTH)

def format_table(headers: Sequence[str], rows: Sequence[Sequence]) -> List[str]:
    """Format rows as right-aligned columns, indented for CLI output."""
    widths = [len(str(h)) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    def format_row(cells):
        return "  " + "  ".join(str(cell).rjust(widths[i]) for i, cell in enumerate(cells))

    lines = [format_row(headers), "  " + "  ".join("─" * w for w in widths)]
    lines.extend(format_row(row) for row in rows)
    return lines

def print_table(headers: Sequence[str], rows: Sequence[Sequence]):
    """Print rows as an aligned table."""
    for line in format_table(headers, rows):
        print(line)
