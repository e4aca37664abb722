# config.py
import tomllib
from pathlib import Path

def _get_version():
    """Read ftsrank's version from pyproject.toml"""
    try:
        pyproject_path = Path(__file__).parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
        return data["project"]["version"]
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        return "unknown"  # Fallback if pyproject.toml is missing

VERSION = _get_version()
FRAME_WIDTH = 70 # For CLI UI headings

# Constants pertaining to the blob returned by matchinfo(table, 'pcnalx')
MATCHINFO_FORMAT = "pcnalx"
UINT32_SIZE = 4                 # Every value in the blob is a little-endian uint32
HEADER_SIZE = 12                # phrase count, column count, row count
PHRASE_TRIPLE_SIZE = 12         # 3 uint32 per phrase per column
MIN_BLOB_SIZE = 32              # Smallest real blob: 1 phrase, 1 column

class PathConfig:
    BASE_DIR = Path(__file__).parent

    @classmethod
    def get_config_path(cls):
        return cls.BASE_DIR / "config.json"
