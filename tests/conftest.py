import struct
import pytest
from config import PathConfig
from core.utilities.config_manager import ConfigManager, config_manager

def build_blob(phrase_count, column_count, row_count,
               average_token_counts, current_row_token_counts, triples):
    """Pack a matchinfo('pcnalx') blob; triples are ordered phrase-major, column-minor."""
    values = [phrase_count, column_count, row_count]
    values.extend(average_token_counts)
    values.extend(current_row_token_counts)
    for triple in triples:
        values.extend(triple)
    return struct.pack(f"<{len(values)}I", *values)

def sequential_blob(phrase_count, column_count, row_count=1000):
    """Blob whose every value past the header is distinct, starting at 100."""
    counter = iter(range(100, 100_000))
    average = [next(counter) for _ in range(column_count)]
    current = [next(counter) for _ in range(column_count)]
    triples = [
        (next(counter), next(counter), next(counter))
        for _ in range(phrase_count * column_count)
    ]
    blob = build_blob(phrase_count, column_count, row_count, average, current, triples)
    return blob, average, current, triples

@pytest.fixture
def make_blob():
    return build_blob

@pytest.fixture
def make_sequential_blob():
    return sequential_blob

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config singleton at a temp file with default settings."""
    config_path = tmp_path / "config.json"
    monkeypatch.setattr(PathConfig, 'get_config_path', classmethod(lambda cls: config_path))
    monkeypatch.setattr(config_manager, 'config_path', config_path)
    monkeypatch.setattr(config_manager, 'settings', ConfigManager.DEFAULT_SETTINGS.copy())
    return config_manager
