# core/utilities/config_manager.py
import json
import logging
from config import PathConfig

logger = logging.getLogger(__name__)

class ConfigManager:
    OUTPUT_FORMAT_CHOICES = {
        'table': 'Plain-text tables',
        'json': 'JSON'
    }

    DEFAULT_SETTINGS = {
        'reject_trailing_bytes': True,
        'verify_phrase_count': True,
        'output_format': 'table'
    }

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.load()
        return cls._instance

    def load(self):
        self.config_path = PathConfig.get_config_path()
        try:
            if self.config_path.exists():
                with open(self.config_path, 'r') as f:
                    self.settings = json.load(f)

                # Ensure new settings exist
                for key, default in self.DEFAULT_SETTINGS.items():
                    if key not in self.settings:
                        self.settings[key] = default
            else:
                self.settings = self.DEFAULT_SETTINGS.copy()
        except (OSError, json.JSONDecodeError, TypeError) as e:
            logger.warning(f"Could not read {self.config_path}, using defaults: {e}")
            self.settings = self.DEFAULT_SETTINGS.copy()

    def save(self):
        with open(self.config_path, 'w') as f:
            json.dump(self.settings, f, indent=2)

    def get(self, key, default=None):
        return self.settings.get(key, default)

    def set(self, key, value):
        self.settings[key] = value
        self.save()

    def get_reject_trailing_bytes(self) -> bool:
        """Whether blobs longer than their header implies are rejected."""
        return self.get('reject_trailing_bytes', True)

    def set_reject_trailing_bytes(self, value):
        self.set('reject_trailing_bytes', bool(value))

    def get_verify_phrase_count(self) -> bool:
        return self.get('verify_phrase_count', True)

    def set_verify_phrase_count(self, value):
        self.set('verify_phrase_count', bool(value))

    def get_output_format(self):
        return self.get('output_format', 'table')

    def set_output_format(self, value):
        if value not in self.OUTPUT_FORMAT_CHOICES:
            raise ValueError(f"Invalid output format: {value}")
        self.set('output_format', value)

    def reset(self):
        """Reset all settings to defaults."""
        self.settings = self.DEFAULT_SETTINGS.copy()
        self.save()

# Singleton access
config_manager = ConfigManager()
