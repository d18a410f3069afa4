"""Configuration loading and management"""

import os
import json
import logging
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "LP_HEDGE_"


class Config:
    """Centralized configuration manager for form defaults"""

    _instance = None
    _defaults = None
    _sources = None

    DEFAULTS_FILE = "defaults.json"

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if Config._defaults is None:
            self._load()

    @classmethod
    def reload(cls):
        """Drop cached settings and load them again"""
        cls._defaults = None
        cls._sources = None
        return cls()

    def _find_config_dir(self):
        """Find config directory, or None if there is none"""
        env_path = os.getenv("LP_HEDGE_CONFIG_DIR")
        if env_path:
            path = Path(env_path)
            if path.exists():
                return path
            logger.debug("LP_HEDGE_CONFIG_DIR does not exist: %s", env_path)

        locations = [
            Path.cwd() / "config",
            Path.home() / ".lp-hedge" / "config",
        ]

        for path in locations:
            if path.exists():
                return path

        return None

    def _load(self):
        """Load defaults: built-ins, then defaults.json, then environment"""
        from ..calculator.fields import DEFAULT_VALUES

        load_dotenv(find_dotenv(usecwd=True))

        defaults = dict(DEFAULT_VALUES)
        sources = ["built-in"]

        config_dir = self._find_config_dir()
        if config_dir:
            defaults_path = config_dir / self.DEFAULTS_FILE
            if defaults_path.exists():
                defaults.update(self._read_defaults_file(defaults_path))
                sources.append(str(defaults_path))

        env_overrides = self._read_env()
        if env_overrides:
            defaults.update(env_overrides)
            sources.append("environment")

        logger.debug("Loaded form defaults from %s", ", ".join(sources))
        Config._defaults = defaults
        Config._sources = sources

    def _read_defaults_file(self, path):
        """Read a defaults.json mapping field name -> raw value"""
        from ..calculator.fields import lookup_field

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}")
        except UnicodeDecodeError as e:
            raise ConfigError(f"{path} is not valid UTF-8: {e}")
        except OSError as e:
            raise ConfigError(f"Could not read {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a JSON object")

        values = {}
        for key, value in data.items():
            spec = lookup_field(key)
            if spec is None:
                raise ConfigError(f"Unknown field in {path}: {key}")
            if isinstance(value, bool) or not isinstance(value, (str, int, float)):
                raise ConfigError(f"Field {key} in {path} must be a string or number")
            values[spec.name] = str(value)
        return values

    def _read_env(self):
        """Collect LP_HEDGE_<FIELD> overrides from the environment"""
        from ..calculator.fields import FIELDS

        values = {}
        for spec in FIELDS:
            value = os.getenv(ENV_PREFIX + spec.name.upper())
            if value is not None:
                values[spec.name] = value
        return values

    @property
    def form_defaults(self):
        """Field name -> default raw text"""
        return dict(Config._defaults)

    @property
    def sources(self):
        """Where the current defaults came from, lowest priority first"""
        return list(Config._sources)
