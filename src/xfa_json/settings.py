# src/xfa_json/settings.py
from enum import Enum
from pathlib import Path
import os

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from xfa_json.constants import (
    JSON_INDENT,
    LOOKUP_MIN_ITEMS,
    LOOKUP_PATTERNS,
    METADATA_PREFIXES,
    XML_ENCODING,
)
from xfa_json.paths import Paths


class XfaMode(str, Enum):
    """What to emit for an XFA data island."""

    OFF = "off"
    RAW = "raw"
    FULL = "full"
    CLEAN = "clean"


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    format: str = "json"  # "json" or "human"
    structured: bool = True


class ConvertConfig(BaseModel):
    mode: XfaMode = XfaMode.CLEAN
    indent: int = JSON_INDENT
    # On conversion failure emit the XML unchanged instead of failing
    fallback_to_raw: bool = True


class FilterConfig(BaseModel):
    """Tables used by the clean-mode classifiers."""

    metadata_prefixes: tuple[str, ...] = METADATA_PREFIXES
    lookup_patterns: tuple[str, ...] = LOOKUP_PATTERNS
    lookup_min_items: int = LOOKUP_MIN_ITEMS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="XFA_JSON_", env_nested_delimiter="__", extra="ignore"
    )
    logging: LoggingConfig = LoggingConfig()
    convert: ConvertConfig = ConvertConfig()
    filters: FilterConfig = FilterConfig()

    @staticmethod
    def _deep_update(d: dict, u: dict) -> dict:
        # Recursively update dict d with values from u
        for k, v in u.items():
            if isinstance(v, dict) and isinstance(d.get(k), dict):
                d[k] = Settings._deep_update(d[k], v)
            else:
                d[k] = v
        return d

    @staticmethod
    def _read_yaml(path) -> dict:
        if not os.path.exists(path):
            return {}
        with open(path, "r", encoding=XML_ENCODING) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def load(path) -> "Settings":
        """Load `base.yaml` next to `path`, then overlay `path` itself.

        Missing files are treated as empty so the model defaults apply.
        """
        base_path = os.path.join(os.path.dirname(str(path)), "base.yaml")
        base = Settings._read_yaml(base_path)
        override = Settings._read_yaml(path) if str(path) != base_path else {}
        merged = Settings._deep_update(base, override)
        return Settings(**merged)


def load_settings(env: str | None = None) -> Settings:
    """Load settings for `env` (default: $XFA_JSON_ENV or 'dev')."""
    env = env or os.environ.get("XFA_JSON_ENV", "dev")
    cfg_path: Path = Paths.config_file(env)
    return Settings.load(cfg_path)
