"""Scrubber configuration and JSON/YAML/dict loaders.

The configuration only augments the built-in dictionaries and tunes the
bare-digit MRN detector.  It can be loaded from a JSON or YAML file, or
from a plain dict (for embedding in a larger config).

Example JSON:

    {
      "names": ["Zelda Fitzgerald", "Okonkwo"],
      "keywords": ["Lakeside Rehab", "Riverbend Dialysis"],
      "mrn_min_length": 7,
      "mrn_max_length": 9
    }

Example YAML:

    clinical_scrubber:
      names:
        - Zelda Fitzgerald
      keywords:
        - Lakeside Rehab
      mrn_min_length: 7
"""

from __future__ import annotations
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError

DEFAULT_MRN_MIN_LENGTH = 6
DEFAULT_MRN_MAX_LENGTH = 10


@dataclass
class ScrubberConfig:
    """Options that augment the scrubber's defaults."""
    names: list[str] = field(default_factory=list)      # extra person names
    keywords: list[str] = field(default_factory=list)   # extra facility names / keywords
    mrn_min_length: int | None = None                   # None = 6
    mrn_max_length: int | None = None                   # None = 10

    def mrn_range(self) -> tuple[int, int]:
        """Effective (min, max) digit length for bare MRNs.

        Raises ConfigError if either bound is below 1 or min exceeds max.
        """
        lo = DEFAULT_MRN_MIN_LENGTH if self.mrn_min_length is None else self.mrn_min_length
        hi = DEFAULT_MRN_MAX_LENGTH if self.mrn_max_length is None else self.mrn_max_length
        if lo < 1 or hi < 1 or lo > hi:
            raise ConfigError(f"invalid MRN length range: {lo}-{hi}")
        return lo, hi


def _string_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{key!r} must be a list of strings")
    return list(value)


def _optional_int(data: dict[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key!r} must be an integer")
    return value


def load_config(data: dict[str, Any] | None) -> ScrubberConfig:
    """Build a ScrubberConfig from a dict (from JSON, YAML or inline)."""
    if data is None:
        return ScrubberConfig()
    if not isinstance(data, dict):
        raise ConfigError("config must be a mapping")
    # Support nested under "clinical_scrubber" key or flat
    if "clinical_scrubber" in data:
        data = data["clinical_scrubber"] or {}
        if not isinstance(data, dict):
            raise ConfigError("'clinical_scrubber' must be a mapping")

    return ScrubberConfig(
        names=_string_list(data, "names"),
        keywords=_string_list(data, "keywords"),
        mrn_min_length=_optional_int(data, "mrn_min_length"),
        mrn_max_length=_optional_int(data, "mrn_max_length"),
    )


def load_from_json(path: str | Path) -> ScrubberConfig:
    """Load config from a JSON file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"failed to read config file: {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"failed to parse config JSON: {path}: {e}") from e
    return load_config(data)


def load_from_yaml(path: str | Path) -> ScrubberConfig:
    """Load config from a YAML file."""
    import yaml
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"failed to read config file: {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"failed to parse config YAML: {path}: {e}") from e
    return load_config(data)


def load_from_file(path: str | Path) -> ScrubberConfig:
    """Load config from *path*, choosing the parser by file extension."""
    if Path(path).suffix.lower() in (".yaml", ".yml"):
        return load_from_yaml(path)
    return load_from_json(path)
