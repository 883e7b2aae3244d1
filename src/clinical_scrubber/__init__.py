"""clinical-scrubber — pattern-based PHI redaction for clinical notes."""

from .scrubber import Detector, Scrubber
from .config import ScrubberConfig, load_config, load_from_file, load_from_json, load_from_yaml
from .errors import ConfigError, PatternError, ScrubberError
from .types import Category, ScrubStats, TOKENS

__all__ = [
    "Scrubber", "Detector",
    "ScrubberConfig",
    "load_config", "load_from_file", "load_from_json", "load_from_yaml",
    "ScrubberError", "ConfigError", "PatternError",
    "Category", "ScrubStats", "TOKENS",
]
__version__ = "0.1.0"
