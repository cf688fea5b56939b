"""no-emoji — find emoji in plain text and remove them without leaving stray spaces."""

from .rule import EmojiRule, RuleConfig, apply_fixes
from .matcher import iter_matches, emoji_package_oracle
from .classifier import is_text_presentation
from .ranges import compute_removal_range, legacy_range
from .config import create_rule, load_config, load_from_yaml
from .errors import NoEmojiError, ConfigError, InputError
from .types import Diagnostic, Fix, MatchCandidate, RemovalRange

__all__ = [
    "EmojiRule", "RuleConfig", "apply_fixes",
    "iter_matches", "emoji_package_oracle",
    "is_text_presentation",
    "compute_removal_range", "legacy_range",
    "create_rule", "load_config", "load_from_yaml",
    "NoEmojiError", "ConfigError", "InputError",
    "Diagnostic", "Fix", "MatchCandidate", "RemovalRange",
]
__version__ = "0.1.0"
