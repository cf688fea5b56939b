"""Exceptions raised by no_emoji.

Detection itself never raises on a ``str``; only configuration and reading
input can fail.
"""


class NoEmojiError(Exception):
    """Base class for all no_emoji errors."""


class ConfigError(NoEmojiError, ValueError):
    """Invalid configuration value or key."""


class InputError(NoEmojiError):
    """Input text could not be read."""
