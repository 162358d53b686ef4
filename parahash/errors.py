class ParahashError(Exception):
    """Base exception for parahash failures."""


class ConfigError(ParahashError):
    """Raised when configuration values are missing, malformed or out of range."""


class RepresentationError(ConfigError):
    """Raised when a digest representation name is not recognised."""


class InputError(ParahashError):
    """Raised when the input document cannot be read or decoded."""


class OutputError(ParahashError):
    """Raised when the output destination exists or cannot be created."""


class TruncationError(ParahashError):
    """Raised when a title length exceeds the words or characters available."""
