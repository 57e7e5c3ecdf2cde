class RescortError(Exception):
    pass


class ConfigurationError(RescortError):
    """Missing credential or similar. Raised at startup, never mid-search."""


class GenerationError(RescortError):
    """The generation service failed, timed out or returned junk."""


class ValidationError(RescortError, ValueError):
    """Empty query."""
