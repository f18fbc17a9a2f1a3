from typing import Optional, Any


class PatternKitError(Exception):
    """Base exception for patternkit errors."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(PatternKitError):
    """Raised when there's an issue with configuration."""
    pass


class UnknownPatternError(PatternKitError):
    """Raised when a pattern name is not present in the catalog."""
    pass


class StrategyNotRegisteredError(PatternKitError):
    """Raised when a payment strategy name has no registered factory."""
    pass
