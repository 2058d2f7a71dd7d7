"""
Domain exceptions for class discovery.

Unresolvable and non-instantiable candidates are expected and never raised;
these cover programmer errors and bad configuration only.
"""


class DiscoveryError(Exception):
    """Base class for all discovery exceptions."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.context = context or {}


class PathTranslationError(DiscoveryError):
    """Raised when a candidate file does not live under the discovery root."""

    pass


class ConfigurationError(DiscoveryError):
    """Raised when discovery settings are invalid."""

    pass
