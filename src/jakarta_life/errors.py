"""Custom exceptions for the Jakarta commute service."""


class JakartaLifeError(Exception):
    """Base error for service failures."""


class ConfigurationError(JakartaLifeError):
    """Raised when a provider API key is missing or still a placeholder."""


class ProviderError(JakartaLifeError):
    """Raised when an external provider fails or answers with a non-OK status."""


class PolylineDecodeError(JakartaLifeError, ValueError):
    """Raised by strict polyline decoding when the input is truncated."""
