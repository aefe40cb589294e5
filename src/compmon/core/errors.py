class CompmonError(Exception):
    """Base exception for compmon."""


class ConfigurationError(CompmonError):
    """Raised for invalid config/registry selections or monitor arguments."""
