from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a writer is constructed with unusable arguments."""
