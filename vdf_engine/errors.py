"""Errors raised by the VDF engine."""


class VdfConfigurationError(ValueError):
    """Raised when a VDF is configured with parameters it cannot run with.

    Covers invalid moduli, seeds and step counts, and an exhausted
    debiasing retry bound. Detected before any sequential work starts.
    """
