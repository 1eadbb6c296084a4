"""Custom exception hierarchy for the Tidemark assessment engine."""

from __future__ import annotations


class TidemarkError(Exception):
    """Base exception for all Tidemark errors."""


class ValidationError(TidemarkError, ValueError):
    """Raised when an assessment violates a domain constraint."""


class ComputationPreconditionError(ValidationError):
    """Raised when an invalid value reaches the scoring core.

    Boundary validation should make this impossible, so seeing it means a
    defect rather than bad user input.
    """


class EnhancerError(TidemarkError):
    """Raised when the recommendation enhancer returns unusable output."""


class ConfigurationError(TidemarkError):
    """Raised when environment configuration is invalid."""
