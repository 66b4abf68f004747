# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for threatlens."""


class ThreatLensError(Exception):
    """Base exception for all threatlens errors."""


class ConfigurationError(ThreatLensError):
    """Invalid or missing configuration."""


class ScanError(ThreatLensError):
    """Error during scan execution."""


class UnreadableContentError(ScanError):
    """Input bytes could not be decoded as text."""


class ContentTooLargeError(ScanError):
    """Input exceeds the configured maximum content size."""


class HashingError(ScanError):
    """The content digest could not be computed."""


class ScorerError(ThreatLensError):
    """A secondary scorer failed to produce a score."""
