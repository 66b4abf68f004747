# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations, classification thresholds, and score bands."""

from enum import StrEnum


class Level(StrEnum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class InputKind(StrEnum):
    FILE = "file"
    CODE = "code"


class FindingCategory(StrEnum):
    MALWARE = "malware"
    SUSPICIOUS = "suspicious"
    EXTENSION = "extension"
    VULNERABILITY = "vulnerability"
    ANOMALY = "anomaly"


# Security and risk levels are mirror images of each other.
RISK_FOR_SECURITY: dict[Level, Level] = {
    Level.HIGH: Level.LOW,
    Level.MEDIUM: Level.MEDIUM,
    Level.LOW: Level.HIGH,
}

# Lower rank = worse security posture.
SECURITY_RANK: dict[Level, int] = {
    Level.LOW: 0,
    Level.MEDIUM: 1,
    Level.HIGH: 2,
}

# File pipeline thresholds
FILE_THREATS_LOW_SECURITY = 3
FILE_THREATS_MEDIUM_SECURITY = 1
FILE_WARNINGS_MEDIUM_SECURITY = 3

# Code pipeline thresholds
CODE_THREATS_LOW_SECURITY = 2
CODE_THREATS_MEDIUM_SECURITY = 1
CODE_WARNINGS_MEDIUM_SECURITY = 2

# Inclusive numeric securityScore band per security level
SECURITY_SCORE_BANDS: dict[Level, tuple[int, int]] = {
    Level.LOW: (10, 40),
    Level.MEDIUM: (50, 80),
    Level.HIGH: (80, 100),
}

# Secondary malware scorer
COMBINE_WEIGHT_PATTERN = 0.4
COMBINE_WEIGHT_SECONDARY = 0.35
COMBINE_WEIGHT_ANOMALY = 0.25
MALICIOUS_THRESHOLD = 0.6
ESCALATION_CONFIDENCE = 0.7
ESCALATION_SECURITY_SCORE = 60
MALICIOUS_THREAT_BONUS = 2

# Secondary code-quality scorer overrides
QUALITY_LOW_SECURITY_SCORE = 50
QUALITY_MEDIUM_SECURITY_SCORE = 70

# Obfuscation level thresholds (strictly greater than)
OBFUSCATION_HIGH = 10
OBFUSCATION_MEDIUM = 5

# Suggestion capacities per security level
FILE_SUGGESTION_CAPACITY: dict[Level, int] = {
    Level.LOW: 5,
    Level.MEDIUM: 3,
    Level.HIGH: 2,
}
CODE_SUGGESTION_CAPACITY: dict[Level, int] = {
    Level.LOW: 6,
    Level.MEDIUM: 4,
    Level.HIGH: 2,
}
CODE_SUGGESTION_MINIMUM = 2

CODE_INPUT_NAME = "User Code"
DEFAULT_MIME_TYPE = "application/octet-stream"
CODE_MIME_TYPE = "text/plain"
