# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Three-tier classification, escalation, and security score bands."""

from __future__ import annotations

import random
from typing import Protocol

from threatlens.core.constants import (
    CODE_THREATS_LOW_SECURITY,
    CODE_THREATS_MEDIUM_SECURITY,
    CODE_WARNINGS_MEDIUM_SECURITY,
    ESCALATION_CONFIDENCE,
    ESCALATION_SECURITY_SCORE,
    FILE_THREATS_LOW_SECURITY,
    FILE_THREATS_MEDIUM_SECURITY,
    FILE_WARNINGS_MEDIUM_SECURITY,
    MALICIOUS_THREAT_BONUS,
    QUALITY_LOW_SECURITY_SCORE,
    QUALITY_MEDIUM_SECURITY_SCORE,
    RISK_FOR_SECURITY,
    SECURITY_RANK,
    SECURITY_SCORE_BANDS,
    Level,
)
from threatlens.models.assessment import CodeQualityAssessment, MalwareAssessment


def risk_for(security_level: Level) -> Level:
    """Return the risk level paired with a security level."""
    return RISK_FOR_SECURITY[security_level]


def worst(*levels: Level) -> Level:
    """Return the lowest security level among ``levels``."""
    return min(levels, key=lambda lvl: SECURITY_RANK[lvl])


def classify_file(threat_count: int, warning_count: int) -> Level:
    """Security level for a file scan from threat and warning counts."""
    if threat_count >= FILE_THREATS_LOW_SECURITY:
        return Level.LOW
    if threat_count >= FILE_THREATS_MEDIUM_SECURITY or warning_count >= FILE_WARNINGS_MEDIUM_SECURITY:
        return Level.MEDIUM
    return Level.HIGH


def escalate_file(basic: Level, threat_count: int, assessment: MalwareAssessment) -> Level:
    """Fold a malware assessment into the basic file classification.

    ``threat_count`` is the basic count, before any malicious bonus.
    The result is never better than ``basic``.
    """
    combined_threats = threat_count + (MALICIOUS_THREAT_BONUS if assessment.is_malicious else 0)
    if combined_threats >= FILE_THREATS_LOW_SECURITY or (
        assessment.is_malicious and assessment.confidence > ESCALATION_CONFIDENCE
    ):
        escalated = Level.LOW
    elif (
        combined_threats >= FILE_THREATS_MEDIUM_SECURITY
        or assessment.security_score < ESCALATION_SECURITY_SCORE
    ):
        escalated = Level.MEDIUM
    else:
        escalated = Level.HIGH
    return worst(basic, escalated)


def classify_code(threats: int, warnings: int) -> Level:
    """Security level for a code scan from HIGH and MEDIUM finding counts."""
    if threats >= CODE_THREATS_LOW_SECURITY:
        return Level.LOW
    if threats >= CODE_THREATS_MEDIUM_SECURITY or warnings >= CODE_WARNINGS_MEDIUM_SECURITY:
        return Level.MEDIUM
    return Level.HIGH


def classify_code_quality(quality: CodeQualityAssessment) -> Level:
    """Security level from the code-quality scorer. Authoritative when available."""
    if quality.vulnerability_risk == Level.HIGH or quality.security_score < QUALITY_LOW_SECURITY_SCORE:
        return Level.LOW
    if (
        quality.vulnerability_risk == Level.MEDIUM
        or quality.security_score < QUALITY_MEDIUM_SECURITY_SCORE
    ):
        return Level.MEDIUM
    return Level.HIGH


class ScoreSampler(Protocol):
    """Pick an integer in the inclusive range ``[low, high]``."""

    def __call__(self, low: int, high: int) -> int: ...


class RandomBandSampler:
    """Sample uniformly within a band. Pass a seeded ``random.Random`` for repeatability."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def __call__(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)


class FixedBandSampler:
    """Always return ``value`` clamped into the band."""

    def __init__(self, value: int) -> None:
        self.value = value

    def __call__(self, low: int, high: int) -> int:
        return max(low, min(self.value, high))


def security_score_for(level: Level, sampler: ScoreSampler) -> int:
    low, high = SECURITY_SCORE_BANDS[level]
    return sampler(low, high)
