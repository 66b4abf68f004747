# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Secondary scoring and heuristic metric models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from threatlens.core.constants import Level


class AnomalyDetection(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_anomaly: bool
    anomaly_score: float = Field(ge=0.0, le=1.0)
    suspicious_patterns: list[str] = Field(default_factory=list)


class MalwareAssessment(BaseModel):
    """Output of the malware secondary scorer for a file."""

    model_config = ConfigDict(frozen=True)

    is_malicious: bool
    confidence: float = Field(ge=0.0, le=1.0)
    pattern_score: float = Field(ge=0.0, le=1.0)
    secondary_score: float = Field(ge=0.0, le=1.0)
    combined_score: float = Field(ge=0.0, le=1.0)
    risk_score: int = Field(ge=0, le=100)
    security_score: int = Field(ge=0, le=100, description="100 - risk_score")
    threats: list[str] = Field(default_factory=list)
    anomaly_detection: AnomalyDetection
    secondary_error: str | None = Field(
        default=None,
        description="Why the secondary scorer was skipped; confidence is pattern-only when set",
    )


class CodeQualityAssessment(BaseModel):
    """Output of the code-quality secondary scorer."""

    model_config = ConfigDict(frozen=True)

    security_score: int = Field(ge=0, le=100)
    maintainability_score: int = Field(ge=0)
    complexity_score: int = Field(ge=0, le=100)
    vulnerability_risk: Level
    recommendations: list[str] = Field(default_factory=list)


class AdvancedMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    entropy_score: float = Field(ge=0.0)
    obfuscation_level: Level
    behavior_analysis: list[str] = Field(default_factory=list)


class PerformanceImpact(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    bottlenecks: list[str] = Field(default_factory=list)
