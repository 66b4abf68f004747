# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for threatlens."""

from threatlens.models.assessment import (
    AdvancedMetrics,
    AnomalyDetection,
    CodeQualityAssessment,
    MalwareAssessment,
    PerformanceImpact,
)
from threatlens.models.finding import DetailedVulnerability, Finding, Suggestion
from threatlens.models.scan import (
    AnalysisResult,
    CodeAnalysisResult,
    CodeInput,
    FileInput,
    FileMetadata,
    decode_content,
)

__all__ = [
    "AdvancedMetrics",
    "AnalysisResult",
    "AnomalyDetection",
    "CodeAnalysisResult",
    "CodeInput",
    "CodeQualityAssessment",
    "DetailedVulnerability",
    "FileInput",
    "FileMetadata",
    "Finding",
    "MalwareAssessment",
    "PerformanceImpact",
    "Suggestion",
    "decode_content",
]
