# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Scan input and analysis result models."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from threatlens.core.constants import RISK_FOR_SECURITY, InputKind, Level
from threatlens.core.exceptions import UnreadableContentError
from threatlens.models.assessment import (
    AdvancedMetrics,
    CodeQualityAssessment,
    MalwareAssessment,
    PerformanceImpact,
)
from threatlens.models.finding import DetailedVulnerability, Finding, Suggestion


def decode_content(data: bytes, *, source: str = "<bytes>") -> str:
    """Decode raw bytes as UTF-8 text.

    Raises :class:`UnreadableContentError` instead of substituting
    replacement characters, so binary input is never scanned as garbage.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise UnreadableContentError(
            f"{source} is not valid UTF-8 text (byte {exc.start})"
        ) from exc


class FileInput(BaseModel):
    """An uploaded file."""

    model_config = ConfigDict(frozen=True)

    name: str
    content: str
    size: int | None = Field(default=None, ge=0)
    mime_type: str | None = None

    @classmethod
    def from_bytes(cls, name: str, data: bytes, mime_type: str | None = None) -> FileInput:
        return cls(
            name=name,
            content=decode_content(data, source=name),
            size=len(data),
            mime_type=mime_type,
        )

    @classmethod
    def from_path(cls, path: str | Path, mime_type: str | None = None) -> FileInput:
        path = Path(path)
        return cls.from_bytes(path.name, path.read_bytes(), mime_type=mime_type)


class CodeInput(BaseModel):
    """Pasted source code."""

    model_config = ConfigDict(frozen=True)

    content: str


class FileMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    size: int
    type: str
    content_hash: str = Field(description="Truncated SHA-256 prefix, display only")
    scan_timestamp: datetime


class AnalysisResult(BaseModel):
    """Complete result of scanning one input."""

    model_config = ConfigDict(frozen=True)

    kind: InputKind = InputKind.FILE
    security_level: Level
    risk_level: Level
    threat_count: int = Field(ge=0)
    warning_count: int = Field(ge=0)
    findings: list[Finding] = Field(default_factory=list)
    vulnerabilities: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    metadata: FileMetadata
    errors: list[str] = Field(default_factory=list)

    # File enrichment
    malware_assessment: MalwareAssessment | None = None
    advanced_metrics: AdvancedMetrics | None = None

    @model_validator(mode="after")
    def _check_level_pairing(self) -> AnalysisResult:
        expected = RISK_FOR_SECURITY[self.security_level]
        if self.risk_level != expected:
            msg = (
                f"security level {self.security_level} must pair with risk level "
                f"{expected}, got {self.risk_level}"
            )
            raise ValueError(msg)
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def finding_count_by_severity(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for f in self.findings:
            counts[f.severity] = counts.get(f.severity, 0) + 1
        return counts


class CodeAnalysisResult(AnalysisResult):
    """Result of scanning pasted code, with code-specific extensions."""

    kind: InputKind = InputKind.CODE
    lines_of_code: int = Field(ge=0)
    complexity_score: int = Field(ge=0, le=10)
    security_score: int = Field(ge=0, le=100)
    detected_language: str
    obfuscation_level: Level = Level.LOW
    detailed_vulnerabilities: list[DetailedVulnerability] = Field(default_factory=list)
    detailed_suggestions: list[Suggestion] = Field(default_factory=list)

    # Code enrichment
    code_quality: CodeQualityAssessment | None = None
    performance_impact: PerformanceImpact | None = None
