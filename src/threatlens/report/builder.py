# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Assemble analysis results from classified findings."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from threatlens.core.constants import (
    CODE_INPUT_NAME,
    CODE_MIME_TYPE,
    CODE_SUGGESTION_CAPACITY,
    CODE_SUGGESTION_MINIMUM,
    DEFAULT_MIME_TYPE,
    FILE_SUGGESTION_CAPACITY,
    FindingCategory,
    InputKind,
    Level,
)
from threatlens.models.assessment import (
    AdvancedMetrics,
    CodeQualityAssessment,
    MalwareAssessment,
    PerformanceImpact,
)
from threatlens.models.finding import DetailedVulnerability, Finding, Suggestion
from threatlens.models.scan import AnalysisResult, CodeAnalysisResult, FileMetadata
from threatlens.report.catalogs import (
    CODE_SUGGESTIONS,
    FILE_SUGGESTIONS,
    LANGUAGE_MARKERS,
    MIME_TYPES,
    UNKNOWN_LANGUAGE,
)
from threatlens.scanner.severity import risk_for

Clock = Callable[[], datetime]

_THREAT_CATEGORIES = (FindingCategory.MALWARE, FindingCategory.EXTENSION)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def detect_mime_type(filename: str) -> str:
    """Infer a MIME type from the file extension."""
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    return MIME_TYPES.get(ext, DEFAULT_MIME_TYPE)


def detect_language(code: str) -> str:
    for language, markers, require_all in LANGUAGE_MARKERS:
        check = all if require_all else any
        if check(marker in code for marker in markers):
            return language
    return UNKNOWN_LANGUAGE


def byte_length(content: str) -> int:
    return len(content.encode("utf-8", errors="surrogatepass"))


def file_suggestions(security_level: Level) -> list[str]:
    return list(FILE_SUGGESTIONS[: FILE_SUGGESTION_CAPACITY[security_level]])


def code_suggestions(security_level: Level, finding_count: int) -> list[Suggestion]:
    """At least the minimum, one per finding beyond that, capped by tier."""
    count = min(
        max(finding_count, CODE_SUGGESTION_MINIMUM),
        CODE_SUGGESTION_CAPACITY[security_level],
    )
    return list(CODE_SUGGESTIONS[:count])


def file_vulnerabilities(
    findings: Sequence[Finding],
    assessment: MalwareAssessment | None = None,
) -> list[str]:
    """Human-readable threat descriptions, in finding order, without repeats."""
    entries = [
        f"Malware signature detected: {f.label}" if f.category == FindingCategory.MALWARE else f.label
        for f in findings
        if f.category in _THREAT_CATEGORIES
    ]
    if assessment is not None and assessment.is_malicious:
        entries.extend(assessment.threats)
    return list(dict.fromkeys(entries))


class ReportBuilder:
    """Build :class:`AnalysisResult` objects.

    ``clock`` supplies the scan timestamp and can be fixed in tests.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or _utc_now

    def metadata(
        self,
        *,
        name: str,
        size: int,
        mime_type: str,
        content_hash: str,
    ) -> FileMetadata:
        return FileMetadata(
            name=name,
            size=size,
            type=mime_type,
            content_hash=content_hash,
            scan_timestamp=self._clock(),
        )

    def build_file_report(
        self,
        *,
        name: str,
        content: str,
        size: int | None,
        mime_type: str | None,
        content_hash: str,
        security_level: Level,
        threat_count: int,
        warning_count: int,
        findings: Sequence[Finding],
        advanced_metrics: AdvancedMetrics | None = None,
        malware_assessment: MalwareAssessment | None = None,
        errors: Sequence[str] = (),
    ) -> AnalysisResult:
        return AnalysisResult(
            kind=InputKind.FILE,
            security_level=security_level,
            risk_level=risk_for(security_level),
            threat_count=threat_count,
            warning_count=warning_count,
            findings=list(findings),
            vulnerabilities=file_vulnerabilities(findings, malware_assessment),
            suggestions=file_suggestions(security_level),
            metadata=self.metadata(
                name=name,
                size=size if size is not None else byte_length(content),
                mime_type=mime_type or detect_mime_type(name),
                content_hash=content_hash,
            ),
            errors=list(errors),
            malware_assessment=malware_assessment,
            advanced_metrics=advanced_metrics,
        )

    def build_code_report(
        self,
        *,
        code: str,
        content_hash: str,
        security_level: Level,
        security_score: int,
        findings: Sequence[Finding],
        vulnerability_descriptions: dict[str, str],
        obfuscation_level: Level = Level.LOW,
        code_quality: CodeQualityAssessment | None = None,
        performance_impact: PerformanceImpact | None = None,
        errors: Sequence[str] = (),
    ) -> CodeAnalysisResult:
        """Build a code report.

        ``vulnerability_descriptions`` maps rule IDs to the description
        shown alongside each detailed vulnerability.
        """
        detailed = [
            DetailedVulnerability(
                severity=f.severity,
                title=f.label,
                description=vulnerability_descriptions.get(f.rule_id, ""),
                line=f.line_number or 1,
            )
            for f in findings
        ]
        suggestions = code_suggestions(security_level, len(findings))
        return CodeAnalysisResult(
            security_level=security_level,
            risk_level=risk_for(security_level),
            threat_count=sum(1 for f in findings if f.severity == Level.HIGH),
            warning_count=sum(1 for f in findings if f.severity == Level.MEDIUM),
            findings=list(findings),
            vulnerabilities=[v.title for v in detailed],
            suggestions=[s.description for s in suggestions],
            metadata=self.metadata(
                name=CODE_INPUT_NAME,
                size=byte_length(code),
                mime_type=CODE_MIME_TYPE,
                content_hash=content_hash,
            ),
            errors=list(errors),
            lines_of_code=len(code.split("\n")),
            complexity_score=min(len(code) // 100, 10),
            security_score=security_score,
            detected_language=detect_language(code),
            obfuscation_level=obfuscation_level,
            detailed_vulnerabilities=detailed,
            detailed_suggestions=suggestions,
            code_quality=code_quality,
            performance_impact=performance_impact,
        )
