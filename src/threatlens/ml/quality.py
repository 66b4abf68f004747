# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Code-quality secondary scorer: structural metrics plus advanced vulnerability patterns."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from threatlens.core.constants import Level
from threatlens.models.assessment import CodeQualityAssessment
from threatlens.scanner.matcher import MatchResult, PatternMatcher
from threatlens.signatures.catalog import SignatureCatalog

logger = logging.getLogger("threatlens.ml.quality")

_COMPLEXITY_INDICATORS = [
    re.compile(r"if\s*\("),
    re.compile(r"else"),
    re.compile(r"for\s*\("),
    re.compile(r"while\s*\("),
    re.compile(r"switch\s*\("),
    re.compile(r"try\s*{"),
    re.compile(r"catch\s*\("),
    re.compile(r"&&"),
    re.compile(r"\|\|"),
]
_COMMENT_RE = re.compile(r"//|/\*|\*")

_RECOMMENDATIONS_BY_TYPE: dict[str, str] = {
    "SQL Injection": "Implement parameterized queries and input validation",
    "Cross-Site Scripting (XSS)": "Add output encoding and Content Security Policy",
    "Command Injection": "Use safe command execution methods and input sanitization",
    "Hardcoded Credentials": "Move sensitive data to environment variables or secure vaults",
}


@dataclass(frozen=True)
class CodeMetrics:
    complexity: float
    maintainability: float


def calculate_metrics(code: str) -> CodeMetrics:
    """Structural complexity (0-100) and maintainability for a code buffer."""
    non_empty = [line for line in code.split("\n") if line.strip()]
    if not non_empty:
        return CodeMetrics(complexity=0.0, maintainability=100.0)

    complexity = 0
    for line in non_empty:
        for indicator in _COMPLEXITY_INDICATORS:
            if indicator.search(line):
                complexity += 1

    avg_line_length = sum(len(line) for line in non_empty) / len(non_empty)
    comment_ratio = len(_COMMENT_RE.findall(code)) / len(non_empty)

    return CodeMetrics(
        complexity=min((complexity / len(non_empty)) * 50, 100.0),
        maintainability=max(100 - avg_line_length * 0.5 - complexity * 0.3 + comment_ratio * 20, 0.0),
    )


class CodeQualityAnalyzer:
    """Score code for security and maintainability without executing it."""

    def __init__(self, catalog: SignatureCatalog | None = None) -> None:
        self._catalog = catalog or SignatureCatalog.default()
        self._matcher = PatternMatcher()

    def analyze(self, code: str) -> CodeQualityAssessment:
        metrics = calculate_metrics(code)
        vulns = self._matcher.match_lines(code, self._catalog.advanced_vulnerabilities)
        security_score = self._security_score(vulns, metrics)
        logger.debug(
            "Code quality: security=%.1f complexity=%.1f maintainability=%.1f vulns=%d",
            security_score,
            metrics.complexity,
            metrics.maintainability,
            len(vulns.findings),
        )
        return CodeQualityAssessment(
            security_score=round(security_score),
            maintainability_score=round(metrics.maintainability),
            complexity_score=round(metrics.complexity),
            vulnerability_risk=self._vulnerability_risk(vulns),
            recommendations=self._recommendations(vulns, metrics),
        )

    @staticmethod
    def _security_score(vulns: MatchResult, metrics: CodeMetrics) -> float:
        score = 100.0
        score -= vulns.count(Level.HIGH) * 25
        score -= vulns.count(Level.MEDIUM) * 10
        score -= max(0.0, (metrics.complexity - 50) * 0.5)
        return max(score, 0.0)

    @staticmethod
    def _vulnerability_risk(vulns: MatchResult) -> Level:
        high = vulns.count(Level.HIGH)
        medium = vulns.count(Level.MEDIUM)
        if high >= 2:
            return Level.HIGH
        if high >= 1 or medium >= 3:
            return Level.MEDIUM
        return Level.LOW

    @staticmethod
    def _recommendations(vulns: MatchResult, metrics: CodeMetrics) -> list[str]:
        found = {f.label for f in vulns.findings}
        recommendations = [rec for vtype, rec in _RECOMMENDATIONS_BY_TYPE.items() if vtype in found]
        if metrics.complexity > 70:
            recommendations.append("Refactor complex functions to improve maintainability")
        if metrics.maintainability < 60:
            recommendations.append("Add documentation and reduce code complexity")
        return recommendations
