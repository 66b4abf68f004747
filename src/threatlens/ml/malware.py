# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Malware secondary scorer: weighted patterns, anomalies, and an optional classifier."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from threatlens.core.constants import MALICIOUS_THRESHOLD
from threatlens.ml.base import KeywordScorer, ScorerOutput, SecondaryScorer
from threatlens.ml.combiner import ScoreCombiner
from threatlens.models.assessment import AnomalyDetection, MalwareAssessment
from threatlens.scanner.heuristics import shannon_entropy
from threatlens.scanner.matcher import PatternMatcher
from threatlens.signatures.catalog import SignatureCatalog
from threatlens.signatures.malware import EXECUTABLE_EXTENSION_SCORE

logger = logging.getLogger("threatlens.ml.malware")

# Raw weighted totals are divided by these before clamping to [0, 1].
PATTERN_NORMALIZER = 3.0
ANOMALY_NORMALIZER = 5.0
HIGH_ENTROPY_SCORE = 0.8
ANOMALY_RAW_THRESHOLD = 1.0


@dataclass
class _PatternAnalysis:
    score: float
    confidence: float
    threats: list[str] = field(default_factory=list)


@dataclass
class _AnomalyAnalysis:
    score: float
    is_anomaly: bool
    patterns: list[str] = field(default_factory=list)
    threats: list[str] = field(default_factory=list)


class MalwareAnalyzer:
    """Produce a :class:`MalwareAssessment` for file content.

    The injected ``scorer`` is the only step that may fail or hang. It
    runs under ``timeout`` seconds and any failure degrades to a zero
    secondary score with pattern-only confidence.
    """

    def __init__(
        self,
        catalog: SignatureCatalog | None = None,
        scorer: SecondaryScorer | None = None,
        combiner: ScoreCombiner | None = None,
        *,
        timeout: float = 5.0,
        entropy_threshold: float = 7.0,
    ) -> None:
        self._catalog = catalog or SignatureCatalog.default()
        self._scorer: SecondaryScorer = scorer or KeywordScorer()
        self._combiner = combiner or ScoreCombiner()
        self._timeout = timeout
        self._entropy_threshold = entropy_threshold
        self._matcher = PatternMatcher()

    async def analyze(self, content: str, filename: str) -> MalwareAssessment:
        patterns = self._analyze_patterns(content, filename)
        anomalies = self._analyze_anomalies(content)

        secondary, error = await self._run_scorer(content)
        secondary_score = secondary.score if secondary else 0.0
        secondary_confidence = secondary.confidence if secondary else 0.0

        combined = self._combiner.combine(patterns.score, secondary_score, anomalies.score)
        risk_score = round(combined * 100)

        return MalwareAssessment(
            is_malicious=combined > MALICIOUS_THRESHOLD,
            confidence=max(secondary_confidence, patterns.confidence),
            pattern_score=patterns.score,
            secondary_score=secondary_score,
            combined_score=combined,
            risk_score=risk_score,
            security_score=100 - risk_score,
            threats=[*patterns.threats, *anomalies.threats],
            anomaly_detection=AnomalyDetection(
                is_anomaly=anomalies.is_anomaly,
                anomaly_score=anomalies.score,
                suspicious_patterns=anomalies.patterns,
            ),
            secondary_error=error,
        )

    async def _run_scorer(self, content: str) -> tuple[ScorerOutput | None, str | None]:
        try:
            raw = await asyncio.wait_for(self._scorer.score(content), timeout=self._timeout)
            return ScorerOutput.model_validate(raw), None
        except TimeoutError:
            error = f"secondary scorer timed out after {self._timeout:.1f}s"
        except Exception as exc:
            error = f"secondary scorer failed: {exc}"
        logger.warning("%s; falling back to pattern-only scoring", error)
        return None, error

    def _analyze_patterns(self, content: str, filename: str) -> _PatternAnalysis:
        result = self._matcher.match(content, self._catalog.advanced_malware)
        total = result.score
        threats = result.labels()

        if filename.lower().endswith(self._catalog.executable_extensions):
            total += EXECUTABLE_EXTENSION_SCORE
            threats.append("Suspicious executable file type")

        return _PatternAnalysis(
            score=min(total / PATTERN_NORMALIZER, 1.0),
            confidence=min(result.match_count * 0.2, 1.0),
            threats=threats,
        )

    def _analyze_anomalies(self, content: str) -> _AnomalyAnalysis:
        result = self._matcher.match(content, self._catalog.anomalies)
        total = result.score
        patterns = result.labels()
        threats = [f"Anomaly detected: {name}" for name in patterns]

        # High entropy suggests encryption or packing
        if shannon_entropy(content) > self._entropy_threshold:
            total += HIGH_ENTROPY_SCORE
            patterns.append("High entropy content (possible encryption/packing)")
            threats.append("High entropy content detected - possible packed/encrypted malware")

        return _AnomalyAnalysis(
            score=min(total / ANOMALY_NORMALIZER, 1.0),
            is_anomaly=total > ANOMALY_RAW_THRESHOLD,
            patterns=patterns,
            threats=threats,
        )
