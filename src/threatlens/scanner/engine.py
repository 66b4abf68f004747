# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Scan engine: runs the file and code pipelines end to end."""

from __future__ import annotations

import asyncio
import logging
import random
import time

from threatlens.core.config import Settings, get_settings
from threatlens.core.constants import MALICIOUS_THREAT_BONUS, Level
from threatlens.core.exceptions import ContentTooLargeError
from threatlens.ml.base import SecondaryScorer
from threatlens.ml.malware import MalwareAnalyzer
from threatlens.ml.quality import CodeQualityAnalyzer
from threatlens.models.assessment import AdvancedMetrics, CodeQualityAssessment, MalwareAssessment
from threatlens.models.scan import AnalysisResult, CodeAnalysisResult, CodeInput, FileInput
from threatlens.report.builder import Clock, ReportBuilder, byte_length
from threatlens.report.hashing import compute_content_hash
from threatlens.scanner.heuristics import (
    analyze_behavior,
    analyze_performance,
    obfuscation_level,
    shannon_entropy,
)
from threatlens.scanner.matcher import PatternMatcher
from threatlens.scanner.severity import (
    RandomBandSampler,
    ScoreSampler,
    classify_code,
    classify_code_quality,
    classify_file,
    escalate_file,
    security_score_for,
)
from threatlens.signatures.catalog import SignatureCatalog

logger = logging.getLogger("threatlens.scanner.engine")


class ScanEngine:
    """Pattern and entropy scanning with optional secondary enrichment.

    The engine holds only read-only collaborators, so one instance may
    serve concurrent scans.

    Args:
        catalog: Signature tables. Defaults to the shipped catalog.
        settings: Runtime settings. Defaults to ``get_settings()``.
        scorer: Classifier used by the malware secondary scorer.
        use_secondary: Override ``settings.secondary_enabled``.
        sampler: Picks the numeric security score within a tier band.
        clock: Supplies report timestamps.
    """

    def __init__(
        self,
        catalog: SignatureCatalog | None = None,
        settings: Settings | None = None,
        scorer: SecondaryScorer | None = None,
        *,
        use_secondary: bool | None = None,
        sampler: ScoreSampler | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._catalog = catalog or SignatureCatalog.default()
        self._use_secondary = (
            self._settings.secondary_enabled if use_secondary is None else use_secondary
        )
        self._sampler = sampler or RandomBandSampler(random.Random(self._settings.score_seed))
        self._matcher = PatternMatcher()
        self._builder = ReportBuilder(clock=clock)
        self._malware_analyzer = MalwareAnalyzer(
            self._catalog,
            scorer,
            timeout=self._settings.secondary_timeout,
            entropy_threshold=self._settings.entropy_threshold,
        )
        self._quality_analyzer = CodeQualityAnalyzer(self._catalog)

    @property
    def catalog(self) -> SignatureCatalog:
        return self._catalog

    def _check_size(self, content: str, label: str) -> None:
        limit = self._settings.scan_max_content_bytes
        size = byte_length(content)
        if size > limit:
            raise ContentTooLargeError(f"{label} is {size} bytes, limit is {limit}")

    async def _hash(self, content: str) -> str:
        return await compute_content_hash(content, self._settings.hash_display_length)

    # ------------------------------------------------------------------
    # File pipeline
    # ------------------------------------------------------------------

    async def scan_file(self, file: FileInput) -> AnalysisResult:
        """Scan an uploaded file.

        Raises:
            ContentTooLargeError: content exceeds ``scan_max_content_bytes``.
            HashingError: the content digest could not be computed.
        """
        self._check_size(file.content, file.name)
        start_time = time.monotonic()
        content = file.content
        logger.info("Scanning file %s", file.name)

        malware = self._matcher.match(content, self._catalog.malware)
        suspicious = self._matcher.match(content, self._catalog.suspicious)
        extension = self._matcher.check_extension(file.name, self._catalog.suspicious_extensions)

        findings = list(malware.findings)
        if extension is not None:
            findings.append(extension)
        findings.extend(suspicious.findings)

        threat_count = malware.signature_count + (1 if extension is not None else 0)
        warning_count = suspicious.signature_count
        security_level = classify_file(threat_count, warning_count)

        advanced_metrics = AdvancedMetrics(
            entropy_score=round(shannon_entropy(content), 1),
            obfuscation_level=obfuscation_level(content, self._catalog.obfuscation),
            behavior_analysis=analyze_behavior(content, self._catalog.behaviors),
        )

        # Hashing and secondary scoring are independent of each other.
        content_hash, assessment = await asyncio.gather(
            self._hash(content),
            self._assess_malware(content, file.name),
            return_exceptions=True,
        )
        if isinstance(content_hash, BaseException):
            raise content_hash
        if isinstance(assessment, BaseException):
            raise assessment

        errors: list[str] = []
        if assessment is not None:
            security_level = escalate_file(security_level, threat_count, assessment)
            if assessment.is_malicious:
                threat_count += MALICIOUS_THREAT_BONUS
            if assessment.secondary_error:
                errors.append(assessment.secondary_error)

        result = self._builder.build_file_report(
            name=file.name,
            content=content,
            size=file.size,
            mime_type=file.mime_type,
            content_hash=content_hash,
            security_level=security_level,
            threat_count=threat_count,
            warning_count=warning_count,
            findings=findings,
            advanced_metrics=advanced_metrics,
            malware_assessment=assessment,
            errors=errors,
        )
        logger.info(
            "File scan %s complete: security=%s threats=%d warnings=%d duration=%dms",
            file.name,
            result.security_level,
            result.threat_count,
            result.warning_count,
            int((time.monotonic() - start_time) * 1000),
        )
        return result

    async def _assess_malware(self, content: str, filename: str) -> MalwareAssessment | None:
        if not self._use_secondary:
            return None
        try:
            return await self._malware_analyzer.analyze(content, filename)
        except Exception as exc:
            logger.warning("Malware assessment failed for %s: %s", filename, exc)
            return None

    # ------------------------------------------------------------------
    # Code pipeline
    # ------------------------------------------------------------------

    async def scan_code(self, code: str | CodeInput) -> CodeAnalysisResult:
        """Scan pasted source code.

        Raises:
            ContentTooLargeError: code exceeds ``scan_max_content_bytes``.
            HashingError: the content digest could not be computed.
        """
        content = code.content if isinstance(code, CodeInput) else code
        self._check_size(content, "code")
        start_time = time.monotonic()
        logger.info("Scanning %d lines of code", content.count("\n") + 1)

        vulns = self._matcher.match_lines(content, self._catalog.vulnerabilities)
        threats = vulns.count(Level.HIGH)
        warnings = vulns.count(Level.MEDIUM)
        basic_level = classify_code(threats, warnings)
        security_score = security_score_for(basic_level, self._sampler)

        errors: list[str] = []
        quality = self._assess_quality(content, errors)
        security_level = classify_code_quality(quality) if quality is not None else basic_level

        content_hash = await self._hash(content)

        result = self._builder.build_code_report(
            code=content,
            content_hash=content_hash,
            security_level=security_level,
            security_score=security_score,
            findings=vulns.findings,
            vulnerability_descriptions={
                sig.rule_id: sig.description for sig in self._catalog.vulnerabilities
            },
            obfuscation_level=obfuscation_level(content, self._catalog.obfuscation),
            code_quality=quality,
            performance_impact=analyze_performance(content, self._catalog.performance),
            errors=errors,
        )
        logger.info(
            "Code scan complete: security=%s threats=%d warnings=%d score=%d duration=%dms",
            result.security_level,
            threats,
            warnings,
            security_score,
            int((time.monotonic() - start_time) * 1000),
        )
        return result

    def _assess_quality(self, code: str, errors: list[str]) -> CodeQualityAssessment | None:
        if not self._use_secondary:
            return None
        try:
            return self._quality_analyzer.analyze(code)
        except Exception as exc:
            error = f"code quality scorer failed: {exc}"
            logger.warning("%s; using basic classification", error)
            errors.append(error)
            return None
