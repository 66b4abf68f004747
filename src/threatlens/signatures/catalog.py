# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""The Signature Catalog: every table the engine scans against."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cache

from threatlens.signatures.base import Signature
from threatlens.signatures.code import (
    ADVANCED_VULNERABILITIES,
    CODE_VULNERABILITIES,
    PERFORMANCE_PATTERNS,
)
from threatlens.signatures.heuristics import BEHAVIOR_PATTERNS, OBFUSCATION_INDICATORS
from threatlens.signatures.malware import (
    ADVANCED_MALWARE_SIGNATURES,
    ANOMALY_PATTERNS,
    EXECUTABLE_EXTENSIONS,
    MALWARE_SIGNATURES,
    SUSPICIOUS_EXTENSIONS,
    SUSPICIOUS_PATTERNS,
)


@dataclass(frozen=True)
class SignatureCatalog:
    """Immutable bundle of signature tables.

    Scans never mutate a catalog, so one instance can be shared by any
    number of concurrent scans. Tests build narrower catalogs with
    :func:`dataclasses.replace`.
    """

    malware: tuple[Signature, ...] = MALWARE_SIGNATURES
    suspicious: tuple[Signature, ...] = SUSPICIOUS_PATTERNS
    vulnerabilities: tuple[Signature, ...] = CODE_VULNERABILITIES
    advanced_malware: tuple[Signature, ...] = ADVANCED_MALWARE_SIGNATURES
    anomalies: tuple[Signature, ...] = ANOMALY_PATTERNS
    advanced_vulnerabilities: tuple[Signature, ...] = ADVANCED_VULNERABILITIES
    obfuscation: tuple[Signature, ...] = OBFUSCATION_INDICATORS
    behaviors: tuple[Signature, ...] = BEHAVIOR_PATTERNS
    performance: tuple[Signature, ...] = PERFORMANCE_PATTERNS
    suspicious_extensions: tuple[str, ...] = SUSPICIOUS_EXTENSIONS
    executable_extensions: tuple[str, ...] = EXECUTABLE_EXTENSIONS
    version: str = field(default="2026.1")

    @classmethod
    def default(cls) -> SignatureCatalog:
        return _default_catalog()

    def rule_ids(self) -> list[str]:
        tables = (
            self.malware,
            self.suspicious,
            self.vulnerabilities,
            self.advanced_malware,
            self.anomalies,
            self.advanced_vulnerabilities,
            self.obfuscation,
            self.behaviors,
            self.performance,
        )
        return [sig.rule_id for table in tables for sig in table]


@cache
def _default_catalog() -> SignatureCatalog:
    return SignatureCatalog()
