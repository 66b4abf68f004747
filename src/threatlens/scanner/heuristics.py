# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Entropy, obfuscation, behavior, and performance heuristics."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable

from threatlens.core.constants import OBFUSCATION_HIGH, OBFUSCATION_MEDIUM, Level
from threatlens.models.assessment import PerformanceImpact
from threatlens.scanner.matcher import PatternMatcher
from threatlens.signatures.base import Signature

_matcher = PatternMatcher()


def shannon_entropy(content: str) -> float:
    """Compute Shannon entropy of the given text in bits per character.

    Empty content has entropy 0.
    """
    if not content:
        return 0.0
    freq = Counter(content)
    length = len(content)
    entropy = 0.0
    for count in freq.values():
        p = count / length
        entropy -= p * math.log2(p)
    return entropy


def obfuscation_score(content: str, indicators: Iterable[Signature]) -> float:
    """Weighted sum of indicator match counts."""
    return _matcher.match(content, indicators).score


def obfuscation_level(content: str, indicators: Iterable[Signature]) -> Level:
    score = obfuscation_score(content, indicators)
    if score > OBFUSCATION_HIGH:
        return Level.HIGH
    if score > OBFUSCATION_MEDIUM:
        return Level.MEDIUM
    return Level.LOW


def analyze_behavior(content: str, patterns: Iterable[Signature]) -> list[str]:
    """Labels of every behavior pattern present in the content."""
    return [sig.label for sig in patterns if sig.pattern.search(content)]


def analyze_performance(code: str, patterns: Iterable[Signature]) -> PerformanceImpact:
    """Start at 100 and subtract each present anti-pattern's penalty."""
    bottlenecks: list[str] = []
    score = 100.0
    for sig in patterns:
        if sig.pattern.search(code):
            bottlenecks.append(sig.label)
            score -= sig.weight
    return PerformanceImpact(score=int(max(score, 0)), bottlenecks=bottlenecks)
