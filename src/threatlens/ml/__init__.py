# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Secondary scorers that enrich pattern-based scoring."""

from threatlens.ml.base import KeywordScorer, ScorerOutput, SecondaryScorer
from threatlens.ml.combiner import ScoreCombiner
from threatlens.ml.malware import MalwareAnalyzer
from threatlens.ml.quality import CodeQualityAnalyzer

__all__ = [
    "CodeQualityAnalyzer",
    "KeywordScorer",
    "MalwareAnalyzer",
    "ScoreCombiner",
    "ScorerOutput",
    "SecondaryScorer",
]
