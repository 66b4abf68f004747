# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Combiner: blends pattern, secondary, and anomaly scores."""

from __future__ import annotations

import logging
import math

from threatlens.core.constants import (
    COMBINE_WEIGHT_ANOMALY,
    COMBINE_WEIGHT_PATTERN,
    COMBINE_WEIGHT_SECONDARY,
)
from threatlens.core.exceptions import ConfigurationError

logger = logging.getLogger("threatlens.ml.combiner")


def _clamp(value: float) -> float:
    return max(0.0, min(float(value), 1.0))


class ScoreCombiner:
    """Weighted sum of three normalized scores.

    Parameters
    ----------
    pattern_weight, secondary_weight, anomaly_weight:
        Non-negative weights that must sum to 1.0.
    """

    def __init__(
        self,
        pattern_weight: float = COMBINE_WEIGHT_PATTERN,
        secondary_weight: float = COMBINE_WEIGHT_SECONDARY,
        anomaly_weight: float = COMBINE_WEIGHT_ANOMALY,
    ) -> None:
        weights = (pattern_weight, secondary_weight, anomaly_weight)
        if any(w < 0.0 for w in weights):
            msg = f"weights must be non-negative, got {weights}"
            raise ConfigurationError(msg)
        if not math.isclose(sum(weights), 1.0, abs_tol=1e-9):
            msg = f"weights must sum to 1.0, got {sum(weights):.4f}"
            raise ConfigurationError(msg)
        self.pattern_weight = pattern_weight
        self.secondary_weight = secondary_weight
        self.anomaly_weight = anomaly_weight

    def combine(
        self,
        pattern_score: float,
        secondary_score: float,
        anomaly_score: float,
    ) -> float:
        """Return the combined score in [0.0, 1.0].

        Inputs are clamped to [0.0, 1.0] before weighting.
        """
        combined = (
            self.pattern_weight * _clamp(pattern_score)
            + self.secondary_weight * _clamp(secondary_score)
            + self.anomaly_weight * _clamp(anomaly_score)
        )
        logger.debug(
            "Combine: pattern=%.3f secondary=%.3f anomaly=%.3f -> %.3f",
            pattern_score,
            secondary_score,
            anomaly_score,
            combined,
        )
        return _clamp(combined)
