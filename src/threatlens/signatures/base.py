# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Signature type and constructors."""

from __future__ import annotations

import re
from dataclasses import dataclass

from threatlens.core.constants import FindingCategory, Level


@dataclass(frozen=True)
class Signature:
    """A weighted, case-insensitive pattern tied to a security-relevant label."""

    rule_id: str
    pattern: re.Pattern[str]
    label: str
    weight: float = 1.0
    severity: Level = Level.MEDIUM
    category: FindingCategory = FindingCategory.SUSPICIOUS
    description: str = ""


def regex(rule_id: str, expression: str, label: str, **kwargs: object) -> Signature:
    """Build a signature from a regular expression."""
    return Signature(
        rule_id=rule_id,
        pattern=re.compile(expression, re.IGNORECASE),
        label=label,
        **kwargs,  # type: ignore[arg-type]
    )


def substring(rule_id: str, text: str, label: str | None = None, **kwargs: object) -> Signature:
    """Build a signature matching a literal substring."""
    return Signature(
        rule_id=rule_id,
        pattern=re.compile(re.escape(text), re.IGNORECASE),
        label=label or text,
        **kwargs,  # type: ignore[arg-type]
    )
