# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Secondary scorer interface and the deterministic keyword default."""

from __future__ import annotations

import re
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class ScorerOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float = Field(ge=0.0, le=1.0)
    confidence: float = Field(ge=0.0, le=1.0)


@runtime_checkable
class SecondaryScorer(Protocol):
    """Anything that can score content for maliciousness.

    Implementations may be backed by a trained classifier or a remote
    service. They are allowed to fail or hang; the caller applies a
    timeout and falls back to pattern-only scoring.
    """

    async def score(self, content: str) -> ScorerOutput: ...


class KeywordScorer:
    """Score by counting well-known malware vocabulary."""

    KEYWORDS: tuple[str, ...] = ("malware", "virus", "trojan", "exploit", "payload")

    def __init__(self, keywords: tuple[str, ...] | None = None) -> None:
        words = keywords or self.KEYWORDS
        self._pattern = re.compile("|".join(re.escape(w) for w in words), re.IGNORECASE)

    async def score(self, content: str) -> ScorerOutput:
        count = sum(1 for _ in self._pattern.finditer(content))
        return ScorerOutput(
            score=min(count * 0.2, 1.0),
            confidence=min(count * 0.15, 0.9),
        )
