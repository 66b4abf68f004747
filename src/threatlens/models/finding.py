# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Finding models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from threatlens.core.constants import FindingCategory, Level


class Finding(BaseModel):
    """One matched signature instance."""

    model_config = ConfigDict(frozen=True)

    rule_id: str = Field(description="Signature that triggered this finding, e.g. TL-MAL-006")
    label: str
    severity: Level
    category: FindingCategory
    weight: float = Field(ge=0.0, description="Signature weight times match count")
    match_count: int = Field(default=1, ge=1)
    line_number: int | None = Field(default=None, ge=1, description="Set for code scans only")
    snippet: str = ""


class DetailedVulnerability(BaseModel):
    """A code vulnerability as presented in a code report."""

    model_config = ConfigDict(frozen=True)

    severity: Level
    title: str
    description: str
    line: int


class Suggestion(BaseModel):
    """A prioritized remediation suggestion."""

    model_config = ConfigDict(frozen=True)

    priority: Level
    title: str
    description: str
