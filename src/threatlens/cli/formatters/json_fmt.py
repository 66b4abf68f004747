# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""JSON output formatter."""

from __future__ import annotations

import json

from threatlens.models.scan import AnalysisResult, CodeAnalysisResult


def format_json(result: AnalysisResult) -> str:
    """Return the full result as a formatted JSON string."""
    return result.model_dump_json(indent=2)


def format_json_summary(result: AnalysisResult) -> str:
    """Return a compact JSON summary (no findings detail)."""
    data: dict[str, object] = {
        "kind": result.kind,
        "name": result.metadata.name,
        "content_hash": result.metadata.content_hash,
        "security_level": result.security_level,
        "risk_level": result.risk_level,
        "threat_count": result.threat_count,
        "warning_count": result.warning_count,
        "finding_count": len(result.findings),
        "finding_count_by_severity": result.finding_count_by_severity,
    }
    if isinstance(result, CodeAnalysisResult):
        data["security_score"] = result.security_score
        data["detected_language"] = result.detected_language
    return json.dumps(data, indent=2)
