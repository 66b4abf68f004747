# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Report builder: metadata, hashing, and human-readable findings."""

from threatlens.report.builder import ReportBuilder
from threatlens.report.hashing import compute_content_hash, format_content_hash

__all__ = ["ReportBuilder", "compute_content_hash", "format_content_hash"]
