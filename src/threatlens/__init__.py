# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""threatlens - Pattern-based malware and vulnerability scanner for files and code."""

__version__ = "0.1.0"

from threatlens.core.exceptions import (
    ContentTooLargeError,
    HashingError,
    ScanError,
    ThreatLensError,
    UnreadableContentError,
)
from threatlens.models.scan import AnalysisResult, CodeAnalysisResult, FileInput
from threatlens.scanner.engine import ScanEngine
from threatlens.sdk import (
    scan_bytes,
    scan_code,
    scan_code_sync,
    scan_file,
    scan_file_sync,
    scan_path,
    scan_path_sync,
)

__all__ = [
    "AnalysisResult",
    "CodeAnalysisResult",
    "ContentTooLargeError",
    "FileInput",
    "HashingError",
    "ScanEngine",
    "ScanError",
    "ThreatLensError",
    "UnreadableContentError",
    "__version__",
    "scan_bytes",
    "scan_code",
    "scan_code_sync",
    "scan_file",
    "scan_file_sync",
    "scan_path",
    "scan_path_sync",
]
