# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Obfuscation indicators and behavioral hints."""

from __future__ import annotations

from threatlens.signatures.base import Signature, regex

OBFUSCATION_INDICATORS: tuple[Signature, ...] = (
    regex("TL-OBF-001", r"\\x[0-9a-f]{2}", "Hex escape sequences", weight=2),
    regex("TL-OBF-002", r"base64|atob|btoa", "Encoding function mentions", weight=1),
    regex("TL-OBF-003", r"eval\(|Function\(", "Dynamic evaluation", weight=3),
    regex("TL-OBF-004", r"[a-zA-Z0-9]{50,}", "Long encoded strings", weight=1),
)

BEHAVIOR_PATTERNS: tuple[Signature, ...] = (
    regex("TL-BEH-001", r"network|http|socket|connect", "Network communication detected"),
    regex("TL-BEH-002", r"file|read|write|delete", "File system operations detected"),
    regex("TL-BEH-003", r"registry|regkey|regedit", "Registry modifications detected"),
    regex("TL-BEH-004", r"process|thread|inject", "Process manipulation detected"),
    regex("TL-BEH-005", r"encrypt|decrypt|crypto", "Cryptographic operations detected"),
)
