# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Fixed suggestion catalogs and lookup tables used in reports."""

from __future__ import annotations

from threatlens.core.constants import Level
from threatlens.models.finding import Suggestion

# Ordered by priority; reports take a prefix.
FILE_SUGGESTIONS: tuple[str, ...] = (
    "Run in isolated sandbox environment before execution",
    "Verify digital signature from trusted publisher",
    "Check file against updated antivirus databases",
    "Monitor network traffic during execution",
    "Implement application whitelisting policies",
    "Use static analysis tools for deeper inspection",
    "Quarantine file until thorough analysis is complete",
    "Scan with multiple antivirus engines",
    "Check file reputation in threat intelligence databases",
)

CODE_SUGGESTIONS: tuple[Suggestion, ...] = (
    Suggestion(
        priority=Level.HIGH,
        title="Implement parameterized queries",
        description="Use prepared statements to prevent SQL injection attacks",
    ),
    Suggestion(
        priority=Level.HIGH,
        title="Add input sanitization",
        description="Sanitize and validate all user inputs before processing",
    ),
    Suggestion(
        priority=Level.MEDIUM,
        title="Implement CSRF protection",
        description="Add CSRF tokens to protect against cross-site request forgery",
    ),
    Suggestion(
        priority=Level.HIGH,
        title="Use secure password hashing",
        description="Implement bcrypt or Argon2 for password hashing",
    ),
    Suggestion(
        priority=Level.MEDIUM,
        title="Add proper error handling",
        description="Implement comprehensive error handling without exposing sensitive information",
    ),
    Suggestion(
        priority=Level.LOW,
        title="Use environment variables",
        description="Store sensitive configuration in environment variables",
    ),
)

MIME_TYPES: dict[str, str] = {
    "exe": "application/x-executable",
    "zip": "application/zip",
    "js": "application/javascript",
    "py": "text/x-python",
    "java": "text/x-java",
    "cpp": "text/x-c++src",
    "c": "text/x-csrc",
    "php": "application/x-php",
    "dll": "application/x-msdownload",
    "msi": "application/x-msi",
}

# (language, markers, require_all), checked in order
LANGUAGE_MARKERS: tuple[tuple[str, tuple[str, ...], bool], ...] = (
    ("Python", ("import ", "def "), True),
    ("JavaScript", ("function ", "const ", "let "), False),
    ("Java", ("public class ", "import java"), False),
    ("C/C++", ("#include", "int main"), False),
    ("PHP", ("<?php",), False),
)
UNKNOWN_LANGUAGE = "Auto-detected"
