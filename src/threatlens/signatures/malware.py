# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Malware, suspicious-pattern, and anomaly signatures for file scans."""

from __future__ import annotations

from threatlens.core.constants import FindingCategory, Level
from threatlens.signatures.base import Signature, regex, substring

_MAL = {"severity": Level.HIGH, "category": FindingCategory.MALWARE}
_SUS = {"severity": Level.MEDIUM, "category": FindingCategory.SUSPICIOUS}
_ANO = {"severity": Level.MEDIUM, "category": FindingCategory.ANOMALY}

MALWARE_SIGNATURES: tuple[Signature, ...] = (
    substring("TL-MAL-001", "CreateRemoteThread", **_MAL),
    substring("TL-MAL-002", "VirtualAllocEx", **_MAL),
    substring("TL-MAL-003", "WriteProcessMemory", **_MAL),
    substring("TL-MAL-004", "SetWindowsHookEx", **_MAL),
    substring("TL-MAL-005", "keylogger", **_MAL),
    substring("TL-MAL-006", "bitcoin", **_MAL),
    substring("TL-MAL-007", "cryptocurrency", **_MAL),
)

SUSPICIOUS_PATTERNS: tuple[Signature, ...] = (
    substring("TL-SUS-001", "base64", **_SUS),
    substring("TL-SUS-002", "eval(", **_SUS),
    substring("TL-SUS-003", "document.write", **_SUS),
    substring("TL-SUS-004", "innerHTML", **_SUS),
    substring("TL-SUS-005", "system(", **_SUS),
    substring("TL-SUS-006", "exec(", **_SUS),
    substring("TL-SUS-007", "shell_exec", **_SUS),
    substring("TL-SUS-008", "cmd.exe", **_SUS),
    substring("TL-SUS-009", "powershell", **_SUS),
)

# Weighted groups consumed by the malware secondary scorer.
ADVANCED_MALWARE_SIGNATURES: tuple[Signature, ...] = (
    # Advanced persistent threats
    regex(
        "TL-AMAL-001",
        r"CreateRemoteThread|VirtualAllocEx|WriteProcessMemory",
        "Process injection detected",
        weight=0.9,
        **_MAL,
    ),
    regex(
        "TL-AMAL-002",
        r"SetWindowsHookEx|keylogger|GetAsyncKeyState",
        "Keylogging capability detected",
        weight=0.8,
        **_MAL,
    ),
    regex(
        "TL-AMAL-003",
        r"bitcoin|cryptocurrency|mining|wallet\.dat",
        "Cryptocurrency mining/theft detected",
        weight=0.7,
        **_MAL,
    ),
    regex(
        "TL-AMAL-004",
        r"ransomware|encrypt.*files|\.locked|\.encrypted",
        "Ransomware behavior detected",
        weight=0.95,
        **_MAL,
    ),
    # Network threats
    regex(
        "TL-AMAL-005",
        r"botnet|c2|command.*control|backdoor",
        "Botnet/C2 communication detected",
        weight=0.85,
        **_MAL,
    ),
    regex(
        "TL-AMAL-006",
        r"ddos|denial.*service|flood.*attack",
        "DDoS capability detected",
        weight=0.75,
        **_MAL,
    ),
    # Data exfiltration
    regex(
        "TL-AMAL-007",
        r"exfiltrate|steal.*data|send.*password|upload.*file",
        "Data exfiltration detected",
        weight=0.8,
        **_MAL,
    ),
    regex(
        "TL-AMAL-008",
        r"credit.*card|ssn|social.*security|bank.*account",
        "Financial data harvesting detected",
        weight=0.9,
        **_MAL,
    ),
)

ANOMALY_PATTERNS: tuple[Signature, ...] = (
    # Obfuscation
    regex("TL-ANO-001", r"\\x[0-9a-f]{2}", "Hex encoding obfuscation", weight=0.6, **_ANO),
    regex("TL-ANO-002", r"base64|atob|btoa", "Base64 encoding detected", weight=0.4, **_ANO),
    regex(
        "TL-ANO-003",
        r"eval\(|Function\(|setTimeout\(",
        "Dynamic code execution",
        weight=0.7,
        **_ANO,
    ),
    # Suspicious API calls
    regex(
        "TL-ANO-004",
        r"RegCreateKey|RegSetValue|RegDeleteKey",
        "Registry manipulation",
        weight=0.8,
        **_ANO,
    ),
    regex(
        "TL-ANO-005",
        r"CreateFile|WriteFile|DeleteFile",
        "File system manipulation",
        weight=0.5,
        **_ANO,
    ),
    regex(
        "TL-ANO-006",
        r"LoadLibrary|GetProcAddress|VirtualAlloc",
        "Dynamic library loading",
        weight=0.9,
        **_ANO,
    ),
)

SUSPICIOUS_EXTENSIONS: tuple[str, ...] = (".exe", ".scr", ".bat", ".cmd", ".pif")

# The malware scorer also flags DOS .com executables.
EXECUTABLE_EXTENSIONS: tuple[str, ...] = (*SUSPICIOUS_EXTENSIONS, ".com")

EXTENSION_WEIGHT = 1.0
EXECUTABLE_EXTENSION_SCORE = 0.3
