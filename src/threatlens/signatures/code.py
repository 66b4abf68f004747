# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Code vulnerability and performance signatures for code scans."""

from __future__ import annotations

from threatlens.core.constants import FindingCategory, Level
from threatlens.signatures.base import Signature, regex

_HIGH = {"severity": Level.HIGH, "category": FindingCategory.VULNERABILITY}
_MEDIUM = {"severity": Level.MEDIUM, "category": FindingCategory.VULNERABILITY}

# Vulnerability tables are matched one line at a time. Source-to-sink rules
# anchor at the line start and commit to the first keyword and operator
# atomically, so a line without a sink fails in a single pass.
CODE_VULNERABILITIES: tuple[Signature, ...] = (
    regex(
        "TL-VULN-001",
        r"^(?>.*?(?:SELECT|INSERT|UPDATE|DELETE))(?>.*?(?:\+|\|\|)).*?(?:input|request|params)",
        "SQL Injection vulnerability detected",
        description="Database queries are constructed using string concatenation without parameterization",
        **_HIGH,
    ),
    regex(
        "TL-VULN-002",
        r"^(?>.*?innerHTML\s*=).*?(?:input|request|params)",
        "Cross-Site Scripting (XSS) vulnerability",
        description="User input is directly rendered without sanitization",
        **_HIGH,
    ),
    regex(
        "TL-VULN-003",
        r"""password\s*=\s*["'][^"']{1,8}["']""",
        "Weak password detected",
        description="Hardcoded password appears to be weak or too short",
        **_MEDIUM,
    ),
    regex(
        "TL-VULN-004",
        r"""(?:api_key|secret_key|private_key)\s*=\s*["'][^"']+["']""",
        "Hardcoded credentials detected",
        description="Sensitive information is hardcoded in the source code",
        **_HIGH,
    ),
    regex(
        "TL-VULN-005",
        r"^(?>.*?system\().*?\$_(?:GET|POST|REQUEST)",
        "Command injection vulnerability",
        description="System commands are executed with user-controlled input",
        **_HIGH,
    ),
)

# Patterns consumed by the code-quality secondary scorer. The label is the
# vulnerability type, the description its impact.
ADVANCED_VULNERABILITIES: tuple[Signature, ...] = (
    regex(
        "TL-AVULN-001",
        r"^(?>.*?(?:SELECT|INSERT|UPDATE|DELETE))(?>.*?(?:\+|\|\|)).*?(?:input|request|params|\$_GET|\$_POST)",
        "SQL Injection",
        description="Database compromise possible",
        **_HIGH,
    ),
    regex(
        "TL-AVULN-002",
        r"^(?>.*?innerHTML\s*=).*?(?:input|request|params|\$_GET|\$_POST)",
        "Cross-Site Scripting (XSS)",
        description="Client-side code execution",
        **_HIGH,
    ),
    regex(
        "TL-AVULN-003",
        r"^(?>.*?(?:system|exec)\().*?\$_(?:GET|POST|REQUEST)",
        "Command Injection",
        description="Server compromise possible",
        **_HIGH,
    ),
    regex(
        "TL-AVULN-004",
        r"""(?:api_key|secret_key|private_key|password)\s*=\s*["'][^"']+["']""",
        "Hardcoded Credentials",
        description="Credential exposure risk",
        **_MEDIUM,
    ),
    regex(
        "TL-AVULN-005",
        r"eval\s*\(|Function\s*\(.*\)",
        "Code Injection",
        description="Dynamic code execution risk",
        **_MEDIUM,
    ),
)

# Weight is the score penalty applied when the pattern is present.
PERFORMANCE_PATTERNS: tuple[Signature, ...] = (
    regex("TL-PERF-001", r"for(?>.*?for).*?for", "Nested loops detected - O(n³) complexity risk", weight=20),
    regex(
        "TL-PERF-002",
        r"while\s*\(true\)|for\s*\(\s*;\s*;\s*\)",
        "Infinite loop patterns detected",
        weight=30,
    ),
    regex(
        "TL-PERF-003",
        r"setTimeout|setInterval",
        "Timer-based operations may impact performance",
        weight=10,
    ),
    regex(
        "TL-PERF-004",
        r"fetch|XMLHttpRequest|axios",
        "Network requests without proper error handling",
        weight=15,
    ),
)
