# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Pattern matcher: scan content against signature tables."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from threatlens.core.constants import FindingCategory, Level
from threatlens.models.finding import Finding
from threatlens.signatures.base import Signature
from threatlens.signatures.malware import EXTENSION_WEIGHT

logger = logging.getLogger("threatlens.scanner.matcher")

SNIPPET_MAX_LEN = 200


@dataclass(frozen=True)
class MatchResult:
    """Findings in catalog order plus the weighted score they contribute."""

    findings: tuple[Finding, ...] = field(default_factory=tuple)
    score: float = 0.0

    @property
    def match_count(self) -> int:
        return sum(f.match_count for f in self.findings)

    @property
    def signature_count(self) -> int:
        """Number of distinct signatures that matched at least once."""
        return len({f.rule_id for f in self.findings})

    def labels(self) -> list[str]:
        return list(dict.fromkeys(f.label for f in self.findings))

    def count(self, severity: Level) -> int:
        return sum(1 for f in self.findings if f.severity == severity)


def _finding(sig: Signature, count: int, snippet: str, line_number: int | None = None) -> Finding:
    return Finding(
        rule_id=sig.rule_id,
        label=sig.label,
        severity=sig.severity,
        category=sig.category,
        weight=sig.weight * count,
        match_count=count,
        line_number=line_number,
        snippet=snippet[:SNIPPET_MAX_LEN],
    )


class PatternMatcher:
    """Match signatures globally (file scans) or line by line (code scans)."""

    def match(self, content: str, signatures: Iterable[Signature]) -> MatchResult:
        """Match each signature against the whole content.

        Each signature with at least one match yields one finding whose
        weight is ``signature.weight * match_count``.
        """
        findings: list[Finding] = []
        score = 0.0
        for sig in signatures:
            matches = list(sig.pattern.finditer(content))
            if not matches:
                continue
            count = len(matches)
            score += sig.weight * count
            finding = _finding(sig, count, matches[0].group(0))
            findings.append(finding)
            logger.debug("%s matched %d time(s): %s", sig.rule_id, count, finding.snippet)
        return MatchResult(findings=tuple(findings), score=score)

    def match_lines(self, content: str, signatures: Iterable[Signature]) -> MatchResult:
        """Match each signature against every line, attaching 1-based line numbers.

        Findings are ordered by signature first, then by line. A line that
        matches several signatures yields one finding per signature.
        """
        lines = content.split("\n")
        findings: list[Finding] = []
        score = 0.0
        for sig in signatures:
            for line_num, line in enumerate(lines, 1):
                count = sum(1 for _ in sig.pattern.finditer(line))
                if not count:
                    continue
                score += sig.weight * count
                finding = _finding(sig, count, line.strip(), line_number=line_num)
                findings.append(finding)
                logger.debug("%s matched line %d: %s", sig.rule_id, line_num, finding.snippet)
        return MatchResult(findings=tuple(findings), score=score)

    def check_extension(self, filename: str, extensions: Iterable[str]) -> Finding | None:
        """Return a synthetic finding when ``filename`` ends with a listed extension."""
        lowered = filename.lower()
        for ext in extensions:
            if lowered.endswith(ext):
                return Finding(
                    rule_id="TL-EXT-001",
                    label=f"Suspicious executable file type ({ext})",
                    severity=Level.HIGH,
                    category=FindingCategory.EXTENSION,
                    weight=EXTENSION_WEIGHT,
                    snippet=filename[-SNIPPET_MAX_LEN:],
                )
        return None
