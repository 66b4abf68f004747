# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Integration tests: full file and code scans through the engine."""

from __future__ import annotations

import asyncio
import json
import random

import pytest

from threatlens.core.config import Settings
from threatlens.core.constants import SECURITY_SCORE_BANDS, FindingCategory, InputKind, Level
from threatlens.core.exceptions import ContentTooLargeError, HashingError, UnreadableContentError
from threatlens.models.scan import AnalysisResult, CodeInput, FileInput
from threatlens.scanner.engine import ScanEngine
from threatlens.scanner.severity import FixedBandSampler, RandomBandSampler, risk_for

CLEAN_CODE = "def add(a, b):\n    return a + b\n"

SQL_CODE = (
    "def lookup(userInput):\n"
    '    query = "SELECT * FROM users WHERE id=" + userInput\n'
    "    return db.execute(query)\n"
)

LOW_SECURITY_CODE = (
    'q1 = "SELECT * FROM accounts WHERE id=" + userInput\n'
    'q2 = "DELETE FROM sessions WHERE token=" + request.token\n'
)

INJECTOR = (
    "h = OpenProcess(pid)\n"
    "mem = VirtualAllocEx(h, size)\n"
    "WriteProcessMemory(h, mem, buf)\n"
    "CreateRemoteThread(h, mem)\n"
)


def assert_paired(result: AnalysisResult) -> None:
    assert result.risk_level == risk_for(result.security_level)


# ---------------------------------------------------------------------------
# File scans
# ---------------------------------------------------------------------------


class TestFileScan:
    async def test_clean_file(self, engine, fixed_clock):
        result = await engine.scan_file(FileInput(name="notes.txt", content="Meeting notes for Tuesday"))
        assert result.kind == InputKind.FILE
        assert result.security_level == Level.HIGH
        assert result.risk_level == Level.LOW
        assert result.threat_count == 0
        assert result.warning_count == 0
        assert result.vulnerabilities == []
        assert len(result.suggestions) == 2
        assert result.errors == []
        assert result.metadata.scan_timestamp == fixed_clock()
        assert result.metadata.content_hash.startswith("SHA256: ")
        assert result.malware_assessment is not None
        assert not result.malware_assessment.is_malicious

    async def test_extension_and_bitcoin(self, engine):
        result = await engine.scan_file(FileInput(name="payload.exe", content="Send bitcoin to this wallet"))
        assert result.threat_count >= 2
        assert result.security_level != Level.HIGH
        assert_paired(result)
        assert "Malware signature detected: bitcoin" in result.vulnerabilities
        assert "Suspicious executable file type (.exe)" in result.vulnerabilities

    async def test_findings_ordered_malware_extension_suspicious(self, pattern_engine):
        content = "powershell -enc base64 ... bitcoin"
        result = await pattern_engine.scan_file(FileInput(name="run.bat", content=content))
        categories = [f.category for f in result.findings]
        assert categories == [
            FindingCategory.MALWARE,
            FindingCategory.EXTENSION,
            FindingCategory.SUSPICIOUS,
            FindingCategory.SUSPICIOUS,
        ]
        assert result.threat_count == 2
        assert result.warning_count == 2

    async def test_process_injection_is_low_security(self, engine):
        result = await engine.scan_file(FileInput(name="inject.c", content=INJECTOR))
        assert result.security_level == Level.LOW
        assert result.risk_level == Level.HIGH
        assert result.threat_count >= 3
        assert len(result.suggestions) == 5

    async def test_suspicious_patterns_give_medium(self, pattern_engine):
        content = "eval(atob(x)); document.write(y); el.innerHTML = z"
        result = await pattern_engine.scan_file(FileInput(name="page.html", content=content))
        assert result.threat_count == 0
        assert result.warning_count == 3
        assert result.security_level == Level.MEDIUM
        assert len(result.suggestions) == 3

    async def test_pattern_only_has_no_assessment(self, pattern_engine):
        result = await pattern_engine.scan_file(FileInput(name="payload.exe", content="bitcoin"))
        assert result.malware_assessment is None
        assert result.threat_count == 2
        assert result.security_level == Level.MEDIUM

    async def test_malicious_assessment_adds_threats(self, engine):
        content = INJECTOR + "keylogger ransomware malware trojan exploit payload"
        result = await engine.scan_file(FileInput(name="dropper.exe", content=content))
        assert result.malware_assessment.is_malicious
        # four signatures, the extension, and the malicious bonus
        assert result.threat_count == 4 + 1 + 2
        assert result.security_level == Level.LOW
        assert "Process injection detected" in result.vulnerabilities

    async def test_advanced_metrics(self, engine):
        result = await engine.scan_file(FileInput(name="a.txt", content="aaaa"))
        assert result.advanced_metrics.entropy_score == 0.0
        assert result.advanced_metrics.obfuscation_level == Level.LOW

    async def test_empty_file(self, engine):
        result = await engine.scan_file(FileInput(name="empty.txt", content=""))
        assert result.security_level == Level.HIGH
        assert result.advanced_metrics.entropy_score == 0.0
        assert result.metadata.size == 0

    async def test_size_and_mime_reported(self, engine):
        file = FileInput(name="tool.py", content="print('hi')", size=11)
        result = await engine.scan_file(file)
        assert result.metadata.size == 11
        assert result.metadata.type == "text/x-python"

    async def test_serializes_to_json(self, engine):
        result = await engine.scan_file(FileInput(name="payload.exe", content="bitcoin"))
        data = json.loads(result.model_dump_json())
        assert data["security_level"] in ("HIGH", "MEDIUM", "LOW")
        assert data["metadata"]["name"] == "payload.exe"
        assert "malware_assessment" in data


class TestFileScanDegradation:
    async def test_failing_scorer_falls_back(self, settings, fixed_clock, failing_scorer):
        engine = ScanEngine(settings=settings, scorer=failing_scorer, clock=fixed_clock)
        result = await engine.scan_file(FileInput(name="payload.exe", content="bitcoin"))
        assert result.threat_count == 2
        assert result.security_level == Level.MEDIUM
        assert len(result.errors) == 1
        assert "model weights not loaded" in result.errors[0]
        assert result.malware_assessment.secondary_score == 0.0
        assert result.malware_assessment.secondary_error == result.errors[0]

    async def test_scorer_timeout_falls_back(self, fixed_clock, slow_scorer):
        settings = Settings(secondary_timeout=0.05)
        engine = ScanEngine(settings=settings, scorer=slow_scorer, clock=fixed_clock)
        result = await engine.scan_file(FileInput(name="notes.txt", content="hello"))
        assert result.security_level == Level.HIGH
        assert any("timed out" in e for e in result.errors)

    async def test_analyzer_crash_keeps_basic_classification(self, engine, monkeypatch):
        async def boom(content, filename):
            raise RuntimeError("analyzer crashed")

        monkeypatch.setattr(engine._malware_analyzer, "analyze", boom)
        result = await engine.scan_file(FileInput(name="payload.exe", content="bitcoin"))
        assert result.malware_assessment is None
        assert result.threat_count == 2
        assert result.security_level == Level.MEDIUM

    async def test_hash_failure_propagates(self, engine, monkeypatch):
        async def broken_hash(content, display_length=16):
            raise HashingError("digest unavailable")

        monkeypatch.setattr("threatlens.scanner.engine.compute_content_hash", broken_hash)
        with pytest.raises(HashingError):
            await engine.scan_file(FileInput(name="notes.txt", content="hello"))

    async def test_oversized_file_rejected(self, fixed_clock):
        engine = ScanEngine(settings=Settings(scan_max_content_bytes=10), clock=fixed_clock)
        with pytest.raises(ContentTooLargeError):
            await engine.scan_file(FileInput(name="big.txt", content="x" * 11))

    def test_undecodable_bytes_rejected(self):
        with pytest.raises(UnreadableContentError):
            FileInput.from_bytes("blob.bin", b"\xff\xfe\x00\x01")


# ---------------------------------------------------------------------------
# Code scans
# ---------------------------------------------------------------------------


class TestCodeScan:
    async def test_sql_injection_line(self, engine):
        result = await engine.scan_code(SQL_CODE)
        sql = [f for f in result.findings if f.rule_id == "TL-VULN-001"]
        assert len(sql) == 1
        assert sql[0].severity == Level.HIGH
        assert sql[0].line_number == 2
        assert result.detailed_vulnerabilities[0].line == 2
        assert result.threat_count == 1
        assert result.security_level == Level.MEDIUM
        assert_paired(result)

    async def test_clean_code(self, engine):
        result = await engine.scan_code(CLEAN_CODE)
        assert result.kind == InputKind.CODE
        assert result.security_level == Level.HIGH
        assert result.risk_level == Level.LOW
        assert result.threat_count == 0
        assert result.warning_count == 0
        assert result.detailed_vulnerabilities == []
        low, high = SECURITY_SCORE_BANDS[Level.HIGH]
        assert low <= result.security_score <= high

    async def test_clean_code_pattern_only(self, pattern_engine):
        result = await pattern_engine.scan_code(CLEAN_CODE)
        assert result.security_level == Level.HIGH
        assert result.code_quality is None

    async def test_two_high_findings_give_low(self, engine):
        result = await engine.scan_code(LOW_SECURITY_CODE)
        assert result.security_level == Level.LOW
        assert result.risk_level == Level.HIGH
        assert result.threat_count == 2
        low, high = SECURITY_SCORE_BANDS[Level.LOW]
        assert low <= result.security_score <= high

    async def test_weak_passwords_are_warnings(self, pattern_engine):
        code = "password = 'abc'\nadmin_password = 'xyz'\n"
        result = await pattern_engine.scan_code(code)
        assert result.threat_count == 0
        assert result.warning_count == 2
        assert result.security_level == Level.MEDIUM

    async def test_code_input_model(self, engine):
        result = await engine.scan_code(CodeInput(content=CLEAN_CODE))
        assert result.metadata.name == "User Code"
        assert result.metadata.type == "text/plain"
        assert result.lines_of_code == 3

    async def test_empty_code(self, engine):
        result = await engine.scan_code("")
        assert result.security_level == Level.HIGH
        assert result.lines_of_code == 1
        assert result.detailed_vulnerabilities == []

    async def test_idempotent_with_seeded_sampler(self, settings, fixed_clock):
        results = []
        for _ in range(2):
            engine = ScanEngine(
                settings=settings,
                sampler=RandomBandSampler(random.Random(7)),
                clock=fixed_clock,
            )
            results.append(await engine.scan_code(SQL_CODE))
        first, second = results
        assert first.findings == second.findings
        assert first.detailed_vulnerabilities == second.detailed_vulnerabilities
        assert first.security_level == second.security_level
        assert first.security_score == second.security_score
        assert first.model_dump() == second.model_dump()

    async def test_fixed_sampler(self, settings):
        engine = ScanEngine(settings=settings, sampler=FixedBandSampler(90))
        assert (await engine.scan_code(CLEAN_CODE)).security_score == 90
        assert (await engine.scan_code(LOW_SECURITY_CODE)).security_score == 40

    async def test_suggestions_shrink_with_security(self, engine):
        low = await engine.scan_code(LOW_SECURITY_CODE)
        high = await engine.scan_code(CLEAN_CODE)
        assert low.security_level == Level.LOW
        assert high.security_level == Level.HIGH
        assert len(low.suggestions) >= len(high.suggestions)
        assert len(low.detailed_suggestions) == len(low.suggestions)

    async def test_quality_and_performance_attached(self, engine):
        result = await engine.scan_code("for (;;) { fetch(url) }")
        assert result.code_quality is not None
        assert result.performance_impact.score == 55

    async def test_quality_failure_recorded(self, engine, monkeypatch):
        def boom(code):
            raise RuntimeError("quality model offline")

        monkeypatch.setattr(engine._quality_analyzer, "analyze", boom)
        result = await engine.scan_code(SQL_CODE)
        assert result.code_quality is None
        assert result.security_level == Level.MEDIUM
        assert any("quality model offline" in e for e in result.errors)

    async def test_unhashable_code_raises(self, engine):
        with pytest.raises(HashingError):
            await engine.scan_code("print(1)\ud800")

    async def test_oversized_code_rejected(self):
        engine = ScanEngine(settings=Settings(scan_max_content_bytes=8))
        with pytest.raises(ContentTooLargeError):
            await engine.scan_code("print('too long')")


# ---------------------------------------------------------------------------
# Cross-cutting properties
# ---------------------------------------------------------------------------


class TestProperties:
    @pytest.mark.parametrize(
        "content",
        ["", "hello", "bitcoin", "eval(x) eval(y) eval(z)", INJECTOR, "powershell cmd.exe base64"],
    )
    @pytest.mark.parametrize("name", ["notes.txt", "payload.exe"])
    async def test_file_levels_paired(self, engine, name, content):
        assert_paired(await engine.scan_file(FileInput(name=name, content=content)))

    @pytest.mark.parametrize("code", ["", CLEAN_CODE, SQL_CODE, LOW_SECURITY_CODE, "password = 'x'"])
    async def test_code_levels_paired(self, engine, code):
        result = await engine.scan_code(code)
        assert_paired(result)
        low, high = SECURITY_SCORE_BANDS[Level.LOW][0], SECURITY_SCORE_BANDS[Level.HIGH][1]
        assert low <= result.security_score <= high

    async def test_concurrent_scans_are_independent(self, engine):
        files = [
            FileInput(name="notes.txt", content="hello"),
            FileInput(name="payload.exe", content="bitcoin"),
            FileInput(name="inject.c", content=INJECTOR),
        ]
        results = await asyncio.gather(*(engine.scan_file(f) for f in files))
        assert [r.metadata.name for r in results] == ["notes.txt", "payload.exe", "inject.c"]
        assert [r.security_level for r in results] == [Level.HIGH, Level.MEDIUM, Level.LOW]
