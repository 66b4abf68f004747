# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

import asyncio
import logging
import os
import random
from datetime import UTC, datetime

import pytest

from threatlens.core.config import Settings
from threatlens.ml.base import ScorerOutput
from threatlens.scanner.engine import ScanEngine
from threatlens.scanner.severity import RandomBandSampler

FIXED_TIME = datetime(2026, 1, 15, 10, 0, 0, tzinfo=UTC)


class FailingScorer:
    """Secondary scorer that always raises."""

    async def score(self, content: str) -> ScorerOutput:
        raise RuntimeError("model weights not loaded")


class SlowScorer:
    """Secondary scorer that never answers in time."""

    async def score(self, content: str) -> ScorerOutput:
        await asyncio.sleep(10)
        return ScorerOutput(score=1.0, confidence=1.0)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Keep THREATLENS_* variables and a local .env out of every test."""
    for key in list(os.environ):
        if key.startswith("THREATLENS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by CLI runs so they never outlive a test."""
    yield
    logger = logging.getLogger("threatlens")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME


@pytest.fixture
def engine(settings, fixed_clock) -> ScanEngine:
    return ScanEngine(
        settings=settings,
        sampler=RandomBandSampler(random.Random(42)),
        clock=fixed_clock,
    )


@pytest.fixture
def pattern_engine(settings, fixed_clock) -> ScanEngine:
    """Engine with secondary scoring disabled."""
    return ScanEngine(
        settings=settings,
        use_secondary=False,
        sampler=RandomBandSampler(random.Random(42)),
        clock=fixed_clock,
    )


@pytest.fixture
def failing_scorer() -> FailingScorer:
    return FailingScorer()


@pytest.fixture
def slow_scorer() -> SlowScorer:
    return SlowScorer()
