# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Public SDK interface for embedding threatlens in other tools.

Usage::

    from threatlens import scan_code_sync, scan_path

    # Synchronous (blocking)
    result = scan_code_sync(source)
    print(result.security_level, result.security_score)

    # Async
    result = await scan_path("payload.exe", use_secondary=False)
"""

from __future__ import annotations

import asyncio
import logging
import random
from pathlib import Path

from threatlens.core.config import Settings, get_settings
from threatlens.core.exceptions import ContentTooLargeError, UnreadableContentError
from threatlens.ml.base import SecondaryScorer
from threatlens.models.scan import AnalysisResult, CodeAnalysisResult, FileInput
from threatlens.scanner.engine import ScanEngine
from threatlens.scanner.severity import RandomBandSampler

logger = logging.getLogger("threatlens.sdk")


def _build_engine(
    *,
    settings: Settings | None = None,
    use_secondary: bool = True,
    scorer: SecondaryScorer | None = None,
    seed: int | None = None,
) -> ScanEngine:
    """Construct a scan engine from settings and per-call overrides.

    ``seed`` takes precedence over ``settings.score_seed``.
    """
    settings = settings or get_settings()
    sampler = RandomBandSampler(random.Random(seed)) if seed is not None else None
    return ScanEngine(
        settings=settings,
        scorer=scorer,
        use_secondary=use_secondary and settings.secondary_enabled,
        sampler=sampler,
    )


def read_file_input(path: str | Path, *, mime_type: str | None = None, settings: Settings | None = None) -> FileInput:
    """Read a file from disk into a :class:`FileInput`.

    Raises:
        ContentTooLargeError: the file exceeds ``scan_max_content_bytes``.
        UnreadableContentError: the file is missing, unreadable, or not UTF-8 text.
    """
    settings = settings or get_settings()
    path = Path(path)
    try:
        size = path.stat().st_size
        if size > settings.scan_max_content_bytes:
            raise ContentTooLargeError(
                f"{path} is {size} bytes, limit is {settings.scan_max_content_bytes}"
            )
        data = path.read_bytes()
    except OSError as exc:
        raise UnreadableContentError(f"cannot read {path}: {exc}") from exc
    return FileInput.from_bytes(path.name, data, mime_type=mime_type)


# ---------------------------------------------------------------------------
# Public async API
# ---------------------------------------------------------------------------


async def scan_file(
    file: FileInput,
    *,
    use_secondary: bool = True,
    scorer: SecondaryScorer | None = None,
) -> AnalysisResult:
    """Scan an uploaded file and return an :class:`AnalysisResult`.

    Parameters
    ----------
    file:
        Name, content, and optional size and MIME type of the upload.
    use_secondary:
        Set ``False`` to skip the malware secondary scorer.
    scorer:
        Classifier consulted by the secondary scorer. Defaults to the
        keyword scorer.
    """
    engine = _build_engine(use_secondary=use_secondary, scorer=scorer)
    return await engine.scan_file(file)


async def scan_bytes(
    name: str,
    data: bytes,
    *,
    mime_type: str | None = None,
    use_secondary: bool = True,
    scorer: SecondaryScorer | None = None,
) -> AnalysisResult:
    """Decode ``data`` as UTF-8 and scan it as a file named ``name``."""
    file = FileInput.from_bytes(name, data, mime_type=mime_type)
    return await scan_file(file, use_secondary=use_secondary, scorer=scorer)


async def scan_path(
    path: str | Path,
    *,
    mime_type: str | None = None,
    use_secondary: bool = True,
    scorer: SecondaryScorer | None = None,
) -> AnalysisResult:
    """Read and scan a file from disk."""
    file = read_file_input(path, mime_type=mime_type)
    return await scan_file(file, use_secondary=use_secondary, scorer=scorer)


async def scan_code(
    code: str,
    *,
    use_secondary: bool = True,
    seed: int | None = None,
) -> CodeAnalysisResult:
    """Scan pasted source code and return a :class:`CodeAnalysisResult`.

    Parameters
    ----------
    code:
        The source code to scan.
    use_secondary:
        Set ``False`` to skip the code-quality scorer; the basic
        classification is then final.
    seed:
        Seed for sampling the numeric security score within its band.
    """
    engine = _build_engine(use_secondary=use_secondary, seed=seed)
    return await engine.scan_code(code)


# ---------------------------------------------------------------------------
# Synchronous wrappers
# ---------------------------------------------------------------------------


def scan_file_sync(file: FileInput, **kwargs: object) -> AnalysisResult:
    """Blocking wrapper around :func:`scan_file`."""
    return asyncio.run(scan_file(file, **kwargs))  # type: ignore[arg-type]


def scan_path_sync(path: str | Path, **kwargs: object) -> AnalysisResult:
    """Blocking wrapper around :func:`scan_path`."""
    return asyncio.run(scan_path(path, **kwargs))  # type: ignore[arg-type]


def scan_code_sync(code: str, **kwargs: object) -> CodeAnalysisResult:
    """Blocking wrapper around :func:`scan_code`."""
    return asyncio.run(scan_code(code, **kwargs))  # type: ignore[arg-type]
