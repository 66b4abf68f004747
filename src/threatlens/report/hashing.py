# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Content digest for report metadata.

The digest is SHA-256 over the UTF-8 encoding of the content, displayed
as a truncated hex prefix. It identifies a scan in a report; it is not
an integrity hash.
"""

from __future__ import annotations

import asyncio
import hashlib

from threatlens.core.exceptions import HashingError


def format_content_hash(hex_digest: str, display_length: int = 16) -> str:
    return f"SHA256: {hex_digest[:display_length]}..."


def _digest(content: str) -> str:
    try:
        data = content.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise HashingError(f"content cannot be encoded for hashing: {exc.reason}") from exc
    return hashlib.sha256(data).hexdigest()


async def compute_content_hash(content: str, display_length: int = 16) -> str:
    """Digest ``content`` off the event loop and return the display form."""
    try:
        hex_digest = await asyncio.to_thread(_digest, content)
    except HashingError:
        raise
    except Exception as exc:
        raise HashingError(f"failed to hash content: {exc}") from exc
    return format_content_hash(hex_digest, display_length)
