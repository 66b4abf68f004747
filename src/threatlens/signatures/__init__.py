# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Signature Catalog: static weighted pattern tables."""

from threatlens.signatures.base import Signature, regex, substring
from threatlens.signatures.catalog import SignatureCatalog

__all__ = ["Signature", "SignatureCatalog", "regex", "substring"]
