# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Scanning: pattern matching, heuristics, classification, orchestration."""
