"""
Typed data structures for assertion files.

This module contains all enums and dataclasses that represent
the internal typed structure of a parsed assertion file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..validators import NegatedExistencePolicy


# ─────────────────────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────────────────────

class AssertType(str, Enum):
    """Supported assertion types."""
    CONTAINS_DOCUMENT = "containsDocument"


# ─────────────────────────────────────────────────────────────────────────────
# Settings
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Settings:
    """Engine-wide settings for an assertion file."""
    negated_existence: NegatedExistencePolicy = NegatedExistencePolicy.COMPATIBLE


# ─────────────────────────────────────────────────────────────────────────────
# Assertions
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ContainsDocumentCheck:
    """Selector parameters of a containsDocument assertion."""
    kind: str
    api_version: str
    name: str = ""
    namespace: str = ""
    any_match: bool = False


@dataclass
class Assertion:
    """One assertion entry."""
    check: ContainsDocumentCheck
    type: AssertType = AssertType.CONTAINS_DOCUMENT
    negate: bool = False  # 'not' in YAML, renamed to avoid keyword
    document_index: int = -1  # 'documentIndex' in YAML


# ─────────────────────────────────────────────────────────────────────────────
# Suite
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class AssertionSuite:
    """Fully parsed and validated assertion file."""
    version: int
    name: str
    settings: Settings = field(default_factory=Settings)
    asserts: list[Assertion] = field(default_factory=list)
