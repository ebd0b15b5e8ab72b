"""
Schema parser for assertion files.

This module converts validated YAML data into typed AssertionSuite structures.
"""

from __future__ import annotations

from typing import Any

from ..validators import NegatedExistencePolicy
from .models import (
    Assertion,
    AssertionSuite,
    AssertType,
    ContainsDocumentCheck,
    Settings,
)


class SchemaParser:
    """Parses and converts validated YAML to typed AssertionSuite structure."""

    def __init__(self, data: dict[str, Any]):
        self.data = data

    def parse(self) -> AssertionSuite:
        """Convert validated data to typed AssertionSuite."""
        return AssertionSuite(
            version=self.data["version"],
            name=self.data["name"],
            settings=self._parse_settings(),
            asserts=self._parse_asserts(),
        )

    def _parse_settings(self) -> Settings:
        settings = self.data.get("settings") or {}
        return Settings(
            negated_existence=NegatedExistencePolicy(
                settings.get("negated_existence", NegatedExistencePolicy.COMPATIBLE.value)
            ),
        )

    def _parse_asserts(self) -> list[Assertion]:
        return [self._parse_assert(entry) for entry in self.data.get("asserts", [])]

    def _parse_assert(self, entry: dict) -> Assertion:
        params = entry[AssertType.CONTAINS_DOCUMENT.value]
        check = ContainsDocumentCheck(
            kind=params["kind"],
            api_version=params["apiVersion"],
            name=params.get("name") or "",  # null in YAML means "any"
            namespace=params.get("namespace") or "",
            any_match=params.get("any", False),
        )
        return Assertion(
            check=check,
            type=AssertType.CONTAINS_DOCUMENT,
            negate=entry.get("not", False),
            document_index=entry.get("documentIndex", -1),
        )
