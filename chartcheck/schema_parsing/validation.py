"""
Schema validation for assertion files.

This module contains the validation logic that checks raw parsed YAML
against the assertion file schema and reports errors with helpful messages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..validators import NegatedExistencePolicy
from .models import AssertType


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "asserts[0].containsDocument.kind"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of schema validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Schema validation passed"
        lines = [f"Schema validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Schema Validator
# ─────────────────────────────────────────────────────────────────────────────

class SchemaValidator:
    """Validates raw parsed YAML against the assertion file schema."""

    REQUIRED_TOP_LEVEL = {"version", "name", "asserts"}
    OPTIONAL_TOP_LEVEL = {"settings"}
    VALID_SETTINGS = {"negated_existence"}
    VALID_POLICIES = {p.value for p in NegatedExistencePolicy}
    VALID_ASSERT_TYPES = {t.value for t in AssertType}
    ASSERT_MODIFIERS = {"not", "documentIndex"}
    CONTAINS_DOCUMENT_REQUIRED = {"kind", "apiVersion"}
    CONTAINS_DOCUMENT_OPTIONAL = {"name", "namespace", "any"}

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_version()
        self._validate_name()
        self._validate_settings()
        self._validate_asserts()

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        known = self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL
        missing = self.REQUIRED_TOP_LEVEL - set(self.data)
        unknown = [key for key in self.data if key not in known]

        for key in sorted(missing):
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your assertion file"
            )

        for key in unknown:
            self.result.add_error(
                str(key),
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(known))}"
            )

    def _validate_version(self) -> None:
        version = self.data.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            self.result.add_error(
                "version",
                "Must be an integer",
                value=version,
                suggestion="Use 'version: 1'"
            )
        elif version < 1:
            self.result.add_error(
                "version",
                "Must be >= 1",
                value=version
            )

    def _validate_name(self) -> None:
        name = self.data.get("name")
        if not isinstance(name, str):
            self.result.add_error(
                "name",
                "Must be a string",
                value=name
            )
        elif not name.strip():
            self.result.add_error(
                "name",
                "Cannot be empty",
                suggestion="Provide a descriptive name for your assertions"
            )

    def _validate_settings(self) -> None:
        if "settings" not in self.data:
            return

        settings = self.data["settings"]
        if not isinstance(settings, dict):
            self.result.add_error(
                "settings",
                "Must be an object",
                value=settings
            )
            return

        for key in [k for k in settings if k not in self.VALID_SETTINGS]:
            self.result.add_error(
                f"settings.{key}",
                "Unknown setting",
                suggestion=f"Valid settings: {', '.join(sorted(self.VALID_SETTINGS))}"
            )

        if "negated_existence" in settings:
            policy = settings["negated_existence"]
            if not isinstance(policy, str) or policy not in self.VALID_POLICIES:
                self.result.add_error(
                    "settings.negated_existence",
                    "Invalid policy",
                    value=policy,
                    suggestion=f"Valid policies: {', '.join(sorted(self.VALID_POLICIES))}"
                )

    def _validate_asserts(self) -> None:
        asserts = self.data.get("asserts")
        if not isinstance(asserts, list):
            self.result.add_error(
                "asserts",
                "Must be a list",
                value=asserts
            )
            return

        if not asserts:
            self.result.add_error(
                "asserts",
                "Must contain at least one assertion",
                suggestion="Add a '- containsDocument:' entry"
            )
            return

        for i, entry in enumerate(asserts):
            self._validate_assert(entry, f"asserts[{i}]")

    def _validate_assert(self, entry: Any, path: str) -> None:
        if not isinstance(entry, dict):
            self.result.add_error(
                path,
                "Must be an object",
                value=entry
            )
            return

        types = [k for k in entry if k not in self.ASSERT_MODIFIERS]
        known = [k for k in types if k in self.VALID_ASSERT_TYPES]
        for key in types:
            if key not in self.VALID_ASSERT_TYPES:
                self.result.add_error(
                    f"{path}.{key}",
                    "Unknown assertion type",
                    suggestion=f"Valid types: {', '.join(sorted(self.VALID_ASSERT_TYPES))}"
                )

        if not known:
            if not types:
                self.result.add_error(
                    path,
                    "Missing assertion type",
                    suggestion="Add 'containsDocument:' to the entry"
                )
        elif len(known) > 1:
            self.result.add_error(
                path,
                "Only one assertion type allowed per entry",
                value=known
            )
        else:
            self._validate_contains_document(entry[known[0]], f"{path}.{known[0]}")

        if "not" in entry and not isinstance(entry["not"], bool):
            self.result.add_error(
                f"{path}.not",
                "Must be a boolean",
                value=entry["not"]
            )

        if "documentIndex" in entry:
            index = entry["documentIndex"]
            if not isinstance(index, int) or isinstance(index, bool):
                self.result.add_error(
                    f"{path}.documentIndex",
                    "Must be an integer",
                    value=index
                )
            elif index < -1:
                self.result.add_error(
                    f"{path}.documentIndex",
                    "Must be >= -1",
                    value=index,
                    suggestion="Use -1 (or omit it) to check every document"
                )

    def _validate_contains_document(self, params: Any, path: str) -> None:
        if not isinstance(params, dict):
            self.result.add_error(
                path,
                "Must be an object",
                value=params,
                suggestion="Provide at least 'kind' and 'apiVersion'"
            )
            return

        keys = set(params)
        for key in sorted(self.CONTAINS_DOCUMENT_REQUIRED - keys):
            self.result.add_error(
                f"{path}.{key}",
                "Required field is missing"
            )

        allowed = self.CONTAINS_DOCUMENT_REQUIRED | self.CONTAINS_DOCUMENT_OPTIONAL
        for key in [k for k in params if k not in allowed]:
            self.result.add_error(
                f"{path}.{key}",
                "Unknown field",
                suggestion=f"Valid fields: {', '.join(sorted(allowed))}"
            )

        for key in sorted(self.CONTAINS_DOCUMENT_REQUIRED & keys):
            value = params[key]
            if not isinstance(value, str):
                self.result.add_error(
                    f"{path}.{key}",
                    "Must be a string",
                    value=value
                )
            elif not value.strip():
                self.result.add_error(
                    f"{path}.{key}",
                    "Cannot be empty"
                )

        for key in ("name", "namespace"):
            if key in params and params[key] is not None and not isinstance(params[key], str):
                self.result.add_error(
                    f"{path}.{key}",
                    "Must be a string",
                    value=params[key]
                )

        if "any" in params and not isinstance(params["any"], bool):
            self.result.add_error(
                f"{path}.any",
                "Must be a boolean",
                value=params["any"]
            )
