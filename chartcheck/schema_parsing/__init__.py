"""
Schema Parsing for Assertion Files

This package provides tools for parsing, validating, and working with
YAML files that declare containment assertions.

Usage:
    from chartcheck.schema_parsing import load_assertions, validate_assertions_yaml

    # Load from file
    suite, result = load_assertions("tests/service_asserts.yaml")
    if not result.is_valid:
        print(result)

    # Or validate from string
    suite, result = validate_assertions_yaml(yaml_string)
"""

# Public API
from .loader import load_assertions, validate_assertions_yaml

# Models (for type hints and isinstance checks)
from .models import (
    Assertion,
    AssertionSuite,
    AssertType,
    ContainsDocumentCheck,
    Settings,
)

# Validation (for custom validation if needed)
from .validation import SchemaValidator, ValidationError, ValidationResult

__all__ = [
    # Loader functions
    "load_assertions",
    "validate_assertions_yaml",
    # Models
    "AssertionSuite",
    "Assertion",
    "AssertType",
    "ContainsDocumentCheck",
    "Settings",
    # Validation
    "ValidationResult",
    "ValidationError",
    "SchemaValidator",
]
