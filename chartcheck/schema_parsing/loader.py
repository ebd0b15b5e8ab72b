"""
Assertion file loader.

This module provides the public API for loading and validating
assertion files from disk or YAML strings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import AssertionSuite
from .parser import SchemaParser
from .validation import SchemaValidator, ValidationResult

logger = logging.getLogger(__name__)


def load_assertions(path: str | Path) -> tuple[AssertionSuite | None, ValidationResult]:
    """
    Load and validate an assertion file.

    Args:
        path: Path to the YAML assertion file

    Returns:
        Tuple of (AssertionSuite or None, ValidationResult)
        If validation fails, AssertionSuite will be None.

    Example:
        suite, result = load_assertions("tests/service_asserts.yaml")
        if not result.is_valid:
            print(result)
            sys.exit(1)
    """
    path = Path(path)

    if not path.exists():
        result = ValidationResult()
        result.add_error(
            str(path),
            "File not found",
            suggestion="Check the file path is correct"
        )
        return None, result

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error(
            str(path),
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)"
        )
        return None, result

    suite, result = _validate(data, str(path))
    if suite is not None:
        logger.info(f"Loaded {len(suite.asserts)} assertion(s) from {path}")
    return suite, result


def validate_assertions_yaml(yaml_string: str) -> tuple[AssertionSuite | None, ValidationResult]:
    """
    Validate an assertion file from a YAML string (useful for testing).

    Args:
        yaml_string: YAML content as a string

    Returns:
        Tuple of (AssertionSuite or None, ValidationResult)
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error("yaml", f"Invalid YAML syntax: {e}")
        return None, result

    return _validate(data, "yaml")


def _validate(data: Any, source: str) -> tuple[AssertionSuite | None, ValidationResult]:
    if not isinstance(data, dict):
        result = ValidationResult()
        result.add_error(
            source,
            "Content must be a YAML object (not a list or scalar)",
            value=type(data).__name__
        )
        return None, result

    validator = SchemaValidator(data)
    result = validator.validate()

    if not result.is_valid:
        return None, result

    return SchemaParser(data).parse(), result
