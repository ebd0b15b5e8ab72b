"""
Assertion Engine for Rendered Manifests

This package turns containment checks into reportable results.

Supported assertions:
    - containsDocument: Check that a document set contains (or does not
      contain) a document of a given kind, apiVersion, name and namespace

Usage:
    from chartcheck.assertions import AssertionEngine, assert_contains_document

    docs = load_documents(rendered_yaml)

    # Using the engine
    engine = AssertionEngine()
    result = engine.contains_document(docs, "Service", "v1", name="web")

    # Using convenience functions
    result = assert_contains_document(docs, "Service", "v1", any_match=True)

    # Check result
    if result.passed:
        print("✅ Assertion passed")
    else:
        print(result)  # Detailed failure message with diff
"""

# Models
from .models import AssertionResult, AssertionStatus

# Engine
from .engine import (
    AssertionEngine,
    # Convenience functions
    assert_contains_document,
)

__all__ = [
    # Models
    "AssertionResult",
    "AssertionStatus",
    # Engine
    "AssertionEngine",
    # Convenience functions
    "assert_contains_document",
]
