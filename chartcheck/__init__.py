"""
chartcheck - Containment assertions for rendered manifests

This package checks whether a set of rendered documents (for example the
output of a chart template render) contains, or deliberately does not
contain, a document identified by kind, apiVersion, name and namespace.

Subpackages:
    - manifest: Generic document model and identity accessors
    - validators: The containsDocument validator and its diff format
    - assertions: Assertion engine and result models
    - schema_parsing: Parse and validate assertion YAML files

Usage:
    from chartcheck import load_documents, load_assertions, AssertionEngine

    docs = load_documents(rendered_yaml)
    suite, result = load_assertions("tests/service_asserts.yaml")

    engine = AssertionEngine(suite.settings)
    for assertion in suite.asserts:
        print(engine.run(assertion, docs))
"""

__version__ = "0.1.0"

# Re-export manifest for convenience
from .manifest import (
    Document,
    DocumentIdentity,
    load_documents,
)

# Re-export validators for convenience
from .validators import (
    ContainsDocumentValidator,
    EvaluationMode,
    NegatedExistencePolicy,
    ValidateContext,
)

# Re-export schema_parsing for convenience
from .schema_parsing import (
    # Loader functions
    load_assertions,
    validate_assertions_yaml,
    # Models
    AssertionSuite,
    Assertion,
    AssertType,
    ContainsDocumentCheck,
    Settings,
    # Validation
    ValidationResult,
    ValidationError,
    SchemaValidator,
)

# Re-export assertions for convenience
from .assertions import (
    AssertionResult,
    AssertionStatus,
    AssertionEngine,
    assert_contains_document,
)

__all__ = [
    # Package info
    "__version__",
    # Manifest
    "Document",
    "DocumentIdentity",
    "load_documents",
    # Validators
    "ContainsDocumentValidator",
    "EvaluationMode",
    "NegatedExistencePolicy",
    "ValidateContext",
    # Schema parsing - Loader functions
    "load_assertions",
    "validate_assertions_yaml",
    # Schema parsing - Models
    "AssertionSuite",
    "Assertion",
    "AssertType",
    "ContainsDocumentCheck",
    "Settings",
    # Schema parsing - Validation
    "ValidationResult",
    "ValidationError",
    "SchemaValidator",
    # Assertions
    "AssertionResult",
    "AssertionStatus",
    "AssertionEngine",
    "assert_contains_document",
]
