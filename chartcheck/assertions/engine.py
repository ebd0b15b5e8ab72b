"""
Assertion engine for evaluating containment checks on rendered documents.

This module wraps the containsDocument validator with the contract checks
a test runner needs before calling it, and turns its (passed, diff) pair
into a reportable AssertionResult.
"""

from __future__ import annotations

import logging
from typing import Any

from ..schema_parsing import Assertion, Settings
from ..validators import ContainsDocumentValidator, ValidateContext, selector_line
from .models import AssertionResult

logger = logging.getLogger(__name__)


class AssertionEngine:
    """
    Engine for running containment assertions on document sets.

    Example:
        engine = AssertionEngine()
        docs = load_documents(rendered_yaml)

        result = engine.contains_document(docs, "Service", "v1", name="web")
        result = engine.contains_document(docs, "Service", "v1", any_match=True, negate=True)
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()

    def contains_document(
        self,
        documents: list[dict[str, Any]],
        kind: str,
        api_version: str,
        name: str = "",
        namespace: str = "",
        any_match: bool = False,
        negate: bool = False,
        document_index: int = -1,
    ) -> AssertionResult:
        """
        Assert that the documents contain (or do not contain) a selector.

        Args:
            documents: Rendered documents, in render order
            kind: Required kind
            api_version: Required apiVersion
            name: Expected name, "" for any
            namespace: Expected namespace, "" for any
            any_match: Existence mode; one match is enough
            negate: Assert the document is NOT contained
            document_index: Fixed document position, -1 for all

        Returns:
            AssertionResult indicating pass/fail/error
        """
        if not -1 <= document_index < len(documents):
            logger.warning(
                f"documentIndex {document_index} out of range for {len(documents)} document(s)"
            )
            return AssertionResult.error_result(
                message="Document index out of range",
                details={
                    "documentIndex": document_index,
                    "documents": len(documents),
                },
            )

        validator = ContainsDocumentValidator(
            kind=kind,
            api_version=api_version,
            name=name,
            namespace=namespace,
            any_match=any_match,
            negated_existence=self.settings.negated_existence,
        )
        context = ValidateContext(
            docs=documents,
            index=document_index,
            negative=negate,
        )
        passed, diff = validator.validate(context)
        selector = selector_line(kind, api_version, name, namespace)

        logger.debug(f"containsDocument [{selector}] passed={passed}")

        if passed:
            verb = "does not contain" if negate else "contains"
            return AssertionResult.passed_result(
                message=f"Document set {verb} expected document",
                document_count=len(documents),
            )

        verb = "NOT to contain" if negate else "to contain"
        return AssertionResult.failed_result(
            message=f"Expected document set {verb} document",
            selector=selector,
            document_count=len(documents),
            diff=diff,
        )

    def run(self, assertion: Assertion, documents: list[dict[str, Any]]) -> AssertionResult:
        """Evaluate a parsed assertion entry."""
        check = assertion.check
        return self.contains_document(
            documents,
            kind=check.kind,
            api_version=check.api_version,
            name=check.name,
            namespace=check.namespace,
            any_match=check.any_match,
            negate=assertion.negate,
            document_index=assertion.document_index,
        )


# Convenience function for quick assertions
def assert_contains_document(
    documents: list[dict[str, Any]],
    kind: str,
    api_version: str,
    name: str = "",
    namespace: str = "",
    any_match: bool = False,
    negate: bool = False,
    document_index: int = -1,
) -> AssertionResult:
    """Check that the documents contain a document matching the selector."""
    return AssertionEngine().contains_document(
        documents,
        kind,
        api_version,
        name=name,
        namespace=namespace,
        any_match=any_match,
        negate=negate,
        document_index=document_index,
    )
