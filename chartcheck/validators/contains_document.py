"""
Containment validator for rendered document sets.

Answers whether a set of documents (or one fixed member of it) contains,
or deliberately does not contain, a document identified by kind,
apiVersion, name and namespace.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..manifest import DocumentIdentity
from .context import EvaluationMode, NegatedExistencePolicy, ValidateContext
from .diff import contains_block, selector_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContainsDocumentValidator:
    """
    Immutable selector for the containsDocument check.

    Attributes:
        kind: Required kind, compared verbatim
        api_version: Required apiVersion, compared verbatim
        name: Expected metadata.name, "" matches any name
        namespace: Expected metadata.namespace, "" matches any namespace
        any_match: Existence mode; one matching document is enough
        negated_existence: How a negated existence check without matches ends

    Example:
        validator = ContainsDocumentValidator("Service", "v1", name="web")
        passed, diff = validator.validate(ValidateContext(docs=docs))
    """
    kind: str
    api_version: str
    name: str = ""
    namespace: str = ""
    any_match: bool = False
    negated_existence: NegatedExistencePolicy = NegatedExistencePolicy.COMPATIBLE

    def matches(self, document: Any) -> bool:
        """Field-equality check; empty name/namespace act as wildcards."""
        identity = DocumentIdentity.from_document(document)
        return (
            identity.kind == self.kind
            and identity.api_version == self.api_version
            and (self.name == "" or identity.name == self.name)
            and (self.namespace == "" or identity.namespace == self.namespace)
        )

    def mode_for(self, context: ValidateContext) -> EvaluationMode:
        # A single fixed document makes "any" and "all" the same question.
        if self.any_match and not context.is_scoped:
            return EvaluationMode.EXISTENCE
        return EvaluationMode.UNIVERSAL

    def validate(self, context: ValidateContext) -> tuple[bool, list[str]]:
        """
        Check the selector against the context.

        Args:
            context: Documents, optional fixed index and negation flag

        Returns:
            Tuple of (passed, diff lines). The diff is empty, never None,
            when there is nothing to report.
        """
        mode = self.mode_for(context)
        if mode == EvaluationMode.EXISTENCE:
            passed, diff = self._validate_existence(context)
        else:
            passed, diff = self._validate_universal(context)

        logger.debug(
            f"containsDocument {self.kind}/{self.api_version} "
            f"mode={mode.value} negative={context.negative} passed={passed}"
        )
        return passed, diff

    def _validate_universal(self, context: ValidateContext) -> tuple[bool, list[str]]:
        """Every document in scope must match (or, negated, none may)."""
        expected = not context.negative
        diff: list[str] = []

        for position, document in enumerate(context.get_manifests()):
            if self.matches(document) != expected:
                diff.extend(self._block(context.original_index(position), context.negative))

        return not diff, diff

    def _validate_existence(self, context: ValidateContext) -> tuple[bool, list[str]]:
        """At least one document must match (or, negated, none may)."""
        diff: list[str] = []
        found = False
        last_index = 0

        for index, document in enumerate(context.docs):
            last_index = index
            if not self.matches(document):
                continue
            if context.negative:
                diff.extend(self._block(index, negative=True))
                continue
            found = True
            break

        if context.negative:
            if self.negated_existence == NegatedExistencePolicy.SYMMETRIC:
                return not diff, diff
            # Existing suites rely on this never passing.
            return False, diff

        if not found:
            diff.extend(self._block(last_index, negative=False))
        return found, diff

    def _block(self, index: int, negative: bool) -> list[str]:
        line = selector_line(self.kind, self.api_version, self.name, self.namespace)
        return contains_block(index, line, negative)
