"""
Per-invocation validation context and evaluation modes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..manifest import Document


class EvaluationMode(str, Enum):
    """How a selector is checked against its scope."""
    EXISTENCE = "existence"  # at least one document must (not) match
    UNIVERSAL = "universal"  # every document in scope must (not) match


class NegatedExistencePolicy(str, Enum):
    """Outcome of a negated existence check that scans without a match."""
    COMPATIBLE = "compatible"  # never passes, as existing suites expect
    SYMMETRIC = "symmetric"  # passes when nothing matched


@dataclass
class ValidateContext:
    """
    Inputs for a single validation call.

    Attributes:
        docs: Rendered documents, in render order
        index: Fixed document position, or -1 for the whole set
        negative: Assert the selector is NOT contained
    """
    docs: list[Document] = field(default_factory=list)
    index: int = -1
    negative: bool = False

    @property
    def is_scoped(self) -> bool:
        return self.index >= 0

    def get_manifests(self) -> list[Document]:
        """Return the documents under consideration."""
        if self.is_scoped:
            return [self.docs[self.index]]
        return self.docs

    def original_index(self, position: int) -> int:
        """Map a position within the scope back to its place in ``docs``."""
        if self.is_scoped:
            return self.index
        return position
