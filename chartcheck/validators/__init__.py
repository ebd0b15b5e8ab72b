"""
Document validators.

Usage:
    from chartcheck.validators import ContainsDocumentValidator, ValidateContext

    validator = ContainsDocumentValidator("Service", "v1", name="web", any_match=True)
    passed, diff = validator.validate(ValidateContext(docs=docs))
    if not passed:
        print("\\n".join(diff))
"""

from .contains_document import ContainsDocumentValidator
from .context import EvaluationMode, NegatedExistencePolicy, ValidateContext
from .diff import contains_block, selector_line, split_info

__all__ = [
    "ContainsDocumentValidator",
    "EvaluationMode",
    "NegatedExistencePolicy",
    "ValidateContext",
    "contains_block",
    "selector_line",
    "split_info",
]
