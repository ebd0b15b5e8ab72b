"""
Assertion result models.

An assertion either passes, fails with the validator's diff lines, or
errors before the validator runs (for instance on a bad document index).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class AssertionStatus(str, Enum):
    """Status of an assertion check."""
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"  # e.g., document index out of range


@dataclass
class AssertionResult:
    """
    Outcome of one containsDocument assertion.

    Attributes:
        status: Whether the assertion passed, failed, or errored
        message: One-line summary
        selector: The selector line that was looked for
        document_count: Size of the document set that was checked
        details: Contract values behind an error, e.g. the rejected index
        diff: Report lines produced by the validator
    """
    status: AssertionStatus
    message: str
    selector: str | None = None
    document_count: int | None = None
    details: dict[str, int] = field(default_factory=dict)
    diff: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.status == AssertionStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status == AssertionStatus.FAILED

    def __str__(self) -> str:
        if self.status == AssertionStatus.PASSED:
            return f"✅ PASS: {self.message}"

        icon = "❌" if self.status == AssertionStatus.FAILED else "⚠️"
        lines = [f"{icon} {self.status.value.upper()}: {self.message}"]

        if self.selector:
            lines.append(f"   Selector:  {self.selector}")
        if self.document_count is not None:
            lines.append(f"   Documents: {self.document_count}")
        lines.extend(f"   {key}: {value}" for key, value in self.details.items())
        lines.extend(f"   {line}" for line in self.diff)

        return "\n".join(lines)

    @classmethod
    def passed_result(cls, message: str, document_count: int) -> AssertionResult:
        return cls(
            status=AssertionStatus.PASSED,
            message=message,
            document_count=document_count,
        )

    @classmethod
    def failed_result(
        cls,
        message: str,
        selector: str,
        document_count: int,
        diff: list[str],
    ) -> AssertionResult:
        return cls(
            status=AssertionStatus.FAILED,
            message=message,
            selector=selector,
            document_count=document_count,
            diff=diff,
        )

    @classmethod
    def error_result(cls, message: str, details: dict[str, int]) -> AssertionResult:
        """The assertion could not be evaluated."""
        return cls(
            status=AssertionStatus.ERROR,
            message=message,
            details=details,
        )
