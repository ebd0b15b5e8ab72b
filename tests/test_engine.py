import pytest

from chartcheck.assertions import (
    AssertionEngine,
    AssertionResult,
    AssertionStatus,
    assert_contains_document,
)
from chartcheck.schema_parsing import Assertion, ContainsDocumentCheck, Settings
from chartcheck.validators import NegatedExistencePolicy


class TestContainsDocument:

    def test_passes_when_contained(self, two_services):
        result = AssertionEngine().contains_document(
            two_services, "Service", "v1", name="bar", namespace="foo", any_match=True
        )

        assert result.passed
        assert result.diff == []

    def test_failure_carries_diff(self, two_services):
        result = AssertionEngine().contains_document(
            two_services, "Service", "v1", name="bar", namespace="foo"
        )

        assert result.failed
        assert result.document_count == 2
        assert result.selector == "Kind = Service, apiVersion = v1, Name = bar, Namespace = foo"
        assert result.diff == [
            "DocumentIndex:\t0",
            "Expected to contain document:",
            "\tKind = Service, apiVersion = v1, Name = bar, Namespace = foo",
        ]

    def test_negated_failure(self, two_services):
        result = AssertionEngine().contains_document(
            two_services, "Service", "v1", any_match=True, negate=True
        )

        assert result.failed
        assert "NOT" in result.message
        assert len(result.diff) == 6

    @pytest.mark.parametrize("index", [-2, 2, 10])
    def test_out_of_range_index_is_an_error(self, two_services, index):
        result = AssertionEngine().contains_document(
            two_services, "Service", "v1", document_index=index
        )

        assert result.status == AssertionStatus.ERROR
        assert result.details == {"documentIndex": index, "documents": 2}

    def test_index_on_empty_set_is_an_error(self):
        result = AssertionEngine().contains_document([], "Service", "v1", document_index=0)

        assert result.status == AssertionStatus.ERROR

    def test_settings_select_negated_existence_policy(self):
        compatible = AssertionEngine().contains_document(
            [], "Service", "v1", any_match=True, negate=True
        )
        symmetric = AssertionEngine(
            Settings(negated_existence=NegatedExistencePolicy.SYMMETRIC)
        ).contains_document([], "Service", "v1", any_match=True, negate=True)

        assert compatible.failed
        assert compatible.diff == []
        assert symmetric.passed

    def test_convenience_function(self, service_foo):
        result = assert_contains_document([service_foo], "Service", "v1", name="foo")

        assert result.passed


def test_run_parsed_assertion(two_services):
    assertion = Assertion(
        check=ContainsDocumentCheck(kind="Service", api_version="v1", name="foo", namespace="bar"),
        negate=True,
        document_index=1,
    )

    result = AssertionEngine().run(assertion, two_services)

    assert result.passed


class TestAssertionResultFormatting:

    def test_passed(self):
        result = AssertionResult.passed_result("Document set contains expected document", document_count=2)

        assert str(result) == "✅ PASS: Document set contains expected document"

    def test_failed_lists_diff_lines(self, two_services):
        result = AssertionEngine().contains_document(two_services, "Deployment", "apps/v1")

        text = str(result)
        assert text.splitlines() == [
            "❌ FAILED: Expected document set to contain document",
            "   Selector:  Kind = Deployment, apiVersion = apps/v1, Name = , Namespace = ",
            "   Documents: 2",
            "   DocumentIndex:\t0",
            "   Expected to contain document:",
            "   \tKind = Deployment, apiVersion = apps/v1, Name = , Namespace =",
            "   DocumentIndex:\t1",
            "   Expected to contain document:",
            "   \tKind = Deployment, apiVersion = apps/v1, Name = , Namespace =",
        ]

    def test_error(self):
        result = AssertionResult.error_result("Document index out of range", details={"documentIndex": 5})

        assert str(result).splitlines() == [
            "⚠️ ERROR: Document index out of range",
            "   documentIndex: 5",
        ]
