import pytest
import yaml

from chartcheck.manifest import (
    DocumentIdentity,
    get_api_version,
    get_kind,
    get_name,
    get_namespace,
    load_documents,
)


def test_identity_from_document(service_foo):
    assert DocumentIdentity.from_document(service_foo) == DocumentIdentity(
        kind="Service", api_version="v1", name="foo", namespace="bar"
    )


def test_missing_paths_resolve_to_empty_string():
    document = {"kind": "ConfigMap"}

    assert get_kind(document) == "ConfigMap"
    assert get_api_version(document) == ""
    assert get_name(document) == ""
    assert get_namespace(document) == ""


@pytest.mark.parametrize("document", [
    None,
    "kind: Service",
    [{"kind": "Service"}],
    {"kind": "Service", "metadata": None},
    {"kind": "Service", "metadata": "web"},
    {"kind": "Service", "metadata": ["web"]},
])
def test_malformed_documents_degrade(document):
    assert get_name(document) == ""
    assert get_namespace(document) == ""


def test_non_string_values_resolve_to_empty_string():
    document = {"kind": "Service", "apiVersion": 1, "metadata": {"name": 42}}

    assert get_api_version(document) == ""
    assert get_name(document) == ""


def test_load_documents_skips_empty_documents():
    text = """
---
apiVersion: v1
kind: Service
metadata:
  name: web
---
---
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
  namespace: prod
"""
    documents = load_documents(text)

    assert [get_kind(d) for d in documents] == ["Service", "Deployment"]
    assert get_namespace(documents[1]) == "prod"


def test_load_documents_empty_stream():
    assert load_documents("") == []


def test_load_documents_rejects_invalid_yaml():
    with pytest.raises(yaml.YAMLError):
        load_documents("kind: [Service")
