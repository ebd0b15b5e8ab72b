"""
Generic document model for rendered manifests.

A document is a plain mapping of string keys to nested values, exactly as
produced by a YAML/JSON loader. Only four identity fields are ever read,
each resolved through a JSONPath expression. Anything missing or malformed
resolves to the empty string.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import yaml
from jsonpath_ng import parse as parse_jsonpath

logger = logging.getLogger(__name__)

Document = dict[str, Any]

KIND_PATH = parse_jsonpath("$.kind")
API_VERSION_PATH = parse_jsonpath("$.apiVersion")
NAME_PATH = parse_jsonpath("$.metadata.name")
NAMESPACE_PATH = parse_jsonpath("$.metadata.namespace")


def _lookup(document: Any, expr) -> str:
    """Resolve a compiled path to a string, defaulting to ""."""
    if not isinstance(document, dict):
        return ""

    try:
        matches = expr.find(document)
    except (AttributeError, KeyError, TypeError):
        return ""

    if not matches:
        return ""

    value = matches[0].value
    return value if isinstance(value, str) else ""


def get_kind(document: Any) -> str:
    return _lookup(document, KIND_PATH)


def get_api_version(document: Any) -> str:
    return _lookup(document, API_VERSION_PATH)


def get_name(document: Any) -> str:
    return _lookup(document, NAME_PATH)


def get_namespace(document: Any) -> str:
    return _lookup(document, NAMESPACE_PATH)


@dataclass(frozen=True)
class DocumentIdentity:
    """The (kind, apiVersion, name, namespace) tuple of one document."""
    kind: str = ""
    api_version: str = ""
    name: str = ""
    namespace: str = ""

    @classmethod
    def from_document(cls, document: Any) -> DocumentIdentity:
        return cls(
            kind=get_kind(document),
            api_version=get_api_version(document),
            name=get_name(document),
            namespace=get_namespace(document),
        )


def load_documents(text: str) -> list[Document]:
    """
    Parse a multi-document YAML stream into a list of documents.

    Empty documents (a bare ``---`` or trailing separator) are dropped so
    that positions line up with the resources a render actually produced.

    Raises:
        yaml.YAMLError: If the stream is not valid YAML
    """
    documents = [doc for doc in yaml.safe_load_all(text) if doc is not None]
    logger.debug(f"Loaded {len(documents)} document(s)")
    return documents
