"""
Document model for rendered manifests.

Usage:
    from chartcheck.manifest import load_documents, DocumentIdentity

    docs = load_documents(rendered_yaml)
    identity = DocumentIdentity.from_document(docs[0])
    print(identity.kind, identity.name)
"""

from .document import (
    Document,
    DocumentIdentity,
    get_api_version,
    get_kind,
    get_name,
    get_namespace,
    load_documents,
)

__all__ = [
    "Document",
    "DocumentIdentity",
    "get_api_version",
    "get_kind",
    "get_name",
    "get_namespace",
    "load_documents",
]
