"""
Line-oriented diff blocks for failed containment checks.
"""

from __future__ import annotations

_TRIM = "\t\n "

CONTAINS_TEMPLATE = """
DocumentIndex:\t{index}
Expected to contain document:
{0}
"""

NOT_CONTAINS_TEMPLATE = """
DocumentIndex:\t{index}
Expected NOT to contain document:
{0}
"""


def split_info(template: str, index: int, *replacements: str) -> list[str]:
    """
    Render a template into report lines.

    Each replacement is trimmed, its inner lines are indented one tab, and
    the result is prefixed with a tab, so an empty trailing field never
    leaves whitespace at the end of a line.
    """
    indented = [
        "\t" + r.replace("\n", "\n\t").strip(_TRIM)
        for r in replacements
    ]
    return template.strip(_TRIM).format(*indented, index=index).split("\n")


def selector_line(kind: str, api_version: str, name: str, namespace: str) -> str:
    return (
        f"Kind = {kind}, apiVersion = {api_version}, "
        f"Name = {name}, Namespace = {namespace}"
    )


def contains_block(index: int, selector: str, negative: bool) -> list[str]:
    """Diff block for one document index."""
    template = NOT_CONTAINS_TEMPLATE if negative else CONTAINS_TEMPLATE
    return split_info(template, index, selector)
