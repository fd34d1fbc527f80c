"""
Template variable substitution.

Placeholders are ``{{name}}`` tokens. The interior is trimmed before lookup,
and a placeholder whose name is not in the table is left exactly as written.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Sequence


# Interior runs up to the first closing brace; no nesting.
PLACEHOLDER_PATTERN = re.compile(r"\{\{([^}]+)\}\}")

OPEN_DELIMITER = "{{"


def _replace_all(text: str, variables: Mapping[str, str]) -> str:
    def replace(match: re.Match) -> str:
        name = match.group(1).strip()
        if name in variables:
            return variables[name]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, text)


def substitute(text: str, variables: Mapping[str, str]) -> str:
    """
    Replace every ``{{name}}`` in text with its value from variables.

    Single pass: substituted values are not scanned again.

    Args:
        text: Template text
        variables: Name to value table

    Returns:
        The substituted text. Text without ``{{`` or an empty table is
        returned unchanged.
    """
    if not text or OPEN_DELIMITER not in text or not variables:
        return text
    return _replace_all(text, variables)


def substitute_batch(texts: Sequence[str], variables: Mapping[str, str]) -> list[str]:
    """Apply substitute() to each text, keeping order and length."""
    if not variables:
        return list(texts)
    return [substitute(text, variables) for text in texts]


def find_variables(text: str) -> list[str]:
    """Trimmed placeholder names in first-occurrence order, without duplicates."""
    if not text or OPEN_DELIMITER not in text:
        return []
    names: list[str] = []
    for match in PLACEHOLDER_PATTERN.finditer(text):
        name = match.group(1).strip()
        if name not in names:
            names.append(name)
    return names


def has_variables(text: str) -> bool:
    if not text:
        return False
    return PLACEHOLDER_PATTERN.search(text) is not None


def interpolate(value: Any, variables: Mapping[str, str]) -> Any:
    """Substitute placeholders in every string inside a nested dict/list value."""
    if isinstance(value, str):
        return substitute(value, variables)
    elif isinstance(value, dict):
        return {k: interpolate(v, variables) for k, v in value.items()}
    elif isinstance(value, list):
        return [interpolate(v, variables) for v in value]
    return value
