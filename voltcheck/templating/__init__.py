"""
Template Substitution

Replaces ``{{name}}`` placeholders in request templates with values from a
caller-supplied variable table.

Usage:
    from voltcheck.templating import substitute, find_variables

    substitute("https://{{baseUrl}}/users/{{userId}}", {"baseUrl": "api.example.com", "userId": "123"})
    # 'https://api.example.com/users/123'

    find_variables("{{a}}/{{b}}/{{a}}")
    # ['a', 'b']
"""

from .substitution import (
    PLACEHOLDER_PATTERN,
    find_variables,
    has_variables,
    interpolate,
    substitute,
    substitute_batch,
)

__all__ = [
    "PLACEHOLDER_PATTERN",
    "substitute",
    "substitute_batch",
    "find_variables",
    "has_variables",
    "interpolate",
]
