# zipgen/core/renderer.py
"""
Placeholder substitution for template files.

Only four fixed tokens are recognised: {{username}}, {{email}},
{{project_name}} and {{project_description}}. Substitution is literal and
single pass, so a value that itself contains a token is emitted as-is.
"""
import re
from typing import Dict

from zipgen.models import RenderContext

PLACEHOLDER_FIELDS = ("username", "email", "project_name", "project_description")

_TOKEN_RE = re.compile("|".join(re.escape("{{%s}}" % name) for name in PLACEHOLDER_FIELDS))


def placeholder_values(context: RenderContext) -> Dict[str, str]:
    """Map each token string to its replacement text."""
    return {"{{%s}}" % name: getattr(context, name) for name in PLACEHOLDER_FIELDS}


def render(content: str, context: RenderContext) -> str:
    values = placeholder_values(context)
    return _TOKEN_RE.sub(lambda match: values[match.group(0)], content)
