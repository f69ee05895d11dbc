import re
from urllib.parse import quote

_WHITESPACE_RE = re.compile(r"\s")

FALLBACK_STEM = "project"


def download_filename(project_name: str, suffix: str) -> str:
    """
    Derive the download name from a project name: each whitespace character
    becomes '_', the result is lower-cased and `suffix` appended.
    """
    stem = _WHITESPACE_RE.sub("_", project_name).lower()
    return (stem or FALLBACK_STEM) + suffix


def content_disposition(filename: str) -> str:
    """Attachment header value, RFC 5987 encoded when the name is not plain ASCII."""
    quoted = quote(filename, safe="")
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'
