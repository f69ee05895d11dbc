# zipgen/core/generator.py
"""
Archive builder for a single request.

- Exposes:
    build_archive(variant, context, templates_dir=None) -> bytes
- Reads the variant's baseline archive and template files from disk on every
  call, renders the templates and hands everything to the repackager.
"""
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from zipgen.core.errors import MissingFileError, TemplateEncodingError
from zipgen.core.renderer import render
from zipgen.core.repackager import repackage
from zipgen.core.variants import Variant
from zipgen.models import RenderContext
from zipgen.utils import config

logger = logging.getLogger(__name__)


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except FileNotFoundError as e:
        raise MissingFileError(path) from e


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise MissingFileError(path) from e
    except UnicodeDecodeError as e:
        raise TemplateEncodingError(path) from e


def render_templates(variant: Variant, context: RenderContext, templates_dir: Path) -> List[Tuple[str, str]]:
    """Render every template of `variant`, in the variant's declared order."""
    rendered = []
    for name in variant.templates:
        content = _read_text(variant.template_path(templates_dir, name))
        rendered.append((name, render(content, context)))
    return rendered


def build_archive(variant: Variant, context: RenderContext, templates_dir: Optional[Path] = None) -> bytes:
    """
    Produce the download archive for `variant`.

    Raises MissingFileError when the baseline or a template is absent,
    TemplateEncodingError when a template is not UTF-8 and ArchiveError when
    the baseline cannot be repackaged. Other OSErrors from
    reading the files propagate unchanged.
    """
    if templates_dir is None:
        templates_dir = config.TEMPLATES_DIR
    templates_dir = Path(templates_dir)

    baseline = _read_bytes(variant.baseline_path(templates_dir))
    rendered = render_templates(variant, context, templates_dir)
    data = repackage(baseline, rendered)
    logger.info("built %s archive for %s (%d bytes)", variant.name, context.username, len(data))
    return data
