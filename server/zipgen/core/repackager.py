# zipgen/core/repackager.py
"""
Archive Repackager

Copies every entry of a baseline zip into a fresh in-memory zip and appends
rendered text files after it.

Entries are fully decompressed and rewritten with ZIP_DEFLATED; the name,
timestamp and external attributes of each baseline entry are kept. The
repackager does not interpret directory structure, it only moves names and
bytes.

When a rendered file has the same name as a baseline entry the rendered file
wins: the colliding baseline entry is dropped from the copy and only the
rendered content is written, in the append phase. Every baseline name is
still present in the output, but a shadowed entry's original bytes are not,
and the output never holds duplicate names.
"""
import io
import logging
import zipfile
import zlib
from typing import Iterable, Tuple

from zipgen.core.errors import ArchiveError

logger = logging.getLogger(__name__)

COMPRESSION = zipfile.ZIP_DEFLATED

# Errors zipfile raises for corrupt, truncated, encrypted or unsupported archives.
# ValueError covers negative seeks from a bad central-directory offset.
_READ_ERRORS = (zipfile.BadZipFile, zlib.error, EOFError, NotImplementedError, RuntimeError, ValueError)


def _copy_info(info: zipfile.ZipInfo) -> zipfile.ZipInfo:
    copied = zipfile.ZipInfo(info.filename, date_time=info.date_time)
    copied.external_attr = info.external_attr
    copied.compress_type = COMPRESSION
    return copied


def repackage(baseline: bytes, rendered_files: Iterable[Tuple[str, str]]) -> bytes:
    """
    Build a new archive from `baseline` plus `rendered_files`.

    rendered_files: ordered (name, text) pairs, written after the baseline
    entries in the given order. A name repeated in rendered_files keeps its
    last content.

    Raises ArchiveError if the baseline is not a readable zip or writing fails.
    """
    rendered = dict(rendered_files)

    try:
        source = zipfile.ZipFile(io.BytesIO(baseline))
    except _READ_ERRORS as e:
        raise ArchiveError(f"baseline archive is unreadable: {e}") from e

    out = io.BytesIO()
    copied = 0
    with source:
        try:
            with zipfile.ZipFile(out, "w", compression=COMPRESSION) as target:
                for info in source.infolist():
                    if info.filename in rendered:
                        logger.debug("baseline entry %s replaced by rendered file", info.filename)
                        continue
                    target.writestr(_copy_info(info), source.read(info))
                    copied += 1

                for name, content in rendered.items():
                    target.writestr(name, content.encode("utf-8"), compress_type=COMPRESSION)
        except _READ_ERRORS as e:
            raise ArchiveError(f"failed to repackage baseline archive: {e}") from e

    logger.debug("repackaged %d baseline entries and %d rendered files", copied, len(rendered))
    return out.getvalue()
