# zipgen/core/errors.py
from pathlib import Path
from typing import Union


class ZipgenError(Exception):
    """Base class for failures while building a generated archive."""


class MissingFileError(ZipgenError):
    """A template or baseline archive is not present on disk."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"required file not found: {self.path}")


class ArchiveError(ZipgenError):
    """The baseline archive is unreadable or the output could not be written."""


class TemplateEncodingError(ZipgenError):
    """A template file is not valid UTF-8 text."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"template is not valid UTF-8: {self.path}")
