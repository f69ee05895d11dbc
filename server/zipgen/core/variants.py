# zipgen/core/variants.py
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class Variant:
    """A template bundle: one baseline archive plus the files rendered into it."""
    name: str
    baseline: str
    templates: Tuple[str, ...]
    filename_suffix: str

    def directory(self, templates_dir: Path) -> Path:
        return Path(templates_dir) / self.name

    def baseline_path(self, templates_dir: Path) -> Path:
        return self.directory(templates_dir) / self.baseline

    def template_path(self, templates_dir: Path, template_name: str) -> Path:
        return self.directory(templates_dir) / template_name


SERVER = Variant(
    name="server",
    baseline="zero.zip",
    templates=("LICENSE", "pyproject.toml", "README.md"),
    filename_suffix=".zip",
)

CLIENT = Variant(
    name="client",
    baseline="zero-client.zip",
    templates=("LICENSE", "package.json", "README.md"),
    filename_suffix="-client.zip",
)
