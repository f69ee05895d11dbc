import io
import zipfile
from pathlib import Path

import pytest

from zipgen.models import RenderContext
from zipgen.utils import config

BASELINE_ENTRIES = {
    "server": {
        ".gitignore": b"__pycache__/\n",
        "app/": b"",
        "app/__init__.py": b"",
        "app/__main__.py": b"print('hello')\n",
    },
    "client": {
        ".gitignore": b"node_modules/\n",
        "src/index.js": b"console.log('hello');\n",
        "public/logo.bin": bytes(range(256)) * 4,
    },
}

TEMPLATES = {
    "server": {
        "LICENSE": "Copyright (c) {{username}} <{{email}}>\n",
        "pyproject.toml": '[project]\nname = "{{project_name}}"\ndescription = "{{project_description}}"\n',
        "README.md": "# {{project_name}}\n\n{{project_description}}\n\nby {{username}}\n",
    },
    "client": {
        "LICENSE": "Copyright (c) {{username}} <{{email}}>\n",
        "package.json": '{"name": "{{project_name}}", "description": "{{project_description}}"}\n',
        "README.md": "# {{project_name}}\n\n{{project_description}}\n",
    },
}

BASELINE_NAMES = {"server": "zero.zip", "client": "zero-client.zip"}


def make_zip(entries) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_STORED) as zf:
        for name, data in entries.items():
            zf.writestr(name, data)
    return buf.getvalue()


def read_zip(data: bytes):
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        return {info.filename: zf.read(info) for info in zf.infolist()}


@pytest.fixture
def templates_dir(tmp_path, monkeypatch) -> Path:
    root = tmp_path / "templates"
    for variant, files in TEMPLATES.items():
        vdir = root / variant
        vdir.mkdir(parents=True)
        (vdir / BASELINE_NAMES[variant]).write_bytes(make_zip(BASELINE_ENTRIES[variant]))
        for name, content in files.items():
            (vdir / name).write_text(content, encoding="utf-8")
    monkeypatch.setattr(config, "TEMPLATES_DIR", root)
    return root


@pytest.fixture
def context() -> RenderContext:
    return RenderContext(
        username="alice",
        email="a@x.com",
        project_name="My App",
        project_description="demo",
    )
