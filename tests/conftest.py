"""
Test fixtures for cursorpack.

Builds miniature Cursor and VS Code release trees that follow the real
on-disk layout closely enough for the merge and finalize rules.
"""
from __future__ import annotations

import subprocess
import tarfile
from pathlib import Path
from typing import Dict

import pytest

from cursorpack.targets import resolve


def write_files(root: Path, files: Dict[str, str]) -> Path:
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


CURSOR_FILES = {
    "cursor.png": "cursor-icon",
    "cursor.desktop": "[Desktop Entry]\nName=Cursor\n",
    "AppRun": "#!/bin/sh\nexec ./cursor \"$@\"\n",
    ".DirIcon": "cursor-icon",
    "usr/share/icons/cursor.png": "cursor-icon",
    "resources/todesktop-runtime-config.json": "{}",
    "resources/todesktop.json": "{}",
    "resources/app/out/main.js": "cursor main",
    "resources/app/out/vs/workbench.js": "cursor workbench",
    "resources/app/package.json": '{"name": "cursor"}',
    "resources/app/product.json": '{"nameShort": "Cursor"}',
    "resources/app/extensions/cursor-retrieval/package.json": "{}",
    "resources/app/extensions/cursor-tokenize/package.json": "{}",
    "resources/app/extensions/git/package.json": '{"from": "cursor"}',
    "resources/app/node_modules.asar": "cursor-asar",
    "resources/app/resources/linux/cursor.png": "cursor-icon",
}

VSCODE_FILES = {
    "code": "vscode-binary",
    "bin/code": "vscode-cli",
    "resources/app/out/main.js": "vscode main",
    "resources/app/out/vs/code-only.js": "vscode only",
    "resources/app/package.json": '{"name": "code-oss"}',
    "resources/app/product.json": '{"nameShort": "Code"}',
    "resources/app/extensions/git/package.json": '{"from": "vscode"}',
    "resources/app/extensions/markdown/package.json": "{}",
    "resources/app/node_modules/leftpad/index.js": "module.exports = 1",
    "resources/app/node_modules.asar": "vscode-asar",
    "resources/app/resources/linux/code.png": "code-icon",
}


@pytest.fixture
def aarch64():
    return resolve("aarch64-linux")


@pytest.fixture
def armv7l():
    return resolve("armv7l-linux")


@pytest.fixture
def cursor_bundle(tmp_path: Path) -> Path:
    """An extracted Cursor AppImage."""
    return write_files(tmp_path / "cursor-extract", CURSOR_FILES)


@pytest.fixture
def vscode_bundle(tmp_path: Path) -> Path:
    """An extracted VS Code release, wrapped in its top-level directory."""
    root = tmp_path / "vscode-extract"
    write_files(root / "VSCode-linux-arm64", VSCODE_FILES)
    return root


@pytest.fixture
def vscode_tree(tmp_path: Path) -> Path:
    """A VS Code release already flattened into a package tree."""
    return write_files(tmp_path / "tree", VSCODE_FILES)


@pytest.fixture
def vscode_tarball(vscode_bundle: Path, tmp_path: Path) -> Path:
    archive = tmp_path / "vscode-linux-arm64.tar.gz"
    with tarfile.open(archive, "w:gz") as tar:
        tar.add(vscode_bundle / "VSCode-linux-arm64", arcname="VSCode-linux-arm64")
    return archive


@pytest.fixture
def completed():
    def _completed(command, stdout: str = "", stderr: str = "", returncode: int = 0):
        return subprocess.CompletedProcess(command, returncode, stdout, stderr)

    return _completed


def snapshot(root: Path) -> Dict[str, str]:
    """Map every file under ``root`` to its content."""
    return {
        str(p.relative_to(root)): p.read_text()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }
