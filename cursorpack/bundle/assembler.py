"""Overlay Cursor's application files onto a VS Code tree.

The rules run in a fixed order. Each one either copies additively or
deletes a named subpath before copying its replacement, so re-running a
rule leaves the tree unchanged.
"""

import logging
from pathlib import Path
from typing import Callable, List, Sequence, Tuple

from cursorpack.errors import StructureError
from cursorpack.utils.fs import copy_path, ensure_dir, remove_path

logger = logging.getLogger(__name__)

APP_DIR = Path("resources") / "app"

MergeRule = Callable[[Path, Path], None]


def seed_package_tree(base_bundle: Path, tree: Path) -> Path:
    """Populate ``tree`` with the inner contents of an extracted VS Code release.

    The release archive wraps everything in a single top-level directory
    (``VSCode-linux-arm64/``); its children become the tree root.
    """

    roots = sorted(
        child for child in base_bundle.iterdir()
        if child.is_dir() and not child.name.startswith(".")
    ) if base_bundle.is_dir() else []

    if not roots:
        raise StructureError(f"No release directory found in {base_bundle}")

    remove_path(tree)
    ensure_dir(tree)

    for root in roots:
        for child in sorted(root.iterdir()):
            copy_path(child, tree / child.name)

    return tree


def merge(downstream: Path, tree: Path) -> Path:
    for rule in MERGE_RULES:
        logger.debug("Applying merge rule %s", rule.__name__)
        rule(downstream, tree)
    return tree


def replace_compiled_output(downstream: Path, tree: Path) -> None:
    source = _require(downstream / APP_DIR / "out")
    destination = tree / APP_DIR / "out"
    remove_path(destination)
    copy_path(source, destination)


def copy_manifests(downstream: Path, tree: Path) -> None:
    for source in _require_glob(downstream / APP_DIR, "*.json"):
        copy_path(source, tree / APP_DIR / source.name)


def copy_branded_extensions(downstream: Path, tree: Path) -> None:
    extensions = tree / APP_DIR / "extensions"
    ensure_dir(extensions)
    for source in _require_glob(downstream / APP_DIR / "extensions", "cursor-*"):
        copy_path(source, extensions / source.name)


def replace_dependency_archive(downstream: Path, tree: Path) -> None:
    source = _require(downstream / APP_DIR / "node_modules.asar")
    remove_path(tree / APP_DIR / "node_modules")
    remove_path(tree / APP_DIR / "node_modules.asar")
    copy_path(source, tree / APP_DIR / "node_modules.asar")


def replace_app_resources(downstream: Path, tree: Path) -> None:
    source = _require(downstream / APP_DIR / "resources")
    destination = tree / APP_DIR / "resources"
    remove_path(destination)
    copy_path(source, destination)


MERGE_RULES: Tuple[MergeRule, ...] = (
    replace_compiled_output,
    copy_manifests,
    copy_branded_extensions,
    replace_dependency_archive,
    replace_app_resources,
)


def _require(path: Path) -> Path:
    if not path.exists():
        raise StructureError(
            f"Unexpected Cursor bundle layout, missing: {path}"
        )
    return path


def _require_glob(directory: Path, pattern: str) -> List[Path]:
    matches: Sequence[Path] = sorted(directory.glob(pattern)) if directory.is_dir() else []
    if not matches:
        raise StructureError(
            f"Unexpected Cursor bundle layout, nothing matches: {directory / pattern}"
        )
    return list(matches)
