from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from cursorpack.errors import BuildError
from cursorpack.utils.fs import copy_path, ensure_dir, make_executable

logger = logging.getLogger(__name__)

LAUNCHER = "AppRun"

# Executable names a VS Code or VSCodium release may ship with.
INHERITED_BINARIES: Tuple[Path, ...] = (
    Path("code"),
    Path("bin") / "code",
    Path("bin") / "codium",
)


def finalize(tree: Path, downstream: Path, *, product_name: str = "cursor") -> Path:
    """Copy desktop integration files and rebrand binaries.

    Every step is skipped when its source is absent from ``downstream``.
    """

    for name in (f"{product_name}.png", f"{product_name}.desktop"):
        _copy_optional(downstream / name, tree / name)

    resources = downstream / "resources"
    if resources.is_dir():
        for source in sorted(resources.glob("todesktop*")):
            ensure_dir(tree / "resources")
            copy_path(source, tree / "resources" / source.name)

    _copy_optional(downstream / "usr", tree / "usr")
    if _copy_optional(downstream / LAUNCHER, tree / LAUNCHER):
        make_executable(tree / LAUNCHER)

    _copy_optional(downstream / ".DirIcon", tree / ".DirIcon")

    rename_binaries(tree, product_name)
    return tree


def rename_binaries(tree: Path, product_name: str) -> list[Path]:
    renamed: list[Path] = []
    for relative in INHERITED_BINARIES:
        source = tree / relative
        if not source.is_file():
            continue
        destination = source.with_name(product_name)
        try:
            source.replace(destination)
        except OSError as exc:
            raise BuildError(
                f"Failed to rename {source} -> {destination}"
            ) from exc
        logger.info("Renamed %s -> %s", relative, destination.relative_to(tree))
        renamed.append(destination)
    return renamed


def _copy_optional(source: Path, destination: Path) -> bool:
    if not source.exists():
        logger.debug("Skipping missing %s", source)
        return False
    copy_path(source, destination)
    return True
