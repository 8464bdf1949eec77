from __future__ import annotations

import logging
from pathlib import Path

from cursorpack.bundle.layout import BuildLayout
from cursorpack.config import VersionSpec
from cursorpack.download.fetch import fetch
from cursorpack.download.urls import Component, download_spec
from cursorpack.errors import BuildError
from cursorpack.targets import BuildTarget
from cursorpack.utils.env import prepend_search_path, which
from cursorpack.utils.fs import ensure_dir, make_executable
from cursorpack.utils.subprocess import run_command

logger = logging.getLogger(__name__)

APPIMAGETOOL = "appimagetool"
PATCHELF = "patchelf"


def ensure_appimagetool(layout: BuildLayout) -> Path:
    """Return an appimagetool executable, downloading one if PATH has none.

    A downloaded tool's directory is prepended to PATH for the remainder
    of the process.
    """

    found = which(APPIMAGETOOL)
    if found:
        return found

    logger.info("%s not found, downloading...", APPIMAGETOOL)
    spec = download_spec(
        Component.APPIMAGETOOL,
        VersionSpec(),
        layout.target,
        layout.downloads_dir,
    )
    result = fetch(spec)
    make_executable(result.path)
    prepend_search_path(result.path.parent.resolve())
    return result.path


def build_appimage(tree: Path, output_file: Path | str, target: BuildTarget) -> Path:
    if not tree.is_dir():
        raise BuildError(f"Package tree not found: {tree}")

    output_path = Path(output_file)
    ensure_dir(output_path.parent)

    run_command(
        [APPIMAGETOOL, str(tree), str(output_path)],
        extra_env={"ARCH": target.packaging_arch_tag},
    )

    if not output_path.exists():
        raise BuildError(f"{APPIMAGETOOL} produced no image: {output_path}")
    return output_path


def patch_interpreter(image: Path, target: BuildTarget) -> Path:
    """Rewrite the image's ELF interpreter in place.

    There is no backup: a failure leaves the image in an unknown state.
    """

    run_command(
        [PATCHELF, "--set-interpreter", target.interpreter_path, str(image)]
    )
    return image
