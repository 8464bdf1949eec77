import logging
from dataclasses import dataclass
from pathlib import Path

from cursorpack.bundle.formats.appimage import (
    build_appimage,
    ensure_appimagetool,
    patch_interpreter,
)
from cursorpack.bundle.formats.tarball import create_tarball
from cursorpack.bundle.layout import BuildLayout
from cursorpack.config import VersionSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DistributionArtifact:
    tar_path: Path
    image_path: Path


def package(tree: Path, layout: BuildLayout, version: VersionSpec) -> DistributionArtifact:
    target = layout.target

    tar_path = create_tarball(tree, layout.tar_path(version))
    logger.info("Created %s", tar_path)

    ensure_appimagetool(layout)
    image_path = build_appimage(tree, layout.image_path(version), target)
    patch_interpreter(image_path, target)
    logger.info(
        "Created %s (interpreter %s)", image_path, target.interpreter_path
    )

    return DistributionArtifact(tar_path=tar_path, image_path=image_path)
