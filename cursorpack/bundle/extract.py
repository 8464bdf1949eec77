from __future__ import annotations

import logging
import shutil
import zipfile
from pathlib import Path

from cursorpack.errors import ArchiveFormatError, BuildError
from cursorpack.utils.fs import ensure_dir
from cursorpack.utils.subprocess import run_command

logger = logging.getLogger(__name__)

_TAR_SUFFIXES = (".tar.gz", ".tgz")
_ZIP_SUFFIXES = (".zip",)
_IMAGE_SUFFIXES = (".appimage",)


def archive_kind(archive: Path) -> str:
    """Classify ``archive`` by filename suffix."""

    name = archive.name.lower()
    if name.endswith(_TAR_SUFFIXES):
        return "gztar"
    if name.endswith(_ZIP_SUFFIXES):
        return "zip"
    if name.endswith(_IMAGE_SUFFIXES):
        return "appimage"
    raise ArchiveFormatError(f"Unrecognized archive format: {archive.name}")


def extract(archive: Path, target_dir: Path, *, seven_zip: str = "7z") -> Path:
    kind = archive_kind(archive)

    if not archive.is_file():
        raise ArchiveFormatError(f"Archive not found: {archive}")

    ensure_dir(target_dir)
    logger.info("Extracting %s -> %s", archive, target_dir)

    if kind == "appimage":
        run_command([seven_zip, f"-o{target_dir}", "-y", "x", str(archive)])
        return target_dir

    try:
        if kind == "zip":
            _unpack_zip(archive, target_dir)
        else:
            shutil.unpack_archive(str(archive), str(target_dir), format=kind)
    except (OSError, shutil.ReadError, zipfile.BadZipFile, EOFError) as exc:
        raise BuildError(f"Failed to extract {archive}: {exc}") from exc

    return target_dir


def _unpack_zip(archive: Path, target_dir: Path) -> None:
    # zipfile drops Unix permissions; restore them from the member headers.
    with zipfile.ZipFile(archive) as zf:
        for info in zf.infolist():
            extracted = Path(zf.extract(info, target_dir))
            mode = (info.external_attr >> 16) & 0o777
            if mode and not info.is_dir():
                extracted.chmod(mode)
