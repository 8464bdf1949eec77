import shutil
import stat
from pathlib import Path

from cursorpack.errors import BuildError


class FilesystemError(BuildError):
    pass


def ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(
            f"Failed to create directory: {path}"
        ) from exc


def remove_path(path: Path) -> None:
    """Remove a file, symlink or directory tree if it exists."""
    try:
        if path.is_symlink() or path.is_file():
            path.unlink()
        elif path.exists():
            shutil.rmtree(path)
    except OSError as exc:
        raise FilesystemError(
            f"Failed to remove path: {path}"
        ) from exc


def copy_path(source: Path, destination: Path) -> None:
    """Copy a file or a directory tree, overwriting entries of the same name.

    Directories are merged into an existing destination; symlinks inside
    trees are preserved as links.
    """
    try:
        ensure_dir(destination.parent)
        if source.is_dir() and not source.is_symlink():
            shutil.copytree(
                source,
                destination,
                symlinks=True,
                dirs_exist_ok=True,
            )
        else:
            if destination.is_symlink():
                destination.unlink()
            shutil.copy2(source, destination)
    except (OSError, shutil.Error) as exc:
        raise FilesystemError(
            f"Failed to copy {source} -> {destination}: {exc}"
        ) from exc


def make_executable(path: Path) -> None:
    try:
        mode = path.stat().st_mode
        path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    except OSError as exc:
        raise FilesystemError(
            f"Failed to mark executable: {path}"
        ) from exc
