from __future__ import annotations

import shutil
from pathlib import Path

from cursorpack.errors import BuildError
from cursorpack.utils.fs import ensure_dir

_EXT = ".tar.gz"


def create_tarball(tree: Path, output_file: Path | str) -> Path:
    """Archive the contents of ``tree`` with entries rooted at the tree itself."""

    if not tree.is_dir():
        raise BuildError(f"Package tree not found: {tree}")

    output_path = Path(output_file)
    if not output_path.name.endswith(_EXT):
        raise BuildError(f"Tarball name must end with {_EXT}: {output_path}")

    try:
        ensure_dir(output_path.parent)
        archive_path = shutil.make_archive(
            base_name=str(output_path)[: -len(_EXT)],
            format="gztar",
            root_dir=tree,
        )
    except (OSError, shutil.Error) as exc:
        raise BuildError(
            f"Failed to create archive: {output_path}"
        ) from exc

    return Path(archive_path)
