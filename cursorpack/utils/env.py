import os
import shutil
from pathlib import Path
from typing import Iterable, List

from cursorpack.errors import MissingToolError


def which(tool: str) -> Path | None:
    found = shutil.which(tool)
    return Path(found) if found else None


def missing_tools(tools: Iterable[str]) -> List[str]:
    return [tool for tool in tools if which(tool) is None]


def require_tools(tools: Iterable[str]) -> None:
    missing = missing_tools(tools)
    if missing:
        raise MissingToolError(
            f"{', '.join(missing)} not found, please install "
            f"{'it' if len(missing) == 1 else 'them'} before running cursorpack"
        )


def prepend_search_path(directory: Path) -> None:
    """Put ``directory`` first on PATH for the rest of the process."""
    existing = os.environ.get("PATH")
    if existing:
        os.environ["PATH"] = f"{directory}{os.pathsep}{existing}"
    else:
        os.environ["PATH"] = str(directory)
