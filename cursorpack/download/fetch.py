"""Existence-cached downloads.

A destination that already exists is trusted as-is: nothing checks that
its content still matches what the URL serves. Concurrent runs sharing a
downloads directory are not coordinated.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List

from cursorpack.download.urls import DownloadSpec
from cursorpack.errors import MissingToolError, TransportError
from cursorpack.utils.env import which
from cursorpack.utils.fs import FilesystemError, ensure_dir, remove_path
from cursorpack.utils.subprocess import SubprocessError, run_command

logger = logging.getLogger(__name__)


class FetchStatus(str, Enum):
    CACHE_HIT = "cache_hit"
    DOWNLOADED = "downloaded"


@dataclass(frozen=True)
class FetchResult:
    status: FetchStatus
    path: Path

    @property
    def downloaded(self) -> bool:
        return self.status is FetchStatus.DOWNLOADED


def fetch(spec: DownloadSpec) -> FetchResult:
    if spec.satisfied:
        logger.info("File already exists: %s", spec.destination)
        return FetchResult(status=FetchStatus.CACHE_HIT, path=spec.destination)

    ensure_dir(spec.destination.parent)
    staging = spec.destination.with_name(spec.destination.name + ".part")
    remove_path(staging)

    logger.info("Downloading %s -> %s", spec.url, spec.destination)
    try:
        run_command(_download_command(spec.url, staging))
    except SubprocessError as exc:
        remove_path(staging)
        raise TransportError(f"Failed to download {spec.url}\n{exc}") from exc

    if not staging.exists():
        raise TransportError(f"Download produced no file: {spec.url}")

    try:
        staging.replace(spec.destination)
    except OSError as exc:
        raise FilesystemError(
            f"Failed to move download into place: {spec.destination}"
        ) from exc
    return FetchResult(status=FetchStatus.DOWNLOADED, path=spec.destination)


def _download_command(url: str, output: Path) -> List[str]:
    curl = which("curl")
    if curl:
        return [str(curl), "-fL", url, "-o", str(output)]

    wget = which("wget")
    if wget:
        return [str(wget), "-O", str(output), url]

    raise MissingToolError("Neither curl nor wget found in PATH")
