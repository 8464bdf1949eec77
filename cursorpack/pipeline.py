"""Sequential build of one target.

Stages run strictly in order and every failure aborts the build. There is
no resume: intermediate trees under ``build/`` are left in place, and only
the download cache is reused by the next run.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, TypeVar

from cursorpack.bundle.assembler import merge, seed_package_tree
from cursorpack.bundle.extract import extract
from cursorpack.bundle.finalize import finalize
from cursorpack.bundle.layout import BuildLayout
from cursorpack.bundle.package import DistributionArtifact, package
from cursorpack.config import BuildConfig, VersionSpec
from cursorpack.download.fetch import FetchResult, FetchStatus, fetch
from cursorpack.download.urls import Component, DownloadSpec, download_spec
from cursorpack.errors import CursorpackError
from cursorpack.targets import BuildTarget
from cursorpack.utils.fs import ensure_dir, remove_path

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class StageResult:
    stage: str
    ok: bool
    detail: str = ""


@dataclass
class PipelineResult:
    target: BuildTarget
    stages: List[StageResult] = field(default_factory=list)
    artifact: DistributionArtifact | None = None

    @property
    def ok(self) -> bool:
        return self.artifact is not None and all(s.ok for s in self.stages)


def run_pipeline(config: BuildConfig, target: BuildTarget) -> PipelineResult:
    layout = BuildLayout.for_target(config, target)
    result = PipelineResult(target=target)

    for directory in layout.all_dirs():
        ensure_dir(directory)

    def stage(name: str, fn: Callable[[], T]) -> T:
        logger.info("[%s] %s", target.id, name)
        try:
            value = fn()
        except CursorpackError as exc:
            result.stages.append(StageResult(stage=name, ok=False, detail=str(exc)))
            logger.error("[%s] stage %s failed", target.id, name)
            raise
        result.stages.append(StageResult(stage=name, ok=True, detail=str(value)))
        return value

    cursor_spec = download_spec(
        Component.CURSOR, config.cursor_version, target, layout.downloads_dir
    )
    vscode_spec = download_spec(
        Component.VSCODE, config.vscode_version, target, layout.downloads_dir
    )

    cursor_archive = stage(
        "fetch-cursor", lambda: _fetch_release(cursor_spec, config.cursor_version)
    ).path
    downstream = stage(
        "extract-cursor",
        lambda: _extract_fresh(cursor_archive, layout.downstream_dir),
    )

    vscode_archive = stage(
        "fetch-vscode", lambda: _fetch_release(vscode_spec, config.vscode_version)
    ).path
    base = stage("extract-vscode", lambda: extract(vscode_archive, layout.base_dir))

    tree = stage("seed", lambda: seed_package_tree(base, layout.package_dir))
    stage("merge", lambda: merge(downstream, tree))
    stage(
        "finalize",
        lambda: finalize(tree, downstream, product_name=config.product_name),
    )

    result.artifact = stage(
        "package", lambda: package(tree, layout, config.cursor_version)
    )
    return result


def _extract_fresh(archive: Path, target_dir: Path) -> Path:
    remove_path(target_dir)
    return extract(archive, target_dir)


def _fetch_release(spec: DownloadSpec, version: VersionSpec) -> FetchResult:
    result = fetch(spec)
    if result.status is FetchStatus.CACHE_HIT and not version.is_latest:
        # Cache names carry no version: a pin changed since the last run
        # is not noticed.
        logger.warning(
            "Using cached %s for pinned version %s; delete it to re-download",
            spec.destination,
            version,
        )
    return result
