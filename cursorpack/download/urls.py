from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from cursorpack.config import VersionSpec
from cursorpack.targets import BuildTarget

CURSOR_LATEST_URL = "https://downloader.cursor.sh/linux/appImage/x64"
CURSOR_RELEASE_URL = (
    "https://dl.todesktop.com/230313mzl4w4u92/versions/{version}/linux/appImage/x64"
)
VSCODE_LATEST_URL = "https://code.visualstudio.com/sha/download?build=stable&os={os}"
VSCODE_RELEASE_URL = "https://update.code.visualstudio.com/{version}/{os}/stable"
APPIMAGETOOL_URL = (
    "https://github.com/AppImage/AppImageKit/releases/download/13/"
    "appimagetool-{arch}.AppImage"
)


class Component(str, Enum):
    CURSOR = "cursor"
    VSCODE = "vscode"
    APPIMAGETOOL = "appimagetool"


@dataclass(frozen=True)
class DownloadSpec:
    url: str
    destination: Path

    @property
    def satisfied(self) -> bool:
        return self.destination.exists()


def resolve_url(
    component: Component,
    version: VersionSpec,
    target: BuildTarget,
) -> str:
    if component is Component.CURSOR:
        # Only the x64 build is published; its app resources are portable.
        if version.is_latest:
            return CURSOR_LATEST_URL
        return CURSOR_RELEASE_URL.format(version=version.value)

    if component is Component.VSCODE:
        if version.is_latest:
            return VSCODE_LATEST_URL.format(os=target.shell_latest_os)
        return VSCODE_RELEASE_URL.format(
            version=version.value,
            os=target.shell_release_os,
        )

    return APPIMAGETOOL_URL.format(arch=target.tool_arch)


def destination_name(component: Component, target: BuildTarget) -> str:
    if component is Component.CURSOR:
        return "cursor.AppImage"
    if component is Component.VSCODE:
        return f"vscode-{target.arch_label}.tar.gz"
    return "appimagetool"


def download_spec(
    component: Component,
    version: VersionSpec,
    target: BuildTarget,
    downloads_dir: Path,
) -> DownloadSpec:
    return DownloadSpec(
        url=resolve_url(component, version, target),
        destination=downloads_dir / destination_name(component, target),
    )
