from dataclasses import dataclass
from pathlib import Path

from cursorpack.config import BuildConfig, VersionSpec
from cursorpack.targets import BuildTarget


@dataclass(frozen=True)
class BuildLayout:
    downloads_dir: Path
    build_dir: Path
    dist_dir: Path
    target: BuildTarget
    product_name: str = "cursor"

    @classmethod
    def for_target(cls, config: BuildConfig, target: BuildTarget) -> "BuildLayout":
        return cls(
            downloads_dir=config.downloads_dir,
            build_dir=config.build_dir,
            dist_dir=config.dist_dir,
            target=target,
            product_name=config.product_name,
        )

    @property
    def downstream_dir(self) -> Path:
        return self.build_dir / f"{self.product_name}-extract"

    @property
    def base_dir(self) -> Path:
        return self.build_dir / f"vscode-{self.target.arch_label}"

    @property
    def package_dir(self) -> Path:
        return self.build_dir / f"{self.product_name}-{self.target.arch_label}"

    def artifact_stem(self, version: VersionSpec) -> str:
        return f"{self.product_name}_{version.value}_{self.target.arch_label}"

    def tar_path(self, version: VersionSpec) -> Path:
        return self.dist_dir / f"{self.artifact_stem(version)}.tar.gz"

    def image_path(self, version: VersionSpec) -> Path:
        return self.dist_dir / f"{self.artifact_stem(version)}.AppImage"

    def all_dirs(self) -> list[Path]:
        return [self.downloads_dir, self.build_dir, self.dist_dir]
