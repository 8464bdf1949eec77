from pathlib import Path
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cursorpack.errors import ConfigError

LATEST = "latest"

SUPPORTED_SYSTEMS: Tuple[str, ...] = (
    "aarch64-linux",
    "armv7l-linux",
    "x86_64-linux",
)

REQUIRED_TOOLS: Tuple[str, ...] = ("patchelf", "7z")


class VersionSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str = Field(
        default=LATEST,
        description="Pinned release version, or 'latest'",
        examples=["0.42.2", "1.93.1", LATEST],
    )

    @field_validator("value")
    @classmethod
    def validate_value(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ConfigError("Version cannot be empty")
        if "/" in value or "\\" in value:
            raise ConfigError(
                f"Version must not contain path separators: {value}"
            )
        return value

    @property
    def is_latest(self) -> bool:
        return self.value == LATEST

    def __str__(self) -> str:
        return self.value


class BuildConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    cursor_version: VersionSpec = Field(
        default_factory=VersionSpec,
        description="Cursor release to repackage",
    )
    vscode_version: VersionSpec = Field(
        default_factory=VersionSpec,
        description="VS Code release used as the base tree",
    )
    work_root: Path = Field(
        default_factory=Path.cwd,
        description="Directory holding downloads/, build/ and dist/",
    )
    product_name: str = Field(
        default="cursor",
        description="Binary and artifact name of the rebranded product",
    )
    supported_systems: Tuple[str, ...] = Field(
        default=SUPPORTED_SYSTEMS,
        description="Systems advertised to users",
    )
    required_tools: Tuple[str, ...] = Field(
        default=REQUIRED_TOOLS,
        description="Executables that must be on PATH before building",
    )

    @field_validator("work_root")
    @classmethod
    def validate_work_root(cls, value: Path) -> Path:
        if value.exists() and not value.is_dir():
            raise ConfigError(f"Work root is not a directory: {value}")
        return value

    @field_validator("product_name")
    @classmethod
    def validate_product_name(cls, value: str) -> str:
        if not value:
            raise ConfigError("Product name cannot be empty")
        if "/" in value or "\\" in value:
            raise ConfigError("Product name must not contain path separators")
        return value

    @property
    def downloads_dir(self) -> Path:
        return self.work_root / "downloads"

    @property
    def build_dir(self) -> Path:
        return self.work_root / "build"

    @property
    def dist_dir(self) -> Path:
        return self.work_root / "dist"

    def is_advertised(self, system: str) -> bool:
        return system in self.supported_systems
