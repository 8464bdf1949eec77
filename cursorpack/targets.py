"""Per-architecture build parameters.

Every architecture-dependent value used by the pipeline lives in
``_TARGETS``. Supporting a new architecture means adding one row.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from cursorpack.errors import UnsupportedTargetError


@dataclass(frozen=True)
class BuildTarget:
    id: str
    arch_label: str
    shell_latest_os: str
    shell_release_os: str
    interpreter_path: str
    packaging_arch_tag: str
    tool_arch: str


_TARGETS: Dict[str, BuildTarget] = {
    target.id: target
    for target in (
        BuildTarget(
            id="aarch64-linux",
            arch_label="linux-arm64",
            shell_latest_os="linux-arm64",
            shell_release_os="linux-arm64",
            interpreter_path="/lib/ld-linux-aarch64.so.1",
            packaging_arch_tag="arm_aarch64",
            tool_arch="aarch64",
        ),
        BuildTarget(
            id="armv7l-linux",
            arch_label="linux-arm32",
            shell_latest_os="linux-arm32",
            shell_release_os="linux-armhf",
            interpreter_path="/lib/ld-linux.so.3",
            packaging_arch_tag="arm",
            tool_arch="armhf",
        ),
    )
}


def resolve(target_id: str) -> BuildTarget:
    try:
        return _TARGETS[target_id]
    except KeyError:
        raise UnsupportedTargetError(
            f"Unsupported system: {target_id}"
        ) from None


def known_targets() -> Tuple[str, ...]:
    return tuple(_TARGETS)
