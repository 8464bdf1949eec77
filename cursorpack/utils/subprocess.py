import os
import subprocess
from typing import Dict, List, Optional

from cursorpack.errors import BuildError


class SubprocessError(BuildError):
    pass


def run_command(
    command: List[str],
    *,
    extra_env: Optional[Dict[str, str]] = None,
) -> subprocess.CompletedProcess:
    """Run an external tool to completion; any non-zero exit is fatal.

    ``extra_env`` is layered over the current environment, so PATH changes
    made earlier in the process stay visible to the tool.
    """
    env = dict(os.environ, **extra_env) if extra_env else None

    try:
        result = subprocess.run(
            command,
            env=env,
            check=False,
            capture_output=True,
            text=True,
        )
    except OSError as exc:
        raise SubprocessError(
            f"Command not found: {command[0]}"
            if isinstance(exc, FileNotFoundError)
            else f"Failed to execute {command[0]}: {exc}"
        ) from exc

    if result.returncode != 0:
        raise SubprocessError(_describe_failure(command, result))

    return result


def _describe_failure(
    command: List[str],
    result: subprocess.CompletedProcess,
) -> str:
    lines = [f"{command[0]} exited with {result.returncode}: {' '.join(command)}"]
    for name, stream in (("stdout", result.stdout), ("stderr", result.stderr)):
        if stream and stream.strip():
            lines.append(f"{name}:\n{stream.strip()}")
    return "\n".join(lines)
