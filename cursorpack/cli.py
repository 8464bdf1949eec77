import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from cursorpack.config import LATEST, BuildConfig, VersionSpec
from cursorpack.errors import CursorpackError, UnsupportedTargetError
from cursorpack.logger import setup_logger
from cursorpack.pipeline import run_pipeline
from cursorpack.targets import known_targets, resolve
from cursorpack.utils.env import require_tools

logger = logging.getLogger(__name__)


app = typer.Typer(
    name="cursorpack",
    help="Cursor for ARM Linux: repackage Cursor on top of VS Code releases",
    add_completion=False,
)


@app.command()
def build(
    system: Optional[str] = typer.Argument(
        None,
        help="Target system (example: aarch64-linux)",
        show_default=False,
    ),
    cursor_version: str = typer.Option(
        LATEST,
        "--cursor-version",
        help="Cursor release to repackage",
    ),
    vscode_version: str = typer.Option(
        LATEST,
        "--vscode-version",
        help="VS Code release used as the base",
    ),
    work_dir: Path = typer.Option(
        Path("."),
        "--work-dir",
        "-w",
        help="Directory holding downloads/, build/ and dist/",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
):

    setup_logger(verbose=verbose)

    try:
        config = BuildConfig(
            cursor_version=VersionSpec(value=cursor_version),
            vscode_version=VersionSpec(value=vscode_version),
            work_root=work_dir,
        )

        if not system:
            typer.echo("Usage: cursorpack <system>")
            typer.echo(f"Supported systems: {' '.join(config.supported_systems)}")
            typer.echo(f"Buildable systems: {' '.join(known_targets())}")
            sys.exit(1)

        if not config.is_advertised(system):
            raise UnsupportedTargetError(
                f"Unsupported system: {system}\n"
                f"Supported systems: {' '.join(config.supported_systems)}"
            )

        try:
            target = resolve(system)
        except UnsupportedTargetError as exc:
            raise UnsupportedTargetError(
                f"{exc}\nBuildable systems: {' '.join(known_targets())}"
            ) from None
        require_tools(config.required_tools)

        typer.echo(f"Building Cursor {config.cursor_version} for {target.id}")
        result = run_pipeline(config, target)

        typer.echo("Build complete! Check the 'dist' directory for the output files.")
        typer.echo(f" - {result.artifact.tar_path}")
        typer.echo(f" - {result.artifact.image_path}")

    except CursorpackError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        sys.exit(exc.exit_code)

    except Exception:
        logger.debug("Unhandled error", exc_info=True)
        typer.secho(
            "Internal error occurred. Run with --verbose for details.",
            fg=typer.colors.RED,
            err=True,
        )
        sys.exit(1)


def run_cli() -> None:
    app()


if __name__ == "__main__":
    run_cli()
