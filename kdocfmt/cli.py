"""Command-line interface for kdocfmt.

Responsibilities:
- Expose user-facing commands for formatting files and single comments.
- Convert CLI arguments into `KdocfmtConfig` and run the pipeline.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_run_summary, exit_with_command_error
from .config import ConfigLoader, KdocfmtConfig, RuntimeConfigSources
from .errors import KDocFormatError, PipelineStageError
from .kdoc.formatter import format_kdoc
from .pipeline import KdocfmtPipeline
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="kdocfmt",
    no_args_is_help=True,
    help="KDoc comment formatter.",
)


class RunProgressIndicator:
    """Render deterministic per-stage progress lines for file formatting runs."""

    _SPINNER_FRAMES = "|/-\\"

    def __init__(self, command_name: str) -> None:
        """Initialize progress indicator metadata for a command invocation."""

        self._command_name = command_name

    def on_stage_start(self, stage_name: str, stage_index: int, stage_total: int) -> None:
        """Print one progress line for a stage start transition."""

        spinner = self._SPINNER_FRAMES[(stage_index - 1) % len(self._SPINNER_FRAMES)]
        typer.echo(
            f"[progress] command={self._command_name} "
            f"{spinner} {stage_index}/{stage_total} stage={stage_name}"
        )


def _load_yaml_config(config_path: Path | None) -> KdocfmtConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _load_env_config() -> KdocfmtConfig:
    """Load defaults from `KDOCFMT_*` environment variables."""

    try:
        return ConfigLoader.from_env(os.environ)
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Fix or unset the `KDOCFMT_*` environment variables.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    max_line_width: int | None,
) -> KdocfmtConfig:
    """Resolve effective command config from YAML or env defaults and CLI overrides."""

    loaded_config = _load_yaml_config(config_file)
    base_config = loaded_config if loaded_config is not None else _load_env_config()

    runtime_cli_values: dict[str, str] = {}
    if max_line_width is not None:
        runtime_cli_values["max_line_width"] = str(max_line_width)

    return KdocfmtConfig(
        max_line_width=base_config.max_line_width,
        extensions=base_config.extensions,
        exclude=base_config.exclude,
        runtime_sources=RuntimeConfigSources(cli=runtime_cli_values, env=os.environ),
    )


def _resolve_line_width(config: KdocfmtConfig) -> int:
    """Resolve the effective line width and map invalid values to stage errors."""

    try:
        return config.resolved_max_line_width(config.runtime_sources)
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid configuration: {exc}",
            hint="Fix the config file, environment, or CLI values and rerun.",
        ) from exc


@app.command("format")
def format_command(
    paths: Annotated[
        list[Path] | None,
        typer.Argument(help="Kotlin files or directories to format."),
    ] = None,
    check: Annotated[
        bool,
        typer.Option(
            "--check",
            help="Report files that would change without writing them; exit 1 if any.",
        ),
    ] = False,
    max_line_width: Annotated[
        int | None,
        typer.Option("--max-line-width", help="Maximum line width (overrides config/env)."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with command defaults."),
    ] = None,
) -> None:
    """Format KDoc comments in Kotlin sources in place."""

    try:
        config = _resolve_command_config(config_file, max_line_width)
        progress = RunProgressIndicator(command_name="format")
        pipeline = KdocfmtPipeline(
            run_logger=RunLogger(),
            stage_progress_callback=progress.on_stage_start,
        )
        summary = pipeline.run(config, paths or [], check=check)
    except Exception as exc:
        exit_with_command_error("format", exc)

    echo_run_summary(summary)
    if check and summary.files_changed:
        raise typer.Exit(code=1)


@app.command("comment")
def comment_command(
    block_indent: Annotated[
        int,
        typer.Option("--block-indent", min=0, help="Column of the opening `/**`."),
    ] = 0,
    max_line_width: Annotated[
        int | None,
        typer.Option("--max-line-width", help="Maximum line width (overrides config/env)."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with command defaults."),
    ] = None,
) -> None:
    """Format one KDoc comment read from stdin and print it."""

    try:
        config = _resolve_command_config(config_file, max_line_width)
        width = _resolve_line_width(config)
        comment = typer.get_text_stream("stdin").read().strip()
        try:
            formatted = format_kdoc(comment, block_indent, width)
        except (KDocFormatError, ValueError) as exc:
            raise PipelineStageError(
                stage="format",
                detail=str(exc),
                hint="Pass exactly one comment that starts with `/**` and ends with `*/`.",
            ) from exc
    except Exception as exc:
        exit_with_command_error("comment", exc)

    typer.echo(formatted)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
