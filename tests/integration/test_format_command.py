"""Integration tests for the `format` CLI command."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from kdocfmt.cli import app
from kdocfmt.errors import PipelineStageError


def test_format_command_rewrites_files(
    tmp_path: Path,
    write_kotlin: Callable[[str, str], Path],
    unformatted_source: str,
    formatted_source: str,
) -> None:
    """Format should rewrite comments in place and print a run summary."""

    path = write_kotlin("src/Sample.kt", unformatted_source)
    runner = CliRunner()

    result = runner.invoke(app, ["format", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert path.read_text(encoding="utf-8") == formatted_source
    assert f"Reformatted: {path}" in result.output
    assert "[progress] command=format | 1/3 stage=discover" in result.output
    assert "Files checked: 1" in result.output
    assert "Files changed: 1" in result.output
    assert "Comments changed: 2" in result.output


def test_format_command_check_mode_fails_without_writing(
    write_kotlin: Callable[[str, str], Path], unformatted_source: str
) -> None:
    """`--check` should report files that would change and exit with code 1."""

    path = write_kotlin("Sample.kt", unformatted_source)
    runner = CliRunner()

    result = runner.invoke(app, ["format", "--check", str(path)])

    assert result.exit_code == 1
    assert path.read_text(encoding="utf-8") == unformatted_source
    assert f"Would reformat: {path}" in result.output


def test_format_command_check_mode_passes_for_formatted_sources(
    write_kotlin: Callable[[str, str], Path], formatted_source: str
) -> None:
    """`--check` should exit cleanly when nothing would change."""

    path = write_kotlin("Sample.kt", formatted_source)
    runner = CliRunner()

    result = runner.invoke(app, ["format", "--check", str(path)])

    assert result.exit_code == 0, result.output
    assert "Files changed: 0" in result.output


def test_format_command_max_line_width_option(write_kotlin: Callable[[str, str], Path]) -> None:
    """`--max-line-width` should control wrapping."""

    path = write_kotlin("A.kt", "/** aaa bbb ccc ddd eee fff */\n")
    runner = CliRunner()

    result = runner.invoke(app, ["format", "--max-line-width", "20", str(path)])

    assert result.exit_code == 0, result.output
    assert path.read_text(encoding="utf-8") == "/**\n * aaa bbb ccc ddd\n * eee fff\n */\n"


def test_format_command_reads_width_from_environment(
    write_kotlin: Callable[[str, str], Path],
) -> None:
    """`KDOCFMT_MAX_LINE_WIDTH` should control wrapping when no option is given."""

    path = write_kotlin("A.kt", "/** aaa bbb ccc ddd eee fff */\n")
    runner = CliRunner()

    result = runner.invoke(app, ["format", str(path)], env={"KDOCFMT_MAX_LINE_WIDTH": "20"})

    assert result.exit_code == 0, result.output
    assert path.read_text(encoding="utf-8") == "/**\n * aaa bbb ccc ddd\n * eee fff\n */\n"


def test_format_command_uses_yaml_config(
    tmp_path: Path, write_kotlin: Callable[[str, str], Path], unformatted_source: str
) -> None:
    """`--config` should supply extensions and exclusions."""

    generated = write_kotlin("build/Generated.kts", unformatted_source)
    script = write_kotlin("src/build.kts", unformatted_source)
    config_path = tmp_path / "kdocfmt.yaml"
    config_path.write_text("extensions: [kts]\nexclude: ['*/build/*']\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["format", "--config", str(config_path), str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert generated.read_text(encoding="utf-8") == unformatted_source
    assert script.read_text(encoding="utf-8") != unformatted_source
    assert "Files checked: 1" in result.output


def test_format_command_reports_invalid_config(tmp_path: Path) -> None:
    """An invalid config file fails at the config stage."""

    config_path = tmp_path / "kdocfmt.yaml"
    config_path.write_text("colour: blue\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["format", "--config", str(config_path), str(tmp_path)])

    assert result.exit_code == 1
    assert "format failed at stage `config`" in result.output
    assert "unsupported keys: colour" in result.output


def test_format_command_reports_missing_config_file(tmp_path: Path) -> None:
    """A missing `--config` path fails with a stage-aware diagnostic."""

    runner = CliRunner()

    result = runner.invoke(
        app, ["format", "--config", str(tmp_path / "missing.yaml"), str(tmp_path)]
    )

    assert result.exit_code == 1
    assert "format failed at stage `config`: Config file not found" in result.output
    assert "Hint: Provide an existing path via `--config <path.yaml>`." in result.output


def test_format_command_reports_invalid_environment(tmp_path: Path) -> None:
    """An unusable environment width fails at the config stage."""

    runner = CliRunner()

    result = runner.invoke(app, ["format", str(tmp_path)], env={"KDOCFMT_MAX_LINE_WIDTH": "3"})

    assert result.exit_code == 1
    assert "format failed at stage `config`: Invalid environment configuration" in result.output


def test_format_command_requires_paths() -> None:
    """Format without paths fails at the discover stage."""

    runner = CliRunner()

    result = runner.invoke(app, ["format"])

    assert result.exit_code == 1
    assert "format failed at stage `discover`: No source paths were given." in result.output


def test_format_command_reports_missing_path(tmp_path: Path) -> None:
    """A missing source path is reported with a hint."""

    runner = CliRunner()

    result = runner.invoke(app, ["format", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "format failed at stage `discover`: Source path not found" in result.output
    assert "Hint: Verify the path exists and rerun." in result.output


def test_format_command_reports_pipeline_stage_error(
    monkeypatch: MonkeyPatch, tmp_path: Path
) -> None:
    """Stage errors raised by the pipeline are rendered with their hint."""

    def _failing_run(*_: object, **__: object) -> None:
        """Raise a stage-specific error to simulate a write failure."""

        raise PipelineStageError(
            stage="write",
            detail="Failed to write `A.kt`: read-only file system",
            hint="Verify file permissions and rerun.",
        )

    monkeypatch.setattr("kdocfmt.cli.KdocfmtPipeline.run", _failing_run)
    runner = CliRunner()

    result = runner.invoke(app, ["format", str(tmp_path)])

    assert result.exit_code == 1
    assert "format failed at stage `write`" in result.output
    assert "Hint: Verify file permissions and rerun." in result.output


def test_app_without_arguments_shows_help() -> None:
    """Invoking the app with no arguments prints help."""

    runner = CliRunner()

    result = runner.invoke(app, [])

    assert "format" in result.output
    assert "comment" in result.output
