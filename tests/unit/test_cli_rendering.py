"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import pytest
import typer

from prooftext.cli_rendering import echo_difference, exit_with_command_error
from prooftext.errors import CommandStageError
from prooftext.text.diffing import get_difference


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = CommandStageError(
        stage="config",
        detail="Config file not found: `missing.yml`.",
        hint="Provide an existing path via `--config <path.yaml>`.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("to-id", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "to-id failed at stage `config`" in captured.err
    assert "Hint: Provide an existing path via `--config <path.yaml>`." in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("decode", RuntimeError("unexpected failure"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "decode failed: unexpected failure" in captured.err


def test_echo_difference_prints_labeled_parts(capsys: pytest.CaptureFixture[str]) -> None:
    """Diff rows are printed in prefix/left/right/suffix order."""

    echo_difference(get_difference("Hello, World!", "Hello, Universe!"))

    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "prefix: 'Hello, '",
        "left: 'World'",
        "right: 'Universe'",
        "suffix: '!'",
    ]
