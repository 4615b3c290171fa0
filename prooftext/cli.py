"""Command-line interface for prooftext.

Responsibilities:
- Expose the text primitives for manual inspection of rule inputs.
- Resolve language capabilities from built-ins and optional YAML config.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_difference, echo_language_list, exit_with_command_error
from .config import ConfigLoader, ProoftextConfig
from .errors import CommandStageError, LanguageNotFoundError, StreamDecodeError
from .io.streams import read_stream
from .languages import Language
from .telemetry.logger import RunLogger
from .text import (
    classify_case,
    escape_xml,
    filter_xml,
    get_difference,
    speller_text,
    titlecase_global,
    to_id,
    trim_whitespace,
    utf16_length,
)

app = typer.Typer(
    name="prooftext",
    no_args_is_help=True,
    help="Inspect locale-aware text primitives used by proofreading rules.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Optional YAML config with default language and profiles."),
]
LanguageOption = Annotated[
    str | None,
    typer.Option("--language", "-l", help="Language code; defaults to the configured one."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log command phases to stderr."),
]


def _load_config(config_path: Path | None) -> ProoftextConfig:
    """Load YAML or environment config and map failures to stage errors."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Check `PROOFTEXT_DEFAULT_LANGUAGE` and `PROOFTEXT_LOG_LEVEL`.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _resolve_language(config: ProoftextConfig, code: str | None) -> Language:
    """Resolve a language code against the configured registry."""

    try:
        return config.language(code)
    except LanguageNotFoundError as exc:
        raise CommandStageError(
            stage="language",
            detail=str(exc),
            hint="Run `prooftext languages` to list available codes.",
        ) from exc


def _run_logger(verbose: bool, config: ProoftextConfig) -> RunLogger | None:
    """Return a phase logger when verbose output was requested."""

    if not verbose:
        return None
    return RunLogger(level=config.log_level)


@app.command("classify")
def classify_command(
    word: Annotated[str, typer.Argument(help="Word to classify.")],
) -> None:
    """Print the casing pattern of a word."""

    typer.echo(classify_case(word).value)


@app.command("to-id")
def to_id_command(
    text: Annotated[str, typer.Argument(help="Text to turn into an identifier.")],
    language: LanguageOption = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the locale-aware uppercase identifier for text."""

    try:
        config = _load_config(config_file)
        run_logger = _run_logger(verbose, config)
        resolved = _resolve_language(config, language)
        if run_logger is not None:
            run_logger.log_stage_start("to-id", language=resolved.code)
        identifier = to_id(text, resolved)
    except Exception as exc:
        exit_with_command_error("to-id", exc)

    if run_logger is not None:
        run_logger.log_stage_complete("to-id", language=resolved.code)
    typer.echo(identifier)


@app.command("diff")
def diff_command(
    first: Annotated[str, typer.Argument(help="Original text.")],
    second: Annotated[str, typer.Argument(help="Changed text.")],
) -> None:
    """Print common prefix, differing middles, and common suffix."""

    echo_difference(get_difference(first, second))


@app.command("titlecase")
def titlecase_command(
    text: Annotated[str, typer.Argument(help="Text to title-case.")],
    language: Annotated[
        str | None,
        typer.Option(
            "--language",
            "-l",
            help="Language code for exception words; omit for the global set.",
        ),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Print title-cased text, keeping articles and prepositions lowercase."""

    try:
        resolved = None
        if language is not None:
            resolved = _resolve_language(_load_config(config_file), language)
    except Exception as exc:
        exit_with_command_error("titlecase", exc)

    typer.echo(titlecase_global(text, resolved))


@app.command("speller")
def speller_command(
    text: Annotated[str, typer.Argument(help="Text to prepare for a speller.")],
) -> None:
    """Print speller-ready text between brackets with its UTF-16 length."""

    result = speller_text(text)
    typer.echo(f"[{result.text}]")
    typer.echo(f"utf16_length: {utf16_length(result.text)}")


@app.command("trim")
def trim_command(
    text: Annotated[str, typer.Argument(help="Text to trim.")],
) -> None:
    """Print text with outer whitespace and inner whitespace runs removed."""

    typer.echo(trim_whitespace(text))


@app.command("escape")
def escape_command(
    text: Annotated[str, typer.Argument(help="Text to escape for XML/HTML.")],
) -> None:
    """Print XML-escaped text."""

    typer.echo(escape_xml(text))


@app.command("strip-tags")
def strip_tags_command(
    text: Annotated[str, typer.Argument(help="Text containing simple markup.")],
) -> None:
    """Print text with tag-like substrings removed."""

    typer.echo(filter_xml(text))


@app.command("decode")
def decode_command(
    path: Annotated[Path, typer.Argument(help="File to decode.")],
    encoding: Annotated[
        str | None,
        typer.Option("--encoding", "-e", help="Encoding name; defaults to UTF-8."),
    ] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Decode a file line by line and print the text."""

    try:
        config = _load_config(config_file)
        run_logger = _run_logger(verbose, config)
        if run_logger is not None:
            run_logger.log_stage_start("decode", encoding=encoding or "utf-8")
        try:
            with path.open("rb") as stream:
                content = read_stream(stream, encoding)
        except StreamDecodeError as exc:
            if run_logger is not None:
                run_logger.log_stage_failure("decode", type(exc).__name__)
            raise CommandStageError(
                stage="decode",
                detail=exc.detail,
                hint="Pass a valid codec name via `--encoding`.",
            ) from exc
        except OSError as exc:
            raise CommandStageError(
                stage="decode",
                detail=f"Failed to read `{path}`: {exc}",
                hint="Verify the input file exists and is readable.",
            ) from exc
    except Exception as exc:
        exit_with_command_error("decode", exc)

    if run_logger is not None:
        run_logger.log_stage_complete("decode")
    typer.echo(content, nl=False)


@app.command("languages")
def languages_command(config_file: ConfigOption = None) -> None:
    """List available language codes."""

    try:
        config = _load_config(config_file)
    except Exception as exc:
        exit_with_command_error("languages", exc)

    echo_language_list(config.registry())


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
