"""CLI entrypoint for prefixed-id."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from prefixed_id.core.config import Settings, get_settings
from prefixed_id.core.errors import GenerateError
from prefixed_id.core.logging import configure_logging, get_logger
from prefixed_id.models.dto import CheckResult, GenerateResult
from prefixed_id.utils.ids import embedded_prefix, generate as generate_id

app = typer.Typer(name="pxid", help="Generate prefixed, checksummed base32 identifiers")

logger = get_logger(__name__)


def _load_settings(config: Optional[Path]) -> Settings:
    settings = Settings.from_yaml(config) if config else get_settings()
    configure_logging(settings.log_level, use_json=settings.json_logs)
    return settings


def _echo_json(results: list) -> None:
    typer.echo(json.dumps([result.model_dump() for result in results], indent=2))


@app.command()
def generate(
    prefixes: Optional[List[str]] = typer.Argument(None, help="Prefixes to embed"),
    count: Optional[int] = typer.Option(None, "--count", "-n", min=1, help="Identifiers per prefix"),
    keep_going: Optional[bool] = typer.Option(
        None, "--keep-going/--fail-fast", help="Continue past invalid prefixes"
    ),
    json_output: Optional[bool] = typer.Option(None, "--json/--text", help="Emit JSON instead of text"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to YAML config"),
) -> None:
    """Print one identifier per prefix as '<prefix>: <id>'."""
    settings = _load_settings(config)
    count = count if count is not None else settings.count
    keep_going = keep_going if keep_going is not None else settings.keep_going
    as_json = json_output if json_output is not None else settings.json_output

    results: list[GenerateResult] = []
    failed = False
    for prefix in prefixes or []:
        result = GenerateResult(prefix=prefix)
        try:
            for _ in range(count):
                result.ids.append(generate_id(prefix))
        except GenerateError as exc:
            logger.debug("Rejected prefix", extra={"ctx_prefix": prefix, "ctx_error": type(exc).__name__})
            result.error = str(exc)
            failed = True
        results.append(result)
        if not as_json:
            for identifier in result.ids:
                typer.echo(f"{prefix}: {identifier}")
            if result.error:
                typer.echo(f"{prefix}: {result.error}", err=True)
        if result.error and not keep_going:
            break

    if as_json:
        _echo_json(results)
    if failed:
        raise typer.Exit(code=1)


@app.command()
def check(
    prefixes: Optional[List[str]] = typer.Argument(None, help="Prefixes to validate"),
    json_output: Optional[bool] = typer.Option(None, "--json/--text", help="Emit JSON instead of text"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to YAML config"),
) -> None:
    """Validate prefixes without generating identifiers."""
    settings = _load_settings(config)
    as_json = json_output if json_output is not None else settings.json_output

    results: list[CheckResult] = []
    for prefix in prefixes or []:
        try:
            results.append(CheckResult(prefix=prefix, valid=True, embedded=embedded_prefix(prefix)))
        except GenerateError as exc:
            results.append(CheckResult(prefix=prefix, valid=False, error=str(exc)))

    if as_json:
        _echo_json(results)
    else:
        for result in results:
            if result.valid:
                typer.echo(f"{result.prefix}: ok ({result.embedded})")
            else:
                typer.echo(f"{result.prefix}: {result.error}", err=True)
    if not all(result.valid for result in results):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
