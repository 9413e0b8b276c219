"""Command line interface: inspect and export the registration table."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from .environment import Environment
from .errors import LoadError, ServerNotRegisteredError
from .loaders import load_config, load_config_or_default
from .models.config import RegistryConfig
from .registry import RegistrationTable, make_registration_table
from .validation import validate_config_file


def _load(config_path: Path | None) -> RegistryConfig:
    if config_path is not None:
        return load_config(config_path)
    return load_config_or_default(Path.cwd())


def _table(ctx: click.Context) -> RegistrationTable:
    try:
        config = _load(ctx.obj["config"])
    except (LoadError, ValidationError) as e:
        raise click.ClickException(str(e)) from e
    return make_registration_table(environment=Environment.from_os(), config=config)


@click.group(help="Build the language server registration table for the editor.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to lsp-registry.json (or a directory containing it).",
)
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = config_path


@main.command("list", help="List registered servers and their launch commands.")
@click.pass_context
def list_servers(ctx: click.Context) -> None:
    table = _table(ctx)
    for server_id, descriptor in table.items():
        click.echo(f"{server_id}: {' '.join(descriptor.command)} [{', '.join(descriptor.file_types)}]")


@main.command("export", help="Print the table as JSON for the editor's client.")
@click.option("--indent", type=int, default=2, show_default=True)
@click.pass_context
def export(ctx: click.Context, indent: int) -> None:
    table = _table(ctx)
    click.echo(json.dumps(table.to_dict(), indent=indent))


@main.command("root", help="Print the project root a server would use for FILE.")
@click.argument("file", type=click.Path(path_type=Path))
@click.option("--server", "server_id", required=True, help="Registered server id.")
@click.pass_context
def root(ctx: click.Context, file: Path, server_id: str) -> None:
    table = _table(ctx)
    try:
        click.echo(str(table.resolve_root(server_id, file)))
    except ServerNotRegisteredError as e:
        raise click.ClickException(str(e)) from e


@main.command("validate", help="Validate an lsp-registry.json file.")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(path: Path) -> None:
    try:
        result = validate_config_file(path)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise click.ClickException(f"{path} is not UTF-8 text: {e}") from e
    for issue in result.issues:
        click.echo(str(issue))
    if not result.valid:
        sys.exit(1)
    click.echo("OK")


if __name__ == "__main__":
    main()
