from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from jsonmask import __version__
from jsonmask.batch import ObfuscationRun, new_context, run_batch
from jsonmask.config import TomlTable, merge_payload, obfuscate_defaults
from jsonmask.exceptions import JsonMaskError
from jsonmask.runtime.json_io import (
    load_documents,
    render_document,
    render_table_lines,
)

app = typer.Typer(add_completion=False)

_SETTING_PARAMS = ("pretty", "show_keys", "show_values", "obfuscate_keys", "seed")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"jsonmask {__version__}")
        raise typer.Exit(code=0)


def _param_is_command_line(ctx: typer.Context, param: str) -> bool:
    # typer may ship its own click, so match the enum member by name.
    source = ctx.get_parameter_source(param)
    return source is not None and source.name == "COMMANDLINE"


def _command_line_settings(ctx: typer.Context, values: TomlTable) -> TomlTable:
    # Flags left at their defaults defer to jsonmask.toml.
    return {
        name: values[name] if _param_is_command_line(ctx, name) else None
        for name in _SETTING_PARAMS
    }


def render_run(
    run: ObfuscationRun,
    *,
    pretty: bool = False,
    show_keys: bool = False,
    show_values: bool = False,
) -> list[str]:
    lines: list[str] = []
    if show_keys:
        lines.extend(render_table_lines(run.context.keys.items()))
    if show_values:
        lines.extend(render_table_lines(run.context.values.items()))
    lines.extend(render_document(output, pretty=pretty) for output in run.outputs)
    return lines


@app.command()
def main(
    ctx: typer.Context,
    files: list[str] = typer.Argument(
        ...,
        metavar="JSON_FILE...",
        help="Files containing JSON to obfuscate. A single `-` reads JSON values from stdin.",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty/--compact",
        help="Pretty-print each output document.",
    ),
    show_keys: bool = typer.Option(
        False,
        "--show-keys/--hide-keys",
        help="Print the key mapping before the output.",
    ),
    show_values: bool = typer.Option(
        False,
        "--show-values/--hide-values",
        help="Print the value mapping before the output.",
    ),
    obfuscate_keys: bool = typer.Option(
        True,
        "--obfuscate-keys/--keep-keys",
        help="Replace object keys as well as values.",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed the random source for reproducible output.",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to a jsonmask.toml file (default: ./jsonmask.toml if present).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Replace every JSON value (and key) with random data of the same shape."""
    options: TomlTable = {
        "pretty": pretty,
        "show_keys": show_keys,
        "show_values": show_values,
        "obfuscate_keys": obfuscate_keys,
        "seed": seed,
    }
    try:
        file_settings = merge_payload(obfuscate_defaults(config_path=config), options)
        settings = merge_payload(_command_line_settings(ctx, options), file_settings)
        documents = load_documents(files)
    except JsonMaskError as exc:
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        raise typer.Exit(code=2) from exc
    context = new_context(
        seed=settings["seed"],
        obfuscate_keys=bool(settings["obfuscate_keys"]),
    )
    run = run_batch(documents, context)
    for line in render_run(
        run,
        pretty=bool(settings["pretty"]),
        show_keys=bool(settings["show_keys"]),
        show_values=bool(settings["show_values"]),
    ):
        typer.echo(line)
