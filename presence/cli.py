#!/usr/bin/env python3
"""
Command-line interface for pydantic-presence.

Inspect how a PATCH document decodes, apply it to a record, or print the JSON
schema of a patch model. Models are given as module:Class import paths.

    presence inspect patch.json --model presence.demo:PatchUserRequest
    presence apply user.json patch.json --record-model presence.demo:User --patch-model presence.demo:PatchUserRequest
"""

from __future__ import annotations

import importlib
import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

import pydantic
import typer

from presence.config import settings
from presence.exceptions import PresenceError
from presence.field import PresenceField
from presence.introspection import apply_specified, get_presence_fields, specified_values
from presence.options import SerializerOptions, add_presence_support
from presence.serializer import JsonSerializer

app = typer.Typer(
    name='presence',
    help='Decode and apply presence-tracking PATCH documents',
    add_completion=False,
)

logger = logging.getLogger(__name__)


def _load_model(path: str) -> type[Any]:
    """Resolve a module:Class import path."""
    module_name, sep, attr = path.partition(':')
    if not sep or not module_name or not attr:
        raise typer.BadParameter(f"Expected 'module:Class', got {path!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise typer.BadParameter(f'Cannot import {module_name!r}: {e}') from e
    try:
        model = getattr(module, attr)
    except AttributeError as e:
        raise typer.BadParameter(f'{module_name!r} has no attribute {attr!r}') from e
    if not isinstance(model, type):
        raise typer.BadParameter(f'{path!r} is not a class')
    return model


def _read_document(path: str) -> str:
    if path == '-':
        return sys.stdin.read()
    return Path(path).read_text()


def _build_serializer(verbose: bool) -> JsonSerializer:
    logging.basicConfig(level=logging.DEBUG if verbose else settings.LOG_LEVEL, format='[%(levelname)s] %(message)s')
    options = add_presence_support(SerializerOptions.from_settings(settings))
    return JsonSerializer(options)


def _describe(field: PresenceField[Any], serializer: JsonSerializer) -> str:
    if not field.is_specified:
        return 'unspecified'
    return json.dumps(serializer.to_jsonable(field.unwrap()))


def _fail(message: str) -> NoReturn:
    typer.secho(f'Error: {message}', fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


@app.command()
def inspect(
    document: str = typer.Argument(..., help='PATCH document path (- for stdin)'),
    model: str = typer.Option(..., '--model', '-m', help='Patch model as module:Class'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Show the presence state of every wrapper field in a PATCH document."""
    patch_model = _load_model(model)
    serializer = _build_serializer(verbose)

    try:
        patch = serializer.deserialize(_read_document(document), patch_model)
    except (PresenceError, pydantic.ValidationError) as e:
        _fail(str(e))

    for name in get_presence_fields(patch_model):
        typer.echo(f'{name}: {_describe(getattr(patch, name), serializer)}')


@app.command()
def apply(
    record: str = typer.Argument(..., help='Record document path (- for stdin)'),
    patch: str = typer.Argument(..., help='PATCH document path (- for stdin)'),
    record_model: str = typer.Option(..., '--record-model', help='Record model as module:Class'),
    patch_model: str = typer.Option(..., '--patch-model', help='Patch model as module:Class'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Apply the specified fields of a PATCH document to a record and print the result."""
    if record == '-' and patch == '-':
        raise typer.BadParameter('Only one of RECORD and PATCH can be read from stdin')

    record_type = _load_model(record_model)
    patch_type = _load_model(patch_model)
    serializer = _build_serializer(verbose)

    try:
        current = serializer.deserialize(_read_document(record), record_type)
        request = serializer.deserialize(_read_document(patch), patch_type)
        updated = apply_specified(current, request)
    except (PresenceError, pydantic.ValidationError) as e:
        _fail(str(e))

    logger.info(f'Applied {len(specified_values(request))} specified field(s) to {record_type.__name__}')
    typer.echo(serializer.serialize(updated))


@app.command()
def schema(
    model: str = typer.Option(..., '--model', '-m', help='Model as module:Class'),
) -> None:
    """Print the JSON schema of a model."""
    target = _load_model(model)
    serializer = _build_serializer(verbose=False)

    try:
        document = serializer.json_schema(target)
    except PresenceError as e:
        _fail(str(e))

    typer.echo(json.dumps(document, indent=settings.JSON_INDENT or 2))


if __name__ == '__main__':
    app()
