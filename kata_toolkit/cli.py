from __future__ import annotations

import json
import logging
from typing import Any, NoReturn, Optional

import typer

from kata_toolkit.core.braces.expand_braces import expand_braces
from kata_toolkit.core.compass.compass_points import create_compass_points
from kata_toolkit.core.dominoes.domino_row import can_dominoes_make_row, validate_dominoes
from kata_toolkit.core.errors import InputLoadError, InputValidationError, KataError
from kata_toolkit.core.io.load_input import load_input, load_patterns
from kata_toolkit.core.matrix.zigzag import zigzag_matrix
from kata_toolkit.core.ranges.extract_ranges import extract_ranges

app = typer.Typer(add_completion=False, no_args_is_help=True)

FORMATS = ("text", "json")


@app.callback()
def _callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """Kata toolkit CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("braces")
def braces(
    pattern: Optional[str] = typer.Argument(None, help="Pattern to expand, e.g. 'a{b,c}d'"),
    file: Optional[str] = typer.Option(
        None, "--file", help="YAML/JSON file with a list of patterns"
    ),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Expand shell-style brace groups."""
    _check_format(format)

    if (pattern is None) == (file is None):
        _fail(
            [
                InputValidationError(
                    code="E_BRACES_INPUT",
                    message="give exactly one of PATTERN or --file",
                    path="pattern",
                )
            ],
            exit_code=2,
            format=format,
            command="braces",
        )

    if file is not None:
        try:
            patterns = load_patterns(file)
        except InputLoadError as e:
            _fail([e], exit_code=1, format=format, command="braces")
        except InputValidationError as e:
            _fail([e], exit_code=2, format=format, command="braces")
    else:
        assert pattern is not None
        patterns = [pattern]

    results: list[str] = []
    errors: list[KataError] = []
    for p in patterns:
        try:
            results.extend(expand_braces(p))
        except KataError as e:
            errors.append(e)

    if errors:
        _fail(errors, exit_code=2, format=format, command="braces")

    if format == "json":
        _emit_json("braces", ok=True, errors=[], count=len(results), results=results)
        return
    for r in results:
        typer.echo(r)


@app.command("compass")
def compass(
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Print the 32 compass points with their azimuths."""
    _check_format(format)
    points = create_compass_points()

    if format == "json":
        _emit_json(
            "compass",
            ok=True,
            errors=[],
            results=[{"abbreviation": p.abbreviation, "azimuth": p.azimuth} for p in points],
        )
        return
    for p in points:
        typer.echo(f"{p.abbreviation}\t{p.azimuth:.2f}")


@app.command("zigzag")
def zigzag(
    n: int = typer.Argument(..., help="Matrix dimension"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Print an n x n zig-zag matrix."""
    _check_format(format)
    try:
        matrix = zigzag_matrix(n)
    except InputValidationError as e:
        _fail([e], exit_code=2, format=format, command="zigzag")

    if format == "json":
        _emit_json("zigzag", ok=True, errors=[], results=matrix)
        return
    width = len(str(max(n * n - 1, 0)))
    for row in matrix:
        typer.echo(" ".join(str(v).rjust(width) for v in row))


@app.command("dominoes")
def dominoes(
    path: str = typer.Argument(..., help="YAML/JSON file with a list of [a, b] pairs"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Check whether a set of dominoes can be laid in one row."""
    _check_format(format)
    try:
        raw = load_input(path)
    except InputLoadError as e:
        _fail([e], exit_code=1, format=format, command="dominoes")

    tiles, errors = validate_dominoes(raw)
    if errors or tiles is None:
        _fail(
            [
                InputValidationError(code=e.code, message=e.message, source=path, path=e.path)
                for e in errors
            ],
            exit_code=2,
            format=format,
            command="dominoes",
        )

    ok = can_dominoes_make_row(tiles)
    if format == "json":
        _emit_json("dominoes", ok=True, errors=[], result=ok, count=len(tiles))
        return
    typer.echo("true" if ok else "false")


@app.command("ranges")
def ranges(
    nums: list[int] = typer.Argument(..., help="Ordered integers"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Compress an ordered list of integers into range notation."""
    _check_format(format)
    expr = extract_ranges(nums)
    if format == "json":
        _emit_json("ranges", ok=True, errors=[], result=expr)
        return
    typer.echo(expr)


def _check_format(format: str) -> None:
    if format not in FORMATS:
        _fail(
            [
                InputValidationError(
                    code="E_UNKNOWN_FORMAT",
                    message=f"unknown format: {format} (choose one of: text, json)",
                    path="format",
                )
            ],
            exit_code=2,
        )


def _to_item(e: KataError) -> dict:
    return {
        "code": e.code,
        "message": e.message,
        "source": e.source,
        "path": e.path,
        "severity": "error",
    }


def _emit_json(command: str, *, ok: bool, errors: list[KataError], **extra: Any) -> None:
    payload = {
        "tool": "kata",
        "command": command,
        "ok": ok,
        "error_count": len(errors),
        "errors": [_to_item(e) for e in errors],
        **extra,
    }
    typer.echo(json.dumps(payload, indent=2, sort_keys=True))


def _fail(
    errors: list[KataError],
    *,
    exit_code: int,
    format: str = "text",
    command: str = "",
) -> NoReturn:
    if format == "json":
        _emit_json(command, ok=False, errors=errors)
    else:
        _print_errors(errors)
    raise typer.Exit(code=exit_code)


def _print_errors(errors: list[KataError]) -> None:
    errors_sorted = sorted(errors, key=lambda e: (e.source or "", e.path or "", e.code))
    for e in errors_sorted:
        typer.echo(str(e), err=True)


def main() -> None:
    app(prog_name="kata")


cli = typer.main.get_command(app)

if __name__ == "__main__":
    main()
