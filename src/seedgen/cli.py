import json
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Any, TextIO

import srsly
import typer
from pydantic import ValidationError

from seedgen.core.driver import generate_sample
from seedgen.core.models import DEFAULT_COUNT, DEFAULT_SIZE
from seedgen.core.schema import build_generator, describe_shape, parse_shape
from seedgen.lcg import mk_seed

app = typer.Typer(help="Sample deterministic pseudo-random values.")

_KIND_ORDER = ("null", "bool", "int", "float", "str", "list", "dict")


class _RowError(Exception):
    def __init__(self, *, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(reason)


def _looks_like_json_literal(value: str) -> bool:
    stripped = value.lstrip()
    return stripped.startswith(("[", "{", '"'))


def _read_shape_source(shape: str) -> Any:
    """Inline JSON object, or a path to a JSON file."""
    if _looks_like_json_literal(shape):
        try:
            return srsly.json_loads(shape)
        except ValueError as err:
            raise typer.BadParameter(
                f"Invalid shape: malformed inline JSON ({err})"
            ) from err
    path = Path(shape)
    if not path.is_file():
        raise typer.BadParameter(f"Shape file not found: {shape}")
    try:
        return srsly.read_json(path)
    except ValueError as err:
        raise typer.BadParameter(
            f"Invalid shape: malformed JSON in {path} ({err})"
        ) from err


def _render_validation_error(prefix: str, err: ValidationError) -> str:
    first_error = err.errors(include_url=False)[0]
    loc = ".".join(str(item) for item in first_error["loc"])
    message = first_error["msg"]
    if loc:
        return f"Error: {prefix} at '{loc}': {message}"
    return f"Error: {prefix}: {message}"


def _safe_unlink(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        return


@contextmanager
def _atomic_output(target: Path) -> Iterator[TextIO]:
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.",
        suffix=".tmp",
        dir=target.parent,
    )
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            yield handle
        os.replace(tmp, target)
    except Exception:
        _safe_unlink(tmp)
        raise


def _value_kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "str"
    if isinstance(value, list):
        return "list"
    return "dict"


def _iter_rows(input_file: Path) -> Iterator[Any]:
    with input_file.open("r", encoding="utf-8") as input_handle:
        for line_number, line in enumerate(input_handle, start=1):
            stripped = line.strip()
            if not stripped:
                continue
            try:
                yield json.loads(stripped)
            except json.JSONDecodeError as err:
                raise _RowError(
                    line_number=line_number,
                    reason=f"malformed JSON ({err.msg})",
                ) from err


@app.command()
def sample(
    shape: Annotated[
        str,
        typer.Argument(help="Shape as a JSON file path or inline JSON object"),
    ],
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Output JSONL file")
    ],
    seed: Annotated[
        int,
        typer.Option("--seed", "-s", help="Seed (folded into seed range)"),
    ] = 0,
    size: Annotated[
        int, typer.Option("--size", "-z", help="Ambient size")
    ] = DEFAULT_SIZE,
    count: Annotated[
        int, typer.Option("--count", "-n", help="Number of samples")
    ] = DEFAULT_COUNT,
) -> None:
    """Write COUNT chained samples of SHAPE as JSON lines."""
    raw_shape = _read_shape_source(shape)
    try:
        parsed = parse_shape(raw_shape)
    except ValidationError as err:
        typer.echo(_render_validation_error("invalid shape", err), err=True)
        raise typer.Exit(1) from err

    try:
        gen = build_generator(parsed)
        values = generate_sample(
            gen, mk_seed(seed), size=size, count=count
        )
    except ValidationError as err:
        typer.echo(_render_validation_error("invalid options", err), err=True)
        raise typer.Exit(1) from err
    except ValueError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err

    if not output.parent.exists():
        typer.echo(
            f"Error: output directory {output.parent} does not exist",
            err=True,
        )
        raise typer.Exit(1)

    with _atomic_output(output) as handle:
        for value in values:
            handle.write(srsly.json_dumps(value))
            handle.write("\n")

    typer.echo(
        f"Generated {len(values)} samples of {describe_shape(parsed)} "
        f"to {output}"
    )


@app.command()
def info(
    input_file: Annotated[Path, typer.Argument(help="Input JSONL file")],
) -> None:
    """Show info about a samples file."""
    try:
        by_kind: dict[str, int] = {}
        total = 0
        for row in _iter_rows(input_file):
            total += 1
            kind = _value_kind(row)
            by_kind[kind] = by_kind.get(kind, 0) + 1
    except _RowError as err:
        typer.echo(
            f"Error: invalid JSONL row in {input_file} at line "
            f"{err.line_number}: {err.reason}",
            err=True,
        )
        raise typer.Exit(1) from err
    except OSError as err:
        typer.echo(f"Error: cannot read {input_file}: {err}", err=True)
        raise typer.Exit(1) from err

    typer.echo(f"{input_file}: {total} samples")
    for kind in _KIND_ORDER:
        if kind in by_kind:
            typer.echo(f"  {kind}: {by_kind[kind]}")
