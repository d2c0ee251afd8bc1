import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import srsly
import typer
from pydantic import TypeAdapter, ValidationError

from chainstd.core.option import Nothing, Some
from chainstd.interval.eval import contains as interval_contains
from chainstd.interval.models import Interval
from chainstd.interval.ops import render_interval
from chainstd.sequence import ops as seq_ops
from chainstd.sequence.models import Seq

logger = logging.getLogger(__name__)

app = typer.Typer(help="Run sequence and interval operations over files.")
_interval_adapter = TypeAdapter(Interval)
_seq_adapter = TypeAdapter(Seq[Any])


class SeqOp(str, Enum):
    REVERSE = "reverse"
    UNIQUE = "unique"
    LENGTH = "length"
    HEAD = "head"
    TAIL = "tail"
    LAST = "last"
    SUM = "sum"
    TAKE = "take"
    DROP = "drop"


_COUNTED_OPS = frozenset({SeqOp.TAKE, SeqOp.DROP})


def _load_interval(path: Path) -> Interval:
    try:
        return _interval_adapter.validate_python(srsly.read_json(path))
    except (ValueError, ValidationError) as err:
        typer.echo(f"Invalid interval file {path}: {err}", err=True)
        raise typer.Exit(1) from err


def _load_seq(path: Path) -> Seq[Any]:
    try:
        return _seq_adapter.validate_python(srsly.read_json(path))
    except (ValueError, ValidationError) as err:
        typer.echo(f"Invalid sequence file {path}: {err}", err=True)
        raise typer.Exit(1) from err


def _to_jsonable(value: Any) -> Any:
    match value:
        case Seq():
            return [_to_jsonable(item) for item in value]
        case Some(value=inner):
            return {"kind": "some", "value": _to_jsonable(inner)}
        case Nothing():
            return {"kind": "none"}
        case _:
            return value


def _run_seq_op(op: SeqOp, xs: Seq[Any], arg: int | None) -> Any:
    match op:
        case SeqOp.REVERSE:
            return seq_ops.reverse(xs)
        case SeqOp.UNIQUE:
            return seq_ops.unique(xs)
        case SeqOp.LENGTH:
            return seq_ops.length(xs)
        case SeqOp.HEAD:
            return seq_ops.head(xs)
        case SeqOp.TAIL:
            return seq_ops.tail(xs)
        case SeqOp.LAST:
            return seq_ops.last(xs)
        case SeqOp.SUM:
            return seq_ops.sum(xs)
        case SeqOp.TAKE:
            return seq_ops.take(xs, arg or 0)
        case SeqOp.DROP:
            return seq_ops.drop(xs, arg or 0)
        case _:
            raise ValueError(f"Unknown sequence op: {op}")


@app.command()
def contains(
    interval: Annotated[
        Path,
        typer.Option("--interval", "-i", help="Interval JSON file"),
    ],
    points: Annotated[
        Path,
        typer.Option("--points", "-p", help="JSONL file, one value per line"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output JSONL file"),
    ] = None,
) -> None:
    """Check which points fall inside an interval."""
    window = _load_interval(interval)
    logger.debug("Loaded interval %s", render_interval(window))

    try:
        rows = [
            {"point": point, "contains": interval_contains(window, point)}
            for point in srsly.read_jsonl(points)
        ]
    except TypeError as err:
        typer.echo(f"Points in {points} are not comparable: {err}", err=True)
        raise typer.Exit(1) from err
    except ValueError as err:
        typer.echo(f"Invalid points file {points}: {err}", err=True)
        raise typer.Exit(1) from err

    if output is None:
        for row in rows:
            typer.echo(srsly.json_dumps(row))
        return

    srsly.write_jsonl(output, rows)
    typer.echo(f"Wrote {len(rows)} rows to {output}")


@app.command()
def render(
    interval: Annotated[
        Path,
        typer.Option("--interval", "-i", help="Interval JSON file"),
    ],
) -> None:
    """Print an interval in bracket notation."""
    typer.echo(render_interval(_load_interval(interval)))


@app.command()
def seq(
    op: Annotated[SeqOp, typer.Argument(help="Sequence operation to run")],
    input_file: Annotated[
        Path,
        typer.Option("--input", "-i", help="JSON file holding a list"),
    ],
    arg: Annotated[
        int | None,
        typer.Option("--arg", "-n", help="Count for take and drop"),
    ] = None,
) -> None:
    """Run a single-sequence operation over a JSON list."""
    if op in _COUNTED_OPS and arg is None:
        raise typer.BadParameter(f"'{op.value}' requires --arg")

    xs = _load_seq(input_file)
    logger.debug("Running %s over %d elements", op.value, len(xs))
    try:
        result = _run_seq_op(op, xs, arg)
    except TypeError as err:
        typer.echo(f"Cannot run '{op.value}' on {input_file}: {err}", err=True)
        raise typer.Exit(1) from err
    typer.echo(srsly.json_dumps(_to_jsonable(result)))


if __name__ == "__main__":
    app()
