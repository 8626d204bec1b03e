"""Command-line entrypoints for chembalancer."""

from __future__ import annotations

import json
import logging
import random
from contextlib import closing
from pathlib import Path
from typing import Annotated, Any, Dict

import typer

from chembalancer.balancer import BalanceOutcome, try_balance
from chembalancer.config import RenderOptions, load_config
from chembalancer.demos import DemoPicker
from chembalancer.errors import FormulaSyntaxError
from chembalancer.formatting import format_equation, highlight_error
from chembalancer.persistence import sqlite_store

app = typer.Typer(add_completion=False)


def _describe(outcome: BalanceOutcome, options: RenderOptions) -> str:
    if outcome.ok:
        return format_equation(outcome.equation, outcome.coefficients, options)
    error = outcome.error
    if isinstance(error, FormulaSyntaxError):
        return f"Syntax error: {error.message}\n{highlight_error(outcome.formula, error)}"
    return str(error)


def _to_record(outcome: BalanceOutcome, options: RenderOptions) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "formula": outcome.formula,
        "status": "balanced" if outcome.ok else outcome.error.status,
        "coefficients": list(outcome.coefficients) if outcome.ok else None,
        "balanced": format_equation(outcome.equation, outcome.coefficients, options)
        if outcome.ok
        else None,
        "error": None if outcome.ok else str(outcome.error),
    }
    if isinstance(outcome.error, FormulaSyntaxError):
        record["error_span"] = list(outcome.error.span_in(outcome.formula))
    return record


def _record_history(history: Path, records: list[Dict[str, Any]]) -> None:
    with closing(sqlite_store.connect(history)) as connection:
        sqlite_store.ensure_schema(connection)
        for record in records:
            sqlite_store.save_result(
                connection,
                formula=record["formula"],
                status=record["status"],
                coefficients=record["coefficients"],
                balanced=record["balanced"],
                error=record["error"],
            )


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@app.command()
def balance(
    formula: Annotated[str, typer.Argument(help="Equation such as 'H2 + O2 = H2O'.")],
    verbose: Annotated[bool, typer.Option(help="Log solver steps.")] = False,
    history: Annotated[
        Path | None, typer.Option(help="Optional SQLite file to record the run.")
    ] = None,
    ascii_output: Annotated[
        bool, typer.Option("--ascii", help="Use '=' and '-' instead of Unicode symbols.")
    ] = False,
) -> None:
    """Balance a single chemical equation."""
    _configure_logging(verbose)
    options = RenderOptions(arrow="=", unicode_minus=False) if ascii_output else RenderOptions()
    outcome = try_balance(formula)

    if history is not None:
        _record_history(history, [_to_record(outcome, options)])

    typer.echo(_describe(outcome, options))
    if not outcome.ok:
        raise typer.Exit(code=1)


@app.command()
def run(
    config_file: Annotated[
        Path, typer.Argument(help="Path to JSON configuration file.")
    ],
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
    verbose: Annotated[bool, typer.Option(help="Log solver steps.")] = False,
) -> None:
    """Balance every equation listed in a config file."""
    _configure_logging(verbose)
    config = load_config(config_file)

    records = [_to_record(try_balance(formula), config.render) for formula in config.equations]

    json_output = json.dumps(records, indent=2, ensure_ascii=False)
    typer.echo(json_output)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(json_output)


@app.command()
def demo(
    seed: Annotated[int | None, typer.Option(help="Seed for the random pick.")] = None,
) -> None:
    """Balance a randomly chosen sample equation."""
    picker = DemoPicker(rng=random.Random(seed))
    formula = picker.pick()
    typer.echo(formula)
    typer.echo(_describe(try_balance(formula), RenderOptions()))


@app.command()
def history(
    history_file: Annotated[Path, typer.Argument(help="SQLite file written by 'balance --history'.")],
    limit: Annotated[int | None, typer.Option(help="Show at most this many runs.")] = None,
) -> None:
    """Show recorded balance runs, newest first."""
    if not history_file.exists():
        typer.echo(f"History file not found: {history_file}", err=True)
        raise typer.Exit(code=1)
    with closing(sqlite_store.connect(history_file)) as connection:
        sqlite_store.ensure_schema(connection)
        records = sqlite_store.list_results(connection, limit=limit)
    typer.echo(json.dumps(records, indent=2, ensure_ascii=False))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
