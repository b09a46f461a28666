from pathlib import Path
from typing import List, NoReturn, Optional

import pandas as pd
import typer
from InquirerPy import inquirer

from src.datahub import available_columns, load_table
from src.errors import ColumnSummaryError
from src.pipelines import run_summary_chart
from src.plots import DEFAULT_OUTPUT_DIR, ChartDestination

app = typer.Typer()


def _numeric_columns(table: pd.DataFrame) -> List[str]:
    numeric = [str(name) for name in table.columns if pd.api.types.is_numeric_dtype(table[name])]
    return numeric or available_columns(table)


def _fail(exc: ColumnSummaryError) -> NoReturn:
    typer.secho(f"[error] {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.command()
def summarize(
    csv_path: Path = typer.Argument(..., help="Comma-separated file with a header row."),
    column: Optional[str] = typer.Option(
        None,
        "--column",
        "-c",
        help="Column to summarize (prompted interactively when omitted).",
    ),
    output_dir: Path = typer.Option(
        DEFAULT_OUTPUT_DIR,
        "--output-dir",
        exists=False,
        file_okay=False,
        dir_okay=True,
        writable=True,
        help="Directory where the chart is written (created if missing).",
    ),
    fmt: str = typer.Option("svg", "--format", help="Static image format (svg or png)."),
    save_html: bool = typer.Option(False, "--html/--no-html", help="Also write an interactive HTML chart."),
) -> None:
    """
    Compute the mean and sample variance of a CSV column and chart them.
    """
    try:
        destination = ChartDestination(directory=output_dir, fmt=fmt, save_html=save_html)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        table = load_table(csv_path)
        if column is None:
            column = inquirer.select(
                message=f"Column of {csv_path.name} to summarize:",
                choices=_numeric_columns(table),
            ).execute()

        destination.ensure_dir()
        result = run_summary_chart(table, column, destination=destination)
    except ColumnSummaryError as exc:
        _fail(exc)

    if result.html_path is not None:
        typer.echo(f"[plots] Interactive chart saved to {result.html_path}")


@app.command()
def columns(csv_path: Path = typer.Argument(..., help="Comma-separated file with a header row.")) -> None:
    """
    List the header of a CSV file, marking numeric columns.
    """
    try:
        table = load_table(csv_path)
    except ColumnSummaryError as exc:
        _fail(exc)

    for name in available_columns(table):
        kind = "numeric" if pd.api.types.is_numeric_dtype(table[name]) else "text"
        typer.echo(f"{name}\t{kind}")


if __name__ == "__main__":
    app()
