from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, NoReturn, Optional, Union

import typer
from pydantic import ValidationError
from rich.console import Console

from sortbench.config import get_settings
from sortbench.datagen import generate_students, save_students_csv
from sortbench.domain.models import STUDENT_HEADERS, Dataset, SortKey, SortPriority, Student
from sortbench.infrastructure.csv_io import DatasetError, load_csv, save_csv
from sortbench.reporter import print_results
from sortbench.runner import available_algorithms, run_benchmarks, sort_dataset
from sortbench.utils.logging import configure_logging

app = typer.Typer(help="SortBench: benchmark sorting algorithms on CSV data.")


def _setup_logging() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)


def _fail(message: str) -> NoReturn:
    Console(stderr=True, soft_wrap=True).print(f"[red]{message}[/red]")
    raise typer.Exit(code=1)


def _resolve_column(dataset: Dataset, column: Optional[str], index: Optional[int]) -> int:
    if column is not None and index is not None:
        raise typer.BadParameter("Use either --column or --index, not both.")
    if column is not None:
        try:
            return dataset.column_index(column)
        except KeyError as exc:
            raise typer.BadParameter(exc.args[0], param_hint="--column") from None
    if index is None:
        return 0
    if not 0 <= index < max(len(dataset.headers), 1):
        raise typer.BadParameter(
            f"Index {index} is out of range for {len(dataset.headers)} column(s).",
            param_hint="--index",
        )
    return index


def _as_students(dataset: Dataset) -> List[Student]:
    if dataset.headers != STUDENT_HEADERS:
        raise typer.BadParameter(
            f"--priority needs a student file with headers {','.join(STUDENT_HEADERS)}.",
            param_hint="--priority",
        )
    try:
        return [Student.from_record(record) for record in dataset.records]
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid student row: {exc.errors()[0]['msg']}") from None


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} log_level={settings.log_level} json_logs={settings.json_logs} | "
        f"size_guard={settings.size_guard_threshold} profile_memory={settings.profile_memory} | "
        f"rows={settings.default_rows} seed={settings.default_seed}"
    )


@app.command("list")
def list_algorithms() -> None:
    """
    List available algorithms in reporting order.
    """
    typer.echo("Available algorithms: " + ", ".join(available_algorithms()))


@app.command()
def generate(
    out: Path = typer.Option(Path("students.csv"), "--out", "-o", help="Destination CSV file."),
    rows: Optional[int] = typer.Option(
        None, "--rows", "-r", min=1, help="Number of students (default from settings)."
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Random seed for reproducible data (default from settings)."
    ),
) -> None:
    """
    Generate a synthetic student CSV.
    """
    settings = get_settings()
    _setup_logging()
    count = rows or settings.default_rows
    students = generate_students(count, seed if seed is not None else settings.default_seed)
    try:
        save_students_csv(students, out)
    except DatasetError as exc:
        _fail(str(exc))
    typer.echo(f"Wrote {count} students to {out}.")


@app.command()
def run(
    file: Path = typer.Argument(..., help="Delimited file to benchmark."),
    column: Optional[str] = typer.Option(None, "--column", "-c", help="Column name to order by."),
    index: Optional[int] = typer.Option(
        None, "--index", "-i", help="Zero-based column index to order by (default 0)."
    ),
    priority: Optional[SortPriority] = typer.Option(
        None, "--priority", "-p", help="Order a student file by a typed field."
    ),
    algorithm: Optional[List[str]] = typer.Option(
        None, "--algorithm", "-a", help="Algorithm to run; repeat for several (default all)."
    ),
    size_guard: Optional[int] = typer.Option(
        None, "--size-guard", min=0, help="Skip O(n^2) algorithms above this many rows (0 = never)."
    ),
    profile_memory: Optional[bool] = typer.Option(
        None, "--profile-memory/--no-profile-memory", help="Record peak traced allocations."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON instead of a table."),
    export: Optional[Path] = typer.Option(
        None, "--export", "-e", help="Write the dataset, sorted by the chosen key, to this CSV."
    ),
) -> None:
    """
    Load a file, benchmark every algorithm on it and report durations.
    """
    _setup_logging()

    try:
        dataset = load_csv(file)
    except DatasetError as exc:
        _fail(str(exc))

    names = list(algorithm) if algorithm else None
    if names:
        unknown = [name for name in names if name not in available_algorithms()]
        if unknown:
            raise typer.BadParameter(
                f"Unknown algorithm(s): {', '.join(unknown)}. "
                f"Available: {', '.join(available_algorithms())}",
                param_hint="--algorithm",
            )

    key: SortKey
    if priority is not None:
        if column is not None or index is not None:
            raise typer.BadParameter(
                "Use either --priority or --column/--index, not both.", param_hint="--priority"
            )
        items: Union[Dataset, List[Student]] = _as_students(dataset)
        key = priority
        label = priority.value
    else:
        items = dataset
        column_index = _resolve_column(dataset, column, index)
        key = column_index
        label = (
            dataset.headers[column_index]
            if column_index < len(dataset.headers)
            else str(column_index)
        )

    results = run_benchmarks(
        items, key, algorithms=names, size_guard=size_guard, profile_memory=profile_memory
    )

    if as_json:
        typer.echo(json.dumps([r.model_dump() for r in results], indent=2))
    else:
        print_results(results, rows=dataset.row_count, column=label)

    if export is not None:
        if isinstance(key, SortPriority):
            students = list(items)  # type: ignore[arg-type]
            sort_dataset(students, key)
            records = [student.to_record() for student in students]
        else:
            sort_dataset(dataset, key)
            records = dataset.records
        try:
            save_csv(export, dataset.headers, records)
        except DatasetError as exc:
            _fail(str(exc))
        typer.echo(f"Exported sorted data to {export}.")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
