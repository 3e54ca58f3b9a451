from __future__ import annotations

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from sortbench.domain.models import BenchResult


def _format_bytes(value: Optional[int], signed: bool = False) -> str:
    if value is None:
        return "N/A"
    mb = value / (1024 * 1024)
    return f"{mb:+.2f}" if signed else f"{mb:.2f}"


def build_results_table(
    results: List[BenchResult], rows: int, column: Optional[str] = None
) -> Table:
    """
    Build a rich table of benchmark results.

    Results keep the runner's order; the fastest completed algorithm is
    highlighted and skipped algorithms show their note instead of a time.
    """
    title = f"Sorting Benchmark Results ({rows:,} rows)"
    if column:
        title = f"{title}\n[dim]Ordered by column: {column}[/dim]"

    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Algorithm", style="cyan", no_wrap=True)
    table.add_column("Duration (ms)", justify="right", style="green")

    show_memory = any(r.peak_traced_bytes is not None for r in results)
    if show_memory:
        table.add_column("Peak Traced (MB)", justify="right", style="yellow")
        table.add_column("RSS Change (MB)", justify="right", style="magenta")
    table.add_column("Notes", style="dim")

    completed = [r for r in results if not r.skipped]
    fastest = min(completed, key=lambda r: r.duration_ms).name if completed else None

    for res in results:
        if res.skipped:
            duration_str = "[yellow]skipped[/yellow]"
        elif res.name == fastest:
            duration_str = f"[bold]{res.duration_ms:,.3f}[/bold]"
        else:
            duration_str = f"{res.duration_ms:,.3f}"

        cells = [res.name, duration_str]
        if show_memory:
            cells.append(_format_bytes(res.peak_traced_bytes))
            cells.append(_format_bytes(res.rss_delta_bytes, signed=True))
        cells.append(res.note or "")
        table.add_row(*cells)

    return table


def print_results(
    results: List[BenchResult],
    rows: int,
    column: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Render benchmark results as a rich table.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    console.print(build_results_table(results, rows, column))
