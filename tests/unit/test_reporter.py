from __future__ import annotations

from rich.console import Console

from sortbench.domain.models import BenchResult
from sortbench.reporter import _format_bytes, build_results_table, print_results

MB = 1024 * 1024


def _headers(table) -> list[str]:
    return [str(column.header) for column in table.columns]


def test_memory_columns_hidden_without_profiling():
    table = build_results_table([BenchResult(name="Merge Sort", duration_ms=1.5)], rows=3)
    assert _headers(table) == ["Algorithm", "Duration (ms)", "Notes"]


def test_memory_columns_shown_when_profiled():
    result = BenchResult(
        name="Merge Sort", duration_ms=1.5, peak_traced_bytes=2 * MB, rss_delta_bytes=-MB
    )
    table = build_results_table([result], rows=3)
    assert _headers(table) == [
        "Algorithm",
        "Duration (ms)",
        "Peak Traced (MB)",
        "RSS Change (MB)",
        "Notes",
    ]
    assert table.row_count == 1


def test_format_bytes():
    assert _format_bytes(None) == "N/A"
    assert _format_bytes(2 * MB) == "2.00"
    assert _format_bytes(-MB, signed=True) == "-1.00"
    assert _format_bytes(MB // 2, signed=True) == "+0.50"


def test_print_results_renders_rss_change():
    console = Console(record=True, width=160)
    result = BenchResult(
        name="Quick Sort", duration_ms=0.25, peak_traced_bytes=MB, rss_delta_bytes=3 * MB
    )

    print_results([result], rows=10, console=console)

    text = console.export_text()
    assert "RSS Change (MB)" in text
    assert "+3.00" in text


def test_print_results_empty():
    console = Console(record=True, width=160)
    print_results([], rows=0, console=console)
    assert "No results to display." in console.export_text()
