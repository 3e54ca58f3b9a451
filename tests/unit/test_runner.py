from __future__ import annotations

import random

import pytest

from sortbench.datagen import generate_students
from sortbench.domain.models import BenchResult, Dataset, SortPriority
from sortbench.runner import available_algorithms, run_benchmarks, sort_dataset

EXPECTED_ORDER = ["Std Sort", "Merge Sort", "Quick Sort", "Bubble Sort", "Insertion Sort"]
GUARDED_ROWS = 1500
DEFAULT_GUARD = 1000


def _large_dataset(rows: int) -> Dataset:
    rng = random.Random(1)
    return Dataset(
        headers=["value", "label"],
        records=[[str(rng.randint(0, 10_000)), f"row-{i}"] for i in range(rows)],
    )


def test_available_algorithms_in_reporting_order() -> None:
    assert available_algorithms() == ["standard", "merge", "quick", "bubble", "insertion"]


def test_runs_every_algorithm_in_declared_order(people: Dataset) -> None:
    results = run_benchmarks(people, key=1, size_guard=DEFAULT_GUARD)

    assert [r.name for r in results] == EXPECTED_ORDER
    assert all(isinstance(r, BenchResult) for r in results)
    assert all(r.duration_ms >= 0.0 and not r.skipped for r in results)


def test_canonical_dataset_is_not_mutated(people: Dataset) -> None:
    before = people.clone()
    run_benchmarks(people, key=1)
    assert people.records == before


def test_plain_record_lists_are_not_mutated() -> None:
    rows = [["3"], ["1"], ["2"]]
    run_benchmarks(rows, key=0)
    assert rows == [["3"], ["1"], ["2"]]


def test_size_guard_skips_quadratic_algorithms() -> None:
    dataset = _large_dataset(GUARDED_ROWS)

    results = {r.name: r for r in run_benchmarks(dataset, key=0, size_guard=DEFAULT_GUARD)}

    for name in ("Bubble Sort", "Insertion Sort"):
        assert results[name].skipped
        assert results[name].duration_ms == 0.0
        assert str(GUARDED_ROWS) in (results[name].note or "")
    for name in ("Std Sort", "Merge Sort", "Quick Sort"):
        assert not results[name].skipped
        assert results[name].duration_ms >= 0.0


def test_size_guard_defaults_to_settings() -> None:
    results = run_benchmarks(_large_dataset(GUARDED_ROWS), key=0)
    assert [r.skipped for r in results] == [False, False, False, True, True]


def test_rows_at_threshold_still_run_everything() -> None:
    results = run_benchmarks(_large_dataset(50), key=0, size_guard=50)
    assert not any(r.skipped for r in results)


def test_zero_size_guard_disables_skipping() -> None:
    results = run_benchmarks(_large_dataset(60), key=0, size_guard=0)
    assert not any(r.skipped for r in results)


def test_subset_keeps_declared_order(people: Dataset) -> None:
    results = run_benchmarks(people, key=0, algorithms=["insertion", "standard"])
    assert [r.name for r in results] == ["Std Sort", "Insertion Sort"]


def test_all_alias_runs_everything(people: Dataset) -> None:
    assert len(run_benchmarks(people, key=0, algorithms=["all"])) == len(EXPECTED_ORDER)


def test_unknown_algorithm_raises(people: Dataset) -> None:
    with pytest.raises(ValueError, match="Unknown algorithm 'shell'"):
        run_benchmarks(people, key=0, algorithms=["shell"])


def test_empty_dataset_still_yields_one_result_per_algorithm() -> None:
    results = run_benchmarks(Dataset(), key=0)
    assert len(results) == len(EXPECTED_ORDER)
    assert all(r.duration_ms >= 0.0 for r in results)


def test_students_by_priority() -> None:
    students = generate_students(120, seed=5)
    snapshot = list(students)

    results = run_benchmarks(students, key=SortPriority.LAST_NAME)

    assert len(results) == len(EXPECTED_ORDER)
    assert students == snapshot


def test_profile_memory_records_peak_bytes(people: Dataset) -> None:
    results = run_benchmarks(people, key=0, algorithms=["merge"], profile_memory=True)
    assert results[0].peak_traced_bytes is not None
    assert results[0].peak_traced_bytes >= 0
    assert results[0].rss_delta_bytes is not None


def test_memory_not_recorded_by_default(people: Dataset) -> None:
    results = run_benchmarks(people, key=0, algorithms=["merge"], profile_memory=False)
    assert results[0].peak_traced_bytes is None
    assert results[0].rss_delta_bytes is None


def test_sort_dataset_sorts_canonical_records(people: Dataset) -> None:
    duration = sort_dataset(people, key=1)
    assert [r[1] for r in people.records] == ["2.5", "9", "31", "31", "100"]
    assert duration >= 0.0


def test_sort_dataset_with_named_algorithm(people: Dataset) -> None:
    sort_dataset(people, key=0, algorithm="quick")
    assert [r[0] for r in people.records] == ["alice", "bob", "carol", "dave", "erin"]


def test_sorted_copy_leaves_original(people: Dataset) -> None:
    copy = people.sorted_copy(1)
    assert [r[0] for r in copy.records] == ["erin", "alice", "carol", "dave", "bob"]
    assert people.records[0][0] == "carol"
