"""
Synthetic student data for SortBench.

Deterministic pseudo-random generation when a seed is given, written as a
comma-separated file whose header matches the Student field names.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import List, Optional

from sortbench.domain.models import STUDENT_HEADERS, Student
from sortbench.infrastructure.csv_io import save_csv
from sortbench.utils.logging import get_logger

log = get_logger(__name__)

FIRST_NAMES = [
    "Aiden", "Amara", "Benjamin", "Chloe", "Daniel", "Elena", "Ethan", "Fatima",
    "Gabriel", "Hannah", "Isaac", "Jasmine", "Kai", "Layla", "Lucas", "Maya",
    "Noah", "Olivia", "Priya", "Quinn", "Rafael", "Sofia", "Theo", "Uma",
    "Victor", "Willow", "Xavier", "Yara", "Zoe", "Mateo",
]

LAST_NAMES = [
    "Anderson", "Brown", "Chen", "Davis", "Evans", "Fischer", "Garcia", "Hughes",
    "Ibrahim", "Johnson", "Kim", "Lopez", "Martin", "Nguyen", "Okafor", "Patel",
    "Quintero", "Rossi", "Smith", "Taylor", "Ueda", "Vasquez", "Walker", "Xu",
    "Young", "Zimmerman", "Novak", "Silva", "Murphy", "Khan",
]

AGE_RANGE = (17, 24)
ACT_RANGE = (1, 36)
SAT_RANGE = (400, 1600)


def generate_students(count: int, seed: Optional[int] = None) -> List[Student]:
    """Create `count` random students; the same seed yields the same list."""
    rng = random.Random(seed)
    return [
        Student(
            first_name=rng.choice(FIRST_NAMES),
            last_name=rng.choice(LAST_NAMES),
            age=rng.randint(*AGE_RANGE),
            act_score=rng.randint(*ACT_RANGE),
            sat_score=rng.randint(*SAT_RANGE),
        )
        for _ in range(count)
    ]


def save_students_csv(students: List[Student], path: Path | str) -> None:
    save_csv(path, STUDENT_HEADERS, (student.to_record() for student in students))
    log.info("Students written", extra={"path": str(path), "rows": len(students)})


__all__ = ["generate_students", "save_students_csv"]
