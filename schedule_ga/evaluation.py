# schedule_ga/evaluation.py
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .model import Chromosome


@dataclass
class EvaluationResult:
    fitness: int
    conflicts: int
    teacher_clashes: int
    room_clashes: int
    pairs: List[Tuple[int, int]]


def _clash_matrices(chrom: Chromosome) -> Tuple[np.ndarray, np.ndarray]:
    """
    Matrices [i][j] (solo i < j): mismo slot y mismo docente / mismo slot y misma aula.
    """
    slots = np.array([g.time_slot for g in chrom.genes], dtype=int)
    teachers = np.array([g.teacher_id for g in chrom.genes], dtype=int)
    rooms = np.array([g.room_id for g in chrom.genes], dtype=int)

    upper = np.triu(np.ones((len(slots), len(slots)), dtype=bool), k=1)
    same_slot = (slots[:, None] == slots[None, :]) & upper
    same_teacher = same_slot & (teachers[:, None] == teachers[None, :])
    same_room = same_slot & (rooms[:, None] == rooms[None, :])
    return same_teacher, same_room


def conflict_matrix(chrom: Chromosome) -> np.ndarray:
    same_teacher, same_room = _clash_matrices(chrom)
    return same_teacher | same_room


def count_conflicts(chrom: Chromosome) -> int:
    # Cada par cuenta una vez aunque choque por docente y por aula
    return int(conflict_matrix(chrom).sum())


def evaluate_fitness(chrom: Chromosome) -> int:
    return -count_conflicts(chrom)


def evaluate(chrom: Chromosome) -> EvaluationResult:
    same_teacher, same_room = _clash_matrices(chrom)
    clash = same_teacher | same_room
    pairs = [(int(i), int(j)) for i, j in np.argwhere(clash)]
    conflicts = len(pairs)
    return EvaluationResult(
        fitness=-conflicts,
        conflicts=conflicts,
        teacher_clashes=int(same_teacher.sum()),
        room_clashes=int(same_room.sum()),
        pairs=pairs,
    )
