# schedule_ga/initial_population.py
from typing import List

from .config import GAConfig
from .model import Assignment, Chromosome, Population, SubjectId
from .rng import RandomSource


def random_assignment(subject_id: SubjectId, cfg: GAConfig, rng: RandomSource) -> Assignment:
    # orden de sorteo: docente, slot, aula
    teacher_id = rng.randint(0, cfg.num_teachers - 1)
    time_slot = rng.randint(0, cfg.num_timeslots - 1)
    room_id = rng.randint(0, cfg.num_rooms - 1)
    return Assignment(
        subject_id=subject_id,
        teacher_id=teacher_id,
        time_slot=time_slot,
        room_id=room_id,
    )


def random_chromosome(cfg: GAConfig, rng: RandomSource) -> Chromosome:
    genes: List[Assignment] = []
    for subject_id in range(cfg.num_subjects):
        genes.append(random_assignment(subject_id, cfg, rng))
    return Chromosome(genes=tuple(genes))


def build_initial_population(cfg: GAConfig, rng: RandomSource) -> Population:
    return [random_chromosome(cfg, rng) for _ in range(cfg.population_size)]
