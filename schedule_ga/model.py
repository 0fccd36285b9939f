# schedule_ga/model.py
from dataclasses import dataclass, replace
from typing import List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .config import GAConfig

SubjectId = int
SlotIdx = int


@dataclass(frozen=True)
class Assignment:
    # Un "gen" = asignación de 1 materia (docente + slot + aula)
    subject_id: SubjectId       # identidad, nunca se modifica
    teacher_id: int
    time_slot: SlotIdx
    room_id: int


@dataclass(frozen=True)
class Chromosome:
    """Horario candidato completo: una asignación por materia, en orden de subject_id."""

    genes: Tuple[Assignment, ...]

    def __post_init__(self):
        # Los genes llegan a veces como lista; se congelan como tupla.
        object.__setattr__(self, "genes", tuple(self.genes))
        for idx, gene in enumerate(self.genes):
            if gene.subject_id != idx:
                raise ValueError(
                    f"El gen en la posición {idx} pertenece a la materia {gene.subject_id}"
                )

    def __len__(self) -> int:
        return len(self.genes)

    def __iter__(self):
        return iter(self.genes)

    def __getitem__(self, idx):
        return self.genes[idx]

    def assignment_for(self, subject_id: SubjectId) -> Assignment:
        return self.genes[subject_id]

    def replace_gene(self, idx: int, **changes) -> "Chromosome":
        genes = list(self.genes)
        genes[idx] = replace(genes[idx], **changes)
        return Chromosome(genes=tuple(genes))

    def check_bounds(self, cfg: "GAConfig") -> None:
        if len(self.genes) != cfg.num_subjects:
            raise ValueError(
                f"Longitud de cromosoma {len(self.genes)} distinta de num_subjects={cfg.num_subjects}"
            )
        for g in self.genes:
            if not 0 <= g.teacher_id < cfg.num_teachers:
                raise ValueError(f"teacher_id fuera de rango en materia {g.subject_id}: {g.teacher_id}")
            if not 0 <= g.time_slot < cfg.num_timeslots:
                raise ValueError(f"time_slot fuera de rango en materia {g.subject_id}: {g.time_slot}")
            if not 0 <= g.room_id < cfg.num_rooms:
                raise ValueError(f"room_id fuera de rango en materia {g.subject_id}: {g.room_id}")


Population = List[Chromosome]
