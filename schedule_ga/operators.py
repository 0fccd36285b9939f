from typing import List, Sequence

from .config import GAConfig
from .model import Chromosome
from .rng import RandomSource, chance


def shifted_weights(fitnesses: Sequence[int]) -> List[int]:
    """Desplaza las aptitudes (<= 0) para que todo individuo pese al menos 1."""
    min_fitness = min(fitnesses)
    return [f - min_fitness + 1 for f in fitnesses]


def select_parent(
    population: Sequence[Chromosome],
    fitnesses: Sequence[int],
    rng: RandomSource,
) -> Chromosome:
    """
    Selección por ruleta sobre aptitudes desplazadas.

    Se sortea r en [0, total] (inclusivo) y se devuelve el primer individuo
    cuyo acumulado alcanza r. Si el recorrido se agota, el último.
    """
    if not population:
        raise ValueError("La población está vacía")
    if len(population) != len(fitnesses):
        raise ValueError(
            f"Se recibieron {len(fitnesses)} aptitudes para {len(population)} individuos"
        )

    weights = shifted_weights(fitnesses)
    pick = rng.randint(0, sum(weights))
    current = 0
    for ind, w in zip(population, weights):
        current += w
        if current >= pick:
            return ind
    return population[-1]


def crossover(a: Chromosome, b: Chromosome, point: int) -> Chromosome:
    """Cruce de un punto: genes [0, point) de `a` y [point, N) de `b`."""
    if len(a) != len(b):
        raise ValueError(f"Padres de distinta longitud: {len(a)} y {len(b)}")
    if not 0 <= point <= len(a):
        raise ValueError(f"Punto de cruce {point} fuera de [0, {len(a)}]")
    return Chromosome(genes=a.genes[:point] + b.genes[point:])


def single_point_crossover(a: Chromosome, b: Chromosome, rng: RandomSource) -> Chromosome:
    point = rng.randint(0, len(a) - 1)
    return crossover(a, b, point)


def mutate(ind: Chromosome, cfg: GAConfig, rng: RandomSource) -> Chromosome:
    """
    Mutación por descendiente (no por gen): con probabilidad `mutation_rate`
    se re-sortean slot y aula de una materia al azar. El docente se conserva.
    """
    if not chance(rng, cfg.mutation_rate):
        return ind
    idx = rng.randint(0, len(ind) - 1)
    time_slot = rng.randint(0, cfg.num_timeslots - 1)
    room_id = rng.randint(0, cfg.num_rooms - 1)
    return ind.replace_gene(idx, time_slot=time_slot, room_id=room_id)


def make_child(
    population: Sequence[Chromosome],
    fitnesses: Sequence[int],
    cfg: GAConfig,
    rng: RandomSource,
) -> Chromosome:
    p1 = select_parent(population, fitnesses, rng)
    p2 = select_parent(population, fitnesses, rng)
    if chance(rng, cfg.crossover_rate):
        child = single_point_crossover(p1, p2, rng)
    else:
        child = p1
    return mutate(child, cfg, rng)
