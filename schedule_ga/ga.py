from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .config import GAConfig
from .evaluation import evaluate_fitness
from .initial_population import build_initial_population
from .model import Chromosome, Population
from .operators import make_child
from .rng import RandomSource, make_rng, resolve_seed


class SolverState(Enum):
    INITIALIZING = "initializing"
    EVOLVING = "evolving"
    TERMINATED = "terminated"


@dataclass
class SearchResult:
    best: Chromosome
    fitness: int
    generations_ran: int
    history: List[Dict] = field(default_factory=list)
    seed: Optional[int] = None


def best_of(population: Population, fitnesses: List[int]) -> int:
    """Índice del primer individuo con aptitud máxima (máximo estable)."""
    best_idx = 0
    for i, f in enumerate(fitnesses):
        if f > fitnesses[best_idx]:
            best_idx = i
    return best_idx


class GeneticSolver:
    def __init__(self, cfg: GAConfig, rng: Optional[RandomSource] = None):
        self.cfg = cfg
        self.seed: Optional[int] = None
        if rng is None:
            self.seed = resolve_seed(cfg.seed)
            rng = make_rng(self.seed)
        self.rng = rng
        self.state = SolverState.INITIALIZING
        self.history: List[Dict] = []

    def score(self, population: Population) -> List[int]:
        return [evaluate_fitness(ind) for ind in population]

    def next_generation(self, population: Population, fitnesses: List[int]) -> Population:
        new_pop: Population = []
        # Elitismo opcional (elite_size=0 por defecto): no consume sorteos
        if self.cfg.elite_size:
            ranked = sorted(range(len(population)), key=lambda i: fitnesses[i], reverse=True)
            for i in ranked[: self.cfg.elite_size]:
                new_pop.append(population[i])

        while len(new_pop) < self.cfg.population_size:
            new_pop.append(make_child(population, fitnesses, self.cfg, self.rng))
        return new_pop

    def evolve(self, population: Optional[Population] = None) -> SearchResult:
        if self.state is not SolverState.INITIALIZING:
            raise RuntimeError("El solver ya fue ejecutado; cree uno nuevo")

        if population is None:
            population = build_initial_population(self.cfg, self.rng)
        else:
            if len(population) != self.cfg.population_size:
                raise ValueError(
                    f"La población inicial tiene {len(population)} individuos, se esperaban {self.cfg.population_size}"
                )
            # Longitud y cotas se validan antes de la primera generación
            for ind in population:
                ind.check_bounds(self.cfg)

        self.state = SolverState.EVOLVING
        generations = self.cfg.generations
        for gen in range(generations):
            fitnesses = self.score(population)

            best_fit = max(fitnesses)
            avg_fit = sum(fitnesses) / len(fitnesses)
            self.history.append(
                {"gen": gen, "best_fitness": best_fit, "avg_fitness": avg_fit, "worst_fitness": min(fitnesses)}
            )
            if self.cfg.log_every and (gen % self.cfg.log_every == 0 or gen == generations - 1):
                print(f"Gen {gen}: Mejor fitness={best_fit} Promedio={avg_fit:.2f}")

            # Sin corte temprano: se corren todas las generaciones aunque haya fitness 0
            population = self.next_generation(population, fitnesses)

        self.state = SolverState.TERMINATED
        final_fitnesses = self.score(population)
        idx = best_of(population, final_fitnesses)
        return SearchResult(
            best=population[idx],
            fitness=final_fitnesses[idx],
            generations_ran=len(self.history),
            history=self.history,
            seed=self.seed,
        )
