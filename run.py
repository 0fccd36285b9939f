import argparse
import time
from pathlib import Path
from typing import List, Optional

import pandas as pd

from schedule_ga.config import ConfigError, GAConfig, load_config
from schedule_ga.evaluation import EvaluationResult, evaluate
from schedule_ga.ga import GeneticSolver, SearchResult
from schedule_ga.model import Chromosome


def chromosome_to_dataframe(best: Chromosome, eval_res: EvaluationResult) -> pd.DataFrame:
    in_conflict = {i for pair in eval_res.pairs for i in pair}
    data = []
    for g in best.genes:
        data.append(
            {
                "Materia": g.subject_id,
                "Docente": g.teacher_id,
                "Slot": g.time_slot,
                "Aula": g.room_id,
                "En_conflicto": g.subject_id in in_conflict,
            }
        )
    return pd.DataFrame(data)


def print_schedule(result: SearchResult, eval_res: EvaluationResult):
    print("\n--- MEJOR SOLUCIÓN ---")
    print(f"Mejor horario con fitness = {result.fitness}:")
    for g in result.best.genes:
        print(f"Materia {g.subject_id} - Docente {g.teacher_id} - Slot {g.time_slot} - Aula {g.room_id}")
    print(
        f"conflictos={eval_res.conflicts} docente={eval_res.teacher_clashes} aula={eval_res.room_clashes}"
    )


def export_outputs(
    df_schedule: pd.DataFrame,
    eval_res: EvaluationResult,
    result: SearchResult,
    elapsed: float,
    out_dir: Path,
):
    out_dir.mkdir(parents=True, exist_ok=True)
    df_schedule.to_csv(out_dir / "schedule.csv", index=False)
    conflicts = pd.DataFrame(
        [
            {"tipo": "choque_docente", "valor": eval_res.teacher_clashes},
            {"tipo": "choque_aula", "valor": eval_res.room_clashes},
            {"tipo": "conflictos", "valor": eval_res.conflicts},
            {"tipo": "fitness", "valor": eval_res.fitness},
        ]
    )
    conflicts.to_csv(out_dir / "conflicts.csv", index=False)
    pd.DataFrame(result.history, columns=["gen", "best_fitness", "avg_fitness", "worst_fitness"]).to_csv(
        out_dir / "history.csv", index=False
    )
    metrics = {
        "best_fitness": result.fitness,
        "conflicts": eval_res.conflicts,
        "time_sec": elapsed,
        "generations_ran": result.generations_ran,
        "seed": result.seed,
    }
    pd.DataFrame([metrics]).to_csv(out_dir / "metrics.csv", index=False)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Búsqueda genética de horarios (materia → docente, slot, aula)")
    parser.add_argument("--config", default="config.yaml", help="Ruta al archivo de configuración")
    parser.add_argument("--seed", type=int, default=None, help="Semilla fija (por defecto, derivada del reloj)")
    parser.add_argument("--out_dir", default=None, help="Directorio donde exportar los CSV de resultados")
    args = parser.parse_args(argv)

    try:
        cfg: GAConfig = load_config(args.config, seed=args.seed)
    except ConfigError as exc:
        parser.error(str(exc))

    solver = GeneticSolver(cfg)
    print(
        f"Generaciones: {cfg.generations} | Población: {cfg.population_size} | "
        f"Materias: {cfg.num_subjects} | Semilla: {solver.seed}"
    )
    start = time.perf_counter()
    result = solver.evolve()
    elapsed = time.perf_counter() - start

    eval_res = evaluate(result.best)
    print_schedule(result, eval_res)
    print(f"Tiempo: {elapsed:.2f}s")

    if args.out_dir:
        out_dir = Path(args.out_dir)
        export_outputs(chromosome_to_dataframe(result.best, eval_res), eval_res, result, elapsed, out_dir)
        print(f"Se guardaron resultados en {out_dir}/schedule.csv y {out_dir}/conflicts.csv")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
