"""
Configuración del algoritmo genético.

Incluye un cargador desde YAML para dejar los parámetros reproducibles y
configurables. Todos los valores se validan al construir el objeto, de modo
que una configuración degenerada falla antes de la primera generación.
"""
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .rng import GATE_RESOLUTION


class ConfigError(ValueError):
    """Configuración inválida (cotas en cero, tamaños negativos, tasas fuera de rango)."""


@dataclass
class GAConfig:
    # Algoritmo genético
    population_size: int = 100
    generations: int = 500
    crossover_rate: float = 0.8
    mutation_rate: float = 0.1
    elite_size: int = 0          # 0 = sin elitismo
    seed: Optional[int] = None   # None = semilla derivada del reloj
    log_every: int = 50          # 0 = sin progreso por consola

    # Dominio
    num_subjects: int = 5
    num_timeslots: int = 36
    num_rooms: int = 5
    num_teachers: int = 5

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GAConfig":
        merged = asdict(cls())
        for k, v in data.items():
            if k in merged:
                merged[k] = v
        return cls(**merged)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        ints = (
            "population_size", "generations", "elite_size", "log_every",
            "num_subjects", "num_timeslots", "num_rooms", "num_teachers",
        )
        for name in ints:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} debe ser entero, se recibió {value!r}")

        for name in ("num_subjects", "num_timeslots", "num_rooms", "num_teachers", "population_size"):
            if getattr(self, name) < 1:
                raise ConfigError(f"{name} debe ser >= 1 (valor: {getattr(self, name)})")
        if self.generations < 0:
            raise ConfigError(f"generations no puede ser negativo (valor: {self.generations})")
        if self.log_every < 0:
            raise ConfigError(f"log_every no puede ser negativo (valor: {self.log_every})")
        if not 0 <= self.elite_size <= self.population_size:
            raise ConfigError(
                f"elite_size debe estar en [0, {self.population_size}] (valor: {self.elite_size})"
            )

        for name in ("crossover_rate", "mutation_rate"):
            rate = getattr(self, name)
            if isinstance(rate, bool) or not isinstance(rate, (int, float)):
                raise ConfigError(f"{name} debe ser numérico, se recibió {rate!r}")
            if not 0.0 <= rate <= 1.0:
                raise ConfigError(f"{name} debe estar en [0, 1] (valor: {rate})")
            if rate > 0 and round(rate * GATE_RESOLUTION) == 0:
                raise ConfigError(
                    f"{name}={rate} es menor que la resolución de la compuerta (1/{GATE_RESOLUTION})"
                )

        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigError(f"seed debe ser entero o null, se recibió {self.seed!r}")


def _load_yaml(path: Path) -> Any:
    if not path.exists():
        return {}
    text = path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"No se pudo leer {path}: {exc}") from exc
    # Documento vacío = valores por defecto
    return {} if data is None else data


def load_config(path: str = "config.yaml", **overrides: Any) -> GAConfig:
    """
    Lee la configuración desde YAML; los `overrides` (p. ej. desde la línea
    de comandos) tienen prioridad. Si el archivo no existe se usan los
    valores por defecto.
    """
    cfg_path = Path(path)
    data = _load_yaml(cfg_path)
    if not isinstance(data, dict):
        raise ConfigError(f"{cfg_path} debe contener un objeto mapeo")
    data.update({k: v for k, v in overrides.items() if v is not None})
    return GAConfig.from_dict(data)
