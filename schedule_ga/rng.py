# schedule_ga/rng.py
"""
Fuente de aleatoriedad inyectada.

Todos los operadores reciben explícitamente un objeto con `randint(a, b)`
(rango inclusivo), normalmente un `random.Random` creado una sola vez por
proceso. En pruebas se sustituye por una fuente determinista.
"""
import random
import time
from typing import Optional, Protocol


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int:
        ...


def resolve_seed(seed: Optional[int] = None) -> int:
    # Sin semilla configurada se deriva del reloj
    return int(seed) if seed is not None else time.time_ns()


def make_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(resolve_seed(seed))


# Los sorteos de la compuerta usan enteros en [0, GATE_RESOLUTION)
GATE_RESOLUTION = 1_000_000


def chance(rng: RandomSource, rate: float) -> bool:
    """
    Compuerta de probabilidad con resolución de una millonésima: rate=0 nunca
    dispara, rate=1 siempre.
    """
    return rng.randint(0, GATE_RESOLUTION - 1) < round(rate * GATE_RESOLUTION)
