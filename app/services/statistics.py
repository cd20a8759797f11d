"""
Estatísticas descritivas sobre uma coluna numérica.
"""
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Sequence

import numpy as np

from app.services.values import is_number


def round_half_away(value: float, digits: int = 2) -> float:
    """
    Arredonda com empate para longe do zero (0.125 -> 0.13, -0.125 -> -0.13).

    Usa a representação decimal mais curta do float, para que o resultado
    seja o mesmo que uma pessoa obteria arredondando o valor exibido.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def _first_mode(numbers: list[float]) -> float:
    # Em caso de empate vence o primeiro valor a atingir a maior frequência
    frequency: dict[float, int] = {}
    max_count = 0
    mode = numbers[0]
    for number in numbers:
        frequency[number] = frequency.get(number, 0) + 1
        if frequency[number] > max_count:
            max_count = frequency[number]
            mode = number
    return mode


def compute_statistics(values: Sequence[Any]) -> dict | None:
    """
    Calcula média, mediana, moda, amplitude e desvio padrão populacional.

    Apenas valores já numéricos são considerados (textos não são
    convertidos). Sem nenhum valor numérico, retorna None.

    Parâmetros:
        values: Valores brutos da coluna.

    Retorna:
        Dicionário com as estatísticas arredondadas em 2 casas, ou None.
    """
    numbers = [float(v) for v in values if is_number(v)]
    if not numbers:
        return None

    array = np.array(numbers, dtype=float)

    return {
        "mean": round_half_away(float(np.mean(array))),
        "median": round_half_away(float(np.median(array))),
        "mode": round_half_away(_first_mode(numbers)),
        "range": round_half_away(float(array.max() - array.min())),
        "standardDeviation": round_half_away(float(np.std(array, ddof=0))),
    }
