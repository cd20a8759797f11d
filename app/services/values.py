"""
Funções auxiliares para interpretar valores brutos de células.
"""
import math
import numbers
import re
from decimal import Decimal
from typing import Any

# Prefixo numérico no início do texto (ex.: "12.5kg" -> 12.5)
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def is_number(value: Any) -> bool:
    """Indica se o valor já é um número real finito (bool não conta)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def parse_float(value: Any) -> float | None:
    """
    Converte um valor de célula para float de forma tolerante.

    Números são convertidos diretamente. Textos são lidos até onde houver
    um prefixo numérico válido. Valores infinitos ou qualquer outro valor
    retornam None.
    """
    if is_number(value):
        return float(value)

    if not isinstance(value, str):
        return None

    match = _FLOAT_PREFIX.match(value)
    if not match:
        return None

    number = float(match.group(1))
    # "1e999" estoura para infinito
    return number if math.isfinite(number) else None


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    # Notação decimal entre 1e-6 e 1e21, exponencial fora dessa faixa
    if 1e-6 <= abs(value) < 1e21:
        text = format(Decimal(repr(value)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    mantissa, exponent = repr(value).split("e")
    exponent = int(exponent)
    return f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


def display_label(value: Any) -> str:
    """
    Forma de exibição de um valor, usada como rótulo e chave de agrupamento.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)
