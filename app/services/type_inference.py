"""
Inferência do tipo de uma coluna a partir de valores de amostra.
"""
import enum
import re
from datetime import date, datetime
from typing import Any, Sequence

from app.config import TYPE_SAMPLE_SIZE
from app.services.values import is_number, parse_float

_TIME_SUFFIX = r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?)?"
_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})" + _TIME_SUFFIX + "$")
_SLASH_DATE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})" + _TIME_SUFFIX + "$")


class ColumnType(str, enum.Enum):
    """Tipo inferido de uma coluna."""
    NUMBER = "number"
    DATE = "date"
    STRING = "string"


def _is_valid_date(year: int, month: int, day: int) -> bool:
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


def is_date_text(text: str) -> bool:
    """
    Verifica se o texto tem formato de data (YYYY-MM-DD ou DD/MM/YYYY)
    e corresponde a uma data válida no calendário.

    Datas com barras são lidas com o dia primeiro e, se inválidas,
    com o mês primeiro.
    """
    text = text.strip()

    match = _ISO_DATE.match(text)
    if match:
        year, month, day = (int(part) for part in match.groups())
        return _is_valid_date(year, month, day)

    match = _SLASH_DATE.match(text)
    if match:
        first, second, year = (int(part) for part in match.groups())
        return _is_valid_date(year, second, first) or _is_valid_date(year, first, second)

    return False


def infer_column_type(values: Sequence[Any]) -> ColumnType:
    """
    Classifica uma coluna como número, data ou texto.

    Apenas os primeiros valores são examinados. Número só vence quando tem
    mais evidências que data; empate com evidência de data resulta em data.

    Parâmetros:
        values: Valores não nulos da coluna, na ordem original.

    Retorna:
        Tipo inferido da coluna.
    """
    number_count = 0
    date_count = 0

    for value in list(values)[:TYPE_SAMPLE_SIZE]:
        if value is None or value == "" or isinstance(value, bool):
            continue

        if is_number(value):
            number_count += 1
        elif isinstance(value, (date, datetime)):
            date_count += 1
        elif isinstance(value, str):
            if is_date_text(value):
                date_count += 1
            elif parse_float(value) is not None:
                number_count += 1

    if number_count > date_count and number_count > 0:
        return ColumnType.NUMBER
    if date_count > 0:
        return ColumnType.DATE
    return ColumnType.STRING
