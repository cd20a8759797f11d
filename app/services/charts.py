"""
Geração das séries de dados e da configuração de renderização dos gráficos.

A saída segue o formato de dados do chart.js: "labels" e uma lista
"datasets" com um único conjunto de valores.
"""
import enum
from typing import Any, Mapping, Sequence

from app.config import MAX_SERIES_POINTS
from app.errors import EmptyDatasetError
from app.services.values import display_label, parse_float

COLORS = [
    "#FF6384", "#36A2EB", "#FFCE56", "#4BC0C0", "#9966FF",
    "#FF9F40", "#FF6384", "#C9CBCF", "#4BC0C0", "#FF6384",
]

LINE_TENSION = 0.4


class ChartType(str, enum.Enum):
    """Tipos de gráfico suportados."""
    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    SCATTER = "scatter"
    AREA = "area"


def axis_label(axis: Mapping[str, Any]) -> str:
    """Rótulo do eixo, usando o nome da coluna quando não há rótulo."""
    return axis.get("label") or axis["column"]


def _numeric(value: Any) -> float:
    # Valores não numéricos contribuem com 0
    return parse_float(value) or 0.0


def _pie_series(rows, x_column, y_column, dataset):
    grouped: dict[str, float] = {}
    for row in rows:
        key = display_label(row.get(x_column))
        grouped[key] = grouped.get(key, 0.0) + _numeric(row.get(y_column))

    labels = list(grouped)
    dataset["data"] = list(grouped.values())
    dataset["backgroundColor"] = [COLORS[i % len(COLORS)] for i in range(len(labels))]
    return labels


def _scatter_series(rows, x_column, y_column, dataset):
    dataset["data"] = [
        {"x": _numeric(row.get(x_column)), "y": _numeric(row.get(y_column))}
        for row in rows
    ]
    dataset["backgroundColor"] = COLORS[0]
    dataset["borderColor"] = COLORS[0]
    return []


def _bar_series(rows, x_column, y_column, dataset):
    visible = rows[:MAX_SERIES_POINTS]
    dataset["data"] = [_numeric(row.get(y_column)) for row in visible]
    dataset["backgroundColor"] = COLORS[0] + "80"
    dataset["borderColor"] = COLORS[0]
    return [row.get(x_column) for row in visible]


def _line_series(rows, x_column, y_column, dataset, fill=False):
    visible = rows[:MAX_SERIES_POINTS]
    dataset["data"] = [_numeric(row.get(y_column)) for row in visible]
    dataset["backgroundColor"] = COLORS[0] + "30" if fill else "transparent"
    dataset["borderColor"] = COLORS[0]
    dataset["fill"] = fill
    dataset["tension"] = LINE_TENSION
    return [row.get(x_column) for row in visible]


def _area_series(rows, x_column, y_column, dataset):
    return _line_series(rows, x_column, y_column, dataset, fill=True)


_SERIES_BUILDERS = {
    ChartType.PIE: _pie_series,
    ChartType.SCATTER: _scatter_series,
    ChartType.BAR: _bar_series,
    ChartType.LINE: _line_series,
    ChartType.AREA: _area_series,
}


def build_chart_series(
    rows: Sequence[Mapping[str, Any]],
    x_axis: Mapping[str, Any],
    y_axis: Mapping[str, Any],
    chart_type: ChartType | str
) -> dict:
    """
    Transforma as linhas de uma planilha na série de dados de um gráfico.

    Parâmetros:
        rows: Linhas da planilha (dicionários coluna -> valor).
        x_axis: Eixo X no formato {"column": ..., "label": ...}.
        y_axis: Eixo Y no mesmo formato.
        chart_type: Tipo do gráfico (bar, line, pie, scatter, area).

    Retorna:
        Dicionário com "labels" e "datasets" no formato do chart.js.
    """
    chart_type = ChartType(chart_type)

    if not rows:
        raise EmptyDatasetError("Nenhum dado disponível para gerar o gráfico")

    dataset: dict[str, Any] = {
        "label": axis_label(y_axis),
        "data": [],
        "backgroundColor": [],
        "borderColor": [],
        "borderWidth": 1,
    }

    builder = _SERIES_BUILDERS[chart_type]
    labels = builder(list(rows), x_axis["column"], y_axis["column"], dataset)

    return {"labels": labels, "datasets": [dataset]}


def _titled_axis(axis: Mapping[str, Any]) -> dict:
    return {"title": {"display": True, "text": axis_label(axis)}}


def build_chart_config(
    chart_type: ChartType | str,
    chart_data: dict,
    x_axis: Mapping[str, Any],
    y_axis: Mapping[str, Any]
) -> dict:
    """
    Monta a configuração de renderização do gráfico.

    Pizza posiciona a legenda à direita; dispersão usa eixo X linear;
    os demais tipos recebem eixos com título.
    """
    chart_type = ChartType(chart_type)

    config = {
        "type": chart_type.value,
        "data": chart_data,
        "options": {
            "responsive": True,
            "maintainAspectRatio": False,
            "plugins": {
                "legend": {"position": "top"},
                "title": {
                    "display": True,
                    "text": f"{axis_label(y_axis)} vs {axis_label(x_axis)}"
                }
            }
        }
    }

    if chart_type == ChartType.PIE:
        config["options"]["plugins"]["legend"]["position"] = "right"
    elif chart_type == ChartType.SCATTER:
        config["options"]["scales"] = {
            "x": {"type": "linear", "position": "bottom", **_titled_axis(x_axis)},
            "y": _titled_axis(y_axis),
        }
    else:
        config["options"]["scales"] = {
            "x": _titled_axis(x_axis),
            "y": _titled_axis(y_axis),
        }

    return config
