"""
Serviço que gera o conteúdo de uma análise: série do gráfico,
configuração de renderização e estatísticas do eixo Y.
"""
import logging
from typing import Any, Mapping, Sequence

from app.services.charts import ChartType, build_chart_config, build_chart_series
from app.services.statistics import compute_statistics
from app.services.values import parse_float

logger = logging.getLogger(__name__)


class AnalysisService:
    """
    Combina o gerador de séries e o cálculo de estatísticas para um
    par de eixos escolhido pelo usuário.
    """

    def run(
        self,
        rows: Sequence[Mapping[str, Any]],
        x_axis: Mapping[str, Any],
        y_axis: Mapping[str, Any],
        chart_type: ChartType | str
    ) -> dict:
        """
        Executa a análise sobre as linhas de um upload.

        Parâmetros:
            rows: Linhas armazenadas do upload.
            x_axis: Eixo X ({"column", "label"}).
            y_axis: Eixo Y ({"column", "label"}).
            chart_type: Tipo do gráfico.

        Retorna:
            Dicionário com "chart_data", "chart_config" e "statistics".
        """
        chart_type = ChartType(chart_type)

        chart_data = build_chart_series(rows, x_axis, y_axis, chart_type)
        chart_config = build_chart_config(chart_type, chart_data, x_axis, y_axis)

        # Estatísticas usam todas as linhas, não apenas as exibidas
        y_values = [parse_float(row.get(y_axis["column"])) for row in rows]
        statistics = compute_statistics([v for v in y_values if v is not None])

        logger.info(
            "Análise gerada: %s de %s por %s (%d linhas)",
            chart_type.value, y_axis["column"], x_axis["column"], len(rows)
        )

        return {
            "chart_data": chart_data,
            "chart_config": chart_config,
            "statistics": statistics
        }
