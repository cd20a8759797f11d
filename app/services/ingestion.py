"""
Serviço de ingestão de planilhas.

Lê a primeira aba de um arquivo Excel, monta as linhas como dicionários
indexados pelo cabeçalho e descreve cada coluna (nome, tipo inferido e
valores de exemplo).
"""
import logging
import math
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Sequence

import numpy as np
import pandas as pd

from app.config import SAMPLE_VALUES_SIZE
from app.errors import EmptySheetError, NoHeadersError, WorkbookReadError
from app.services.type_inference import infer_column_type
from app.services.values import display_label

logger = logging.getLogger(__name__)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return isinstance(value, float) and math.isnan(value)


def _to_json_value(value: Any) -> Any:
    """
    Converte um valor lido pelo pandas para um tipo nativo serializável
    em JSON. Datas à meia-noite viram "YYYY-MM-DD".
    """
    if isinstance(value, np.generic):
        value = value.item()

    if value is None or (not isinstance(value, (str, bytes)) and pd.isna(value)):
        return None

    if isinstance(value, datetime):
        if value.time() == time(0):
            return value.date().isoformat()
        return value.isoformat()

    if isinstance(value, (date, time)):
        return value.isoformat()

    return value


class IngestionService:
    """
    Serviço responsável por transformar uma aba de planilha em linhas
    e descritores de colunas.
    """

    @staticmethod
    def read_workbook(filepath: Path) -> tuple[list[Any] | None, list[list[Any]]]:
        """
        Lê a primeira aba de um arquivo Excel. As demais abas são ignoradas.

        Parâmetros:
            filepath: Caminho do arquivo .xls ou .xlsx.

        Retorna:
            Tupla com (linha de cabeçalho, linhas de dados). O cabeçalho é
            None quando a aba não possui nenhuma linha.
        """
        try:
            df = pd.read_excel(filepath, sheet_name=0, header=None, dtype=object)
        except Exception as e:
            logger.exception("Falha ao ler planilha %s", filepath)
            raise WorkbookReadError(f"Erro ao ler arquivo: {e}") from e

        records = [
            [_to_json_value(value) for value in row]
            for row in df.itertuples(index=False, name=None)
        ]

        if not records:
            return None, []

        return records[0], records[1:]

    def ingest(
        self,
        header_row: Sequence[Any] | None,
        data_rows: Sequence[Sequence[Any]]
    ) -> dict:
        """
        Monta as linhas e os descritores de colunas de uma aba.

        Parâmetros:
            header_row: Primeira linha da aba (None se a aba está vazia).
            data_rows: Demais linhas da aba, na ordem original.

        Retorna:
            Dicionário com "data" (linhas), "columns" (descritores)
            e "row_count".
        """
        if header_row is None:
            raise EmptySheetError("Nenhum dado encontrado na planilha")

        headers = self._normalize_headers(header_row)

        data = []
        for cells in data_rows:
            cells = list(cells)
            data.append({
                name: cells[index] if index < len(cells) else None
                for index, name in enumerate(headers)
            })

        columns = []
        for name in headers:
            values = [row[name] for row in data if row[name] is not None]
            columns.append({
                "name": name,
                "type": infer_column_type(values).value,
                "sampleValues": values[:SAMPLE_VALUES_SIZE]
            })

        logger.info(
            "Planilha ingerida: %d colunas, %d linhas", len(columns), len(data)
        )

        return {
            "data": data,
            "columns": columns,
            "row_count": len(data_rows)
        }

    def _normalize_headers(self, header_row: Sequence[Any]) -> list[str]:
        """
        Converte o cabeçalho em nomes de colunas únicos.

        Células vazias no final são descartadas; células vazias no meio
        recebem o nome "Unnamed: <posição>". Nomes repetidos recebem
        sufixo ".1", ".2", etc.
        """
        cells = list(header_row)
        while cells and _is_blank(cells[-1]):
            cells.pop()

        if not cells:
            raise NoHeadersError("Nenhum cabeçalho encontrado na planilha")

        names: list[str] = []
        used: set[str] = set()
        for index, cell in enumerate(cells):
            base = f"Unnamed: {index}" if _is_blank(cell) else display_label(cell)
            name = base
            suffix = 0
            while name in used:
                suffix += 1
                name = f"{base}.{suffix}"
            used.add(name)
            names.append(name)

        return names
