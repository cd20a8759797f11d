"""
Configurações centralizadas da aplicação.

Valores podem ser sobrescritos por variáveis de ambiente.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR}/sheetcharts.db")

UPLOADS_DIR = Path(os.getenv("UPLOADS_DIR", BASE_DIR / "uploads"))
UPLOADS_DIR.mkdir(parents=True, exist_ok=True)

ALLOWED_EXTENSIONS = {".xls", ".xlsx"}
MAX_FILE_SIZE_MB = int(os.getenv("MAX_FILE_SIZE_MB", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Inferência de tipos: quantos valores não nulos são examinados por coluna
TYPE_SAMPLE_SIZE = 10
# Quantos valores de exemplo são guardados por coluna (apenas para preview)
SAMPLE_VALUES_SIZE = 5
# Limite de pontos exibidos em gráficos de barra, linha e área
MAX_SERIES_POINTS = 50
