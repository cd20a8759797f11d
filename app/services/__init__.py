from app.services.ingestion import IngestionService
from app.services.analysis import AnalysisService

__all__ = ["IngestionService", "AnalysisService"]
