from app.models.upload import Upload
from app.models.analysis import Analysis

__all__ = ["Upload", "Analysis"]
