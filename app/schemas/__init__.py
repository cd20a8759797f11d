from app.schemas.analysis import AnalysisCreate, AxisSelection

__all__ = ["AnalysisCreate", "AxisSelection"]
