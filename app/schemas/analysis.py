"""
Schemas Pydantic para validação de dados de análises.
"""
from pydantic import BaseModel, Field

from app.services.charts import ChartType


class AxisSelection(BaseModel):
    """Coluna escolhida para um eixo e seu rótulo opcional."""
    column: str
    label: str | None = None


class AnalysisCreate(BaseModel):
    """Schema para criação de análise."""
    upload_id: int = Field(alias="uploadId")
    title: str = Field(min_length=1)
    description: str = ""
    chart_type: ChartType = Field(alias="chartType")
    x_axis: AxisSelection = Field(alias="xAxis")
    y_axis: AxisSelection = Field(alias="yAxis")

    class Config:
        populate_by_name = True
