"""
Model para armazenar as análises (gráficos) criadas sobre um upload.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship

from app.database import Base


class Analysis(Base):
    """
    Representa uma análise criada a partir de um upload.

    Guarda a seleção de eixos, o tipo de gráfico, a série e a configuração
    geradas e as estatísticas do eixo Y. Não é alterada após a criação.
    """
    __tablename__ = "analyses"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(255), nullable=False, index=True)

    upload_id = Column(Integer, ForeignKey("uploads.id"), nullable=False)
    upload = relationship("Upload", back_populates="analyses")

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")

    chart_type = Column(String(20), nullable=False)

    # Seleção de eixos: {"column": ..., "label": ...}
    x_axis = Column(JSON, nullable=False)
    y_axis = Column(JSON, nullable=False)

    chart_config = Column(JSON, nullable=False)
    chart_data = Column(JSON, nullable=False)

    # {"statistics": {...} ou None}
    insights = Column(JSON, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
