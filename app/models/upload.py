"""
Model para armazenar as planilhas enviadas e seus dados processados.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, JSON
from sqlalchemy.orm import relationship

from app.database import Base


class Upload(Base):
    """
    Representa uma planilha enviada por um usuário.

    Armazena os metadados do arquivo, os descritores das colunas
    (nome, tipo inferido, valores de exemplo) e as linhas da primeira aba.
    """
    __tablename__ = "uploads"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(255), nullable=False, index=True)

    file_name = Column(String(255), nullable=False)
    original_name = Column(String(255), nullable=False)
    file_path = Column(String(500), nullable=False)
    file_size = Column(Integer, nullable=False)

    # Descritores das colunas: nome, tipo e valores de exemplo
    columns = Column(JSON, nullable=False)
    row_count = Column(Integer, nullable=False, default=0)

    # Linhas da planilha (coluna -> valor)
    data = Column(JSON, nullable=False)

    status = Column(String(20), nullable=False, default="processing")

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    analyses = relationship("Analysis", back_populates="upload")

    def summary(self) -> dict:
        """Informações do upload sem as linhas de dados."""
        return {
            "id": self.id,
            "fileName": self.original_name,
            "fileSize": self.file_size,
            "columns": self.columns,
            "rowCount": self.row_count,
            "status": self.status,
            "createdAt": self.created_at.isoformat()
        }
