"""
Rota com o resumo de uso do usuário.
"""
from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.database import get_db
from app.context import RequestContext, get_request_context
from app.models.upload import Upload
from app.models.analysis import Analysis

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("")
def get_dashboard(
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context)
):
    """
    Retorna a quantidade de uploads e análises do usuário
    e o espaço ocupado pelos arquivos.
    """
    upload_count, total_size, average_size = (
        db.query(
            func.count(Upload.id),
            func.coalesce(func.sum(Upload.file_size), 0),
            func.coalesce(func.avg(Upload.file_size), 0)
        )
        .filter(Upload.user_id == ctx.user_id)
        .one()
    )
    analysis_count = db.query(Analysis).filter(Analysis.user_id == ctx.user_id).count()

    return {
        "statistics": {
            "uploads": upload_count,
            "analyses": analysis_count,
            "storage": {
                "totalSize": int(total_size),
                "averageSize": float(average_size)
            }
        }
    }
