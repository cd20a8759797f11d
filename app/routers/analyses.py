"""
Rotas para criação e consulta de análises (gráficos e estatísticas).
"""
import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.context import RequestContext, get_request_context
from app.models.upload import Upload
from app.models.analysis import Analysis
from app.schemas.analysis import AnalysisCreate
from app.services.analysis import AnalysisService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/analyses", tags=["analyses"])


def _get_owned_analysis(db: Session, analysis_id: int, ctx: RequestContext) -> Analysis:
    analysis = (
        db.query(Analysis)
        .filter(Analysis.id == analysis_id, Analysis.user_id == ctx.user_id)
        .first()
    )
    if not analysis:
        raise HTTPException(status_code=404, detail="Análise não encontrada")
    return analysis


def _serialize(analysis: Analysis, include_data: bool = True) -> dict:
    payload = {
        "id": analysis.id,
        "uploadId": analysis.upload_id,
        "title": analysis.title,
        "description": analysis.description,
        "chartType": analysis.chart_type,
        "xAxis": analysis.x_axis,
        "yAxis": analysis.y_axis,
        "chartConfig": analysis.chart_config,
        "insights": analysis.insights,
        "createdAt": analysis.created_at.isoformat()
    }
    if include_data:
        payload["chartData"] = analysis.chart_data
    return payload


@router.post("", status_code=201)
def create_analysis(
    request: AnalysisCreate,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context)
):
    """
    Cria uma análise a partir de um upload.

    Gera a série do gráfico para o par de eixos escolhido, a configuração
    de renderização e as estatísticas da coluna do eixo Y.

    Retorna:
        A análise criada.
    """
    upload = (
        db.query(Upload)
        .filter(Upload.id == request.upload_id, Upload.user_id == ctx.user_id)
        .first()
    )
    if not upload:
        raise HTTPException(status_code=404, detail="Upload não encontrado")

    # Valida colunas dos eixos
    column_names = {col["name"] for col in upload.columns}
    if request.x_axis.column not in column_names or request.y_axis.column not in column_names:
        raise HTTPException(status_code=400, detail="Colunas dos eixos inválidas")

    x_axis = request.x_axis.model_dump()
    y_axis = request.y_axis.model_dump()

    result = AnalysisService().run(upload.data, x_axis, y_axis, request.chart_type)

    analysis = Analysis(
        user_id=ctx.user_id,
        upload_id=upload.id,
        title=request.title,
        description=request.description,
        chart_type=request.chart_type.value,
        x_axis=x_axis,
        y_axis=y_axis,
        chart_config=result["chart_config"],
        chart_data=result["chart_data"],
        insights={"statistics": result["statistics"]}
    )

    db.add(analysis)
    db.commit()
    db.refresh(analysis)

    logger.info("Análise %d criada sobre o upload %d", analysis.id, upload.id)

    return {
        "message": "Análise criada com sucesso",
        "analysis": _serialize(analysis)
    }


@router.get("")
def list_analyses(
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context)
):
    """
    Lista as análises do usuário, sem os dados do gráfico.
    """
    analyses = (
        db.query(Analysis)
        .filter(Analysis.user_id == ctx.user_id)
        .order_by(Analysis.created_at.desc(), Analysis.id.desc())
        .all()
    )
    return {
        "analyses": [
            {
                **_serialize(analysis, include_data=False),
                "upload": {
                    "originalName": analysis.upload.original_name,
                    "fileSize": analysis.upload.file_size,
                    "createdAt": analysis.upload.created_at.isoformat()
                }
            }
            for analysis in analyses
        ]
    }


@router.get("/{analysis_id}")
def get_analysis(
    analysis_id: int,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context)
):
    """
    Obtém uma análise completa, com um resumo do upload de origem.

    Parâmetros:
        analysis_id: ID da análise.
    """
    analysis = _get_owned_analysis(db, analysis_id, ctx)
    return {
        "analysis": {
            **_serialize(analysis),
            "upload": {
                "originalName": analysis.upload.original_name,
                "columns": analysis.upload.columns,
                "rowCount": analysis.upload.row_count
            }
        }
    }


@router.delete("/{analysis_id}")
def delete_analysis(
    analysis_id: int,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context)
):
    """
    Exclui uma análise.

    Parâmetros:
        analysis_id: ID da análise a ser excluída.
    """
    analysis = _get_owned_analysis(db, analysis_id, ctx)

    db.delete(analysis)
    db.commit()

    logger.info("Análise %d excluída", analysis_id)

    return {"message": "Análise excluída com sucesso"}
