"""
Rotas para envio e gerenciamento de planilhas.
"""
import logging
import uuid
from pathlib import Path
from fastapi import APIRouter, Depends, HTTPException, UploadFile, File
from sqlalchemy.orm import Session

from app.database import get_db
from app.config import UPLOADS_DIR, ALLOWED_EXTENSIONS, MAX_FILE_SIZE_MB
from app.context import RequestContext, get_request_context
from app.errors import PipelineError
from app.models.upload import Upload
from app.models.analysis import Analysis
from app.services.ingestion import IngestionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/uploads", tags=["uploads"])


def _get_owned_upload(db: Session, upload_id: int, ctx: RequestContext) -> Upload:
    upload = (
        db.query(Upload)
        .filter(Upload.id == upload_id, Upload.user_id == ctx.user_id)
        .first()
    )
    if not upload:
        raise HTTPException(status_code=404, detail="Upload não encontrado")
    return upload


@router.post("", status_code=201)
async def upload_file(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context)
):
    """
    Faz upload de uma planilha Excel e processa a primeira aba.

    Parâmetros:
        file: Arquivo XLS ou XLSX.

    Retorna:
        Informações do upload criado com os descritores das colunas.
    """
    # Valida extensão
    file_ext = Path(file.filename or "").suffix.lower()
    if file_ext not in ALLOWED_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"Formato não suportado. Use: {', '.join(sorted(ALLOWED_EXTENSIONS))}"
        )

    content = await file.read()
    if len(content) > MAX_FILE_SIZE_MB * 1024 * 1024:
        raise HTTPException(
            status_code=413,
            detail=f"Arquivo maior que o limite de {MAX_FILE_SIZE_MB} MB"
        )

    # Salva o arquivo com nome único
    file_name = f"{uuid.uuid4().hex}-{Path(file.filename).name}"
    filepath = UPLOADS_DIR / file_name
    with open(filepath, "wb") as f:
        f.write(content)

    # Lê e processa a planilha
    # Qualquer falha daqui em diante remove o arquivo salvo
    ingestion = IngestionService()
    try:
        header_row, data_rows = ingestion.read_workbook(filepath)
        result = ingestion.ingest(header_row, data_rows)

        upload = Upload(
            user_id=ctx.user_id,
            file_name=file_name,
            original_name=file.filename,
            file_path=str(filepath),
            file_size=len(content),
            columns=result["columns"],
            row_count=result["row_count"],
            data=result["data"],
            status="completed"
        )

        db.add(upload)
        db.commit()
        db.refresh(upload)
    except PipelineError as e:
        logger.warning("Upload rejeitado (%s): %s", e.kind, e.message)
        filepath.unlink(missing_ok=True)
        raise
    except Exception:
        logger.exception("Falha ao processar upload %s", file.filename)
        db.rollback()
        filepath.unlink(missing_ok=True)
        raise

    logger.info("Upload %d criado por %s", upload.id, ctx.user_id)

    return {
        "message": "Arquivo enviado e processado com sucesso",
        "upload": {
            "id": upload.id,
            "fileName": upload.original_name,
            "columns": upload.columns,
            "rowCount": upload.row_count,
            "createdAt": upload.created_at.isoformat()
        }
    }


@router.get("")
def list_uploads(
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context)
):
    """
    Lista os uploads do usuário, do mais recente para o mais antigo.
    As linhas de dados não são incluídas.
    """
    uploads = (
        db.query(Upload)
        .filter(Upload.user_id == ctx.user_id)
        .order_by(Upload.created_at.desc(), Upload.id.desc())
        .all()
    )
    return {"uploads": [upload.summary() for upload in uploads]}


@router.get("/{upload_id}")
def get_upload(
    upload_id: int,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context)
):
    """
    Obtém um upload com todas as suas linhas.

    Parâmetros:
        upload_id: ID do upload.
    """
    upload = _get_owned_upload(db, upload_id, ctx)
    return {"upload": {**upload.summary(), "data": upload.data}}


@router.delete("/{upload_id}")
def delete_upload(
    upload_id: int,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context)
):
    """
    Exclui um upload, suas análises e o arquivo armazenado.

    Parâmetros:
        upload_id: ID do upload a ser excluído.
    """
    upload = _get_owned_upload(db, upload_id, ctx)

    # Remove as análises vinculadas (cascade manual)
    analyses = db.query(Analysis).filter(Analysis.upload_id == upload.id).all()
    for analysis in analyses:
        db.delete(analysis)

    # Remove arquivo físico
    try:
        Path(upload.file_path).unlink(missing_ok=True)
    except OSError:
        logger.warning("Não foi possível remover o arquivo %s", upload.file_path)

    db.delete(upload)
    db.commit()

    logger.info("Upload %d excluído com %d análises", upload_id, len(analyses))

    return {"message": "Arquivo excluído com sucesso"}
