"""
Aplicação principal da plataforma de análise de planilhas.

Inicializa o servidor FastAPI com todas as rotas.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import LOG_LEVEL
from app.database import init_db
from app.errors import PipelineError
from app.routers import (
    uploads_router,
    analyses_router,
    dashboard_router
)

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(
    title="Sheet Charts",
    description="Upload de planilhas Excel e geração de gráficos e estatísticas",
    version="1.0.0"
)


# Inicializa banco de dados na startup
@app.on_event("startup")
def startup_event():
    """Inicializa o banco de dados ao iniciar a aplicação."""
    init_db()


@app.exception_handler(PipelineError)
def pipeline_error_handler(request: Request, exc: PipelineError):
    """Converte falhas do pipeline em resposta 400 com o tipo do erro."""
    return JSONResponse(
        status_code=400,
        content={"detail": exc.message, "kind": exc.kind}
    )


# Registra routers da API
app.include_router(uploads_router)
app.include_router(analyses_router)
app.include_router(dashboard_router)


@app.get("/health")
def health():
    """Verificação simples de disponibilidade."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
