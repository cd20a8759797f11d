"""
Contexto da requisição: identifica o usuário que faz a chamada.

A autenticação é feita por uma camada anterior, que repassa o
identificador do usuário no cabeçalho X-User-Id.
"""
from dataclasses import dataclass

from fastapi import Header, HTTPException


@dataclass(frozen=True)
class RequestContext:
    """Usuário da requisição, usado para restringir uploads e análises."""
    user_id: str


def get_request_context(x_user_id: str | None = Header(default=None)) -> RequestContext:
    """
    Resolve o contexto da requisição.
    Utilizado como dependência nas rotas FastAPI.
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Usuário não identificado")
    return RequestContext(user_id=x_user_id.strip())
