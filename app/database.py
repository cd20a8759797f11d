"""
Configuração do banco de dados com SQLAlchemy.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from app.config import DATABASE_URL

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
    Gera uma sessão do banco de dados.
    Utilizado como dependência nas rotas FastAPI.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """
    Inicializa o banco de dados criando todas as tabelas.
    """
    from app.models import upload, analysis  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
