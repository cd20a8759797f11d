import pandas as pd
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.database import get_db, init_db
from app.routers import uploads as uploads_module
from main import app


@pytest.fixture()
def uploads_dir(tmp_path, monkeypatch):
    directory = tmp_path / "uploads"
    directory.mkdir()
    monkeypatch.setattr(uploads_module, "UPLOADS_DIR", directory)
    return directory


@pytest.fixture()
def session_factory(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False}
    )
    init_db(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture()
def client(session_factory, uploads_dir):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app, headers={"X-User-Id": "user-1"})
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def make_workbook(tmp_path):
    """Gera um arquivo .xlsx com as linhas informadas (cabeçalho incluso)."""
    def _make(rows, name="dados.xlsx", extra_sheet=None):
        path = tmp_path / name
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            pd.DataFrame(rows).to_excel(writer, sheet_name="Dados", header=False, index=False)
            if extra_sheet is not None:
                pd.DataFrame(extra_sheet).to_excel(
                    writer, sheet_name="Outra", header=False, index=False
                )
        return path
    return _make


@pytest.fixture()
def sales_rows():
    return [
        ["Região", "Vendas", "Data"],
        ["Norte", 10, "2023-01-01"],
        ["Sul", 20, "2023-01-02"],
        ["Norte", 5, "2023-01-03"],
        ["Leste", "n/d", "2023-01-04"],
    ]


@pytest.fixture()
def post_workbook(client):
    """Envia um arquivo para a rota de upload."""
    def _post(path, filename=None, headers=None):
        with open(path, "rb") as f:
            return client.post(
                "/api/uploads",
                files={"file": (filename or path.name, f, "application/octet-stream")},
                headers=headers
            )
    return _post
