"""Fixtures compartidos: base SQLite en memoria por prueba."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from taquilla.db.init_db import init_db
from taquilla.services.entrada_service import EntradaService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine) -> Session:
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def service(db: Session) -> EntradaService:
    return EntradaService(db)


@pytest.fixture
def datos_entrada():
    """Entrada de ejemplo: Ana Pérez, 2 entradas para el concierto de las 20:00."""
    return {
        "numero_cedula": "001-0000001-1",
        "nombre_cliente": "Ana Pérez",
        "nombre_funcion": "Concierto",
        "cantidad_entradas": 2,
        "horario_funcion": "20:00",
    }
