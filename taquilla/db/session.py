# taquilla/db/session.py
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session

from taquilla.core.config import settings
from taquilla.utils.logger import logger


def _engine_kwargs(database_url: str) -> dict:
    kwargs = {"pool_pre_ping": True, "echo": settings.db_echo}
    # SQLite no admite el dimensionamiento del pool
    if make_url(database_url).get_backend_name() != "sqlite":
        kwargs["pool_size"] = settings.db_pool_size
        kwargs["max_overflow"] = settings.db_max_overflow
    return kwargs


try:
    engine = create_engine(settings.database_url, **_engine_kwargs(settings.database_url))
    logger.debug("Motor de base de datos inicializado (%s)", engine.url.get_backend_name())
except Exception as e:
    logger.critical("Error al inicializar el motor de base de datos: %s", str(e))
    raise

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Entrega una sesión de base de datos y garantiza que se cierre al finalizar.
    """
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
