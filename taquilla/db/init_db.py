from typing import Optional

from sqlalchemy.engine import Engine

import taquilla.models  # noqa: F401  registra los modelos en Base.metadata
from taquilla.db.base import Base
from taquilla.utils.logger import logger

def init_db(bind: Optional[Engine] = None) -> None:
	# crear tablas si no existen
	if bind is None:
		from taquilla.db.session import engine
		bind = engine
	Base.metadata.create_all(bind=bind)
	logger.info("Tablas verificadas: %s", ", ".join(sorted(Base.metadata.tables)))
