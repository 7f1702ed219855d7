from taquilla.db.base import Base

# Importa modelos para que se registren en Base.metadata
from .entrada import Entrada

__all__ = [
    "Entrada",
    "Base",
]
