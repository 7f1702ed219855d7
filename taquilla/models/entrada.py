# taquilla/models/entrada.py
from sqlalchemy import Column, Integer, String
from taquilla.db.base import Base


class Entrada(Base):
    __tablename__ = "entradas"
    # sin AUTOINCREMENT, SQLite reutilizaría el id más alto tras un borrado
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    numero_cedula = Column(String(255), nullable=False, unique=True)
    nombre_cliente = Column(String(255), nullable=False)
    nombre_funcion = Column(String(255), nullable=False)
    cantidad_entradas = Column(Integer, nullable=False)
    horario_funcion = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Entrada id={self.id} cedula={self.numero_cedula!r} funcion={self.nombre_funcion!r}>"
