# taquilla/crud/entrada.py
"""
Acceso a datos de la tabla `entradas`.

La unicidad de `numero_cedula` la garantiza el índice UNIQUE de la base de
datos; aquí solo se traduce el IntegrityError a ConstraintViolation.
"""

import logging
from typing import Optional, List

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taquilla.core.exceptions import ConstraintViolation
from taquilla.models.entrada import Entrada
from taquilla.schemas.entrada import EntradaCreate

logger = logging.getLogger(__name__)


def get_entrada(db: Session, entrada_id: int) -> Optional[Entrada]:
    return db.query(Entrada).filter(Entrada.id == entrada_id).first()


def get_entrada_por_cedula(db: Session, numero_cedula: str) -> Optional[Entrada]:
    return db.query(Entrada).filter(Entrada.numero_cedula == numero_cedula).first()


def list_entradas(db: Session, skip: int = 0, limit: int = 100) -> List[Entrada]:
    return db.query(Entrada).order_by(Entrada.id).offset(skip).limit(limit).all()


def count_entradas(db: Session) -> int:
    return db.query(func.count(Entrada.id)).scalar()


def _commit_o_conflicto(db: Session, numero_cedula: Optional[str], entrada_id: Optional[int] = None) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if numero_cedula is None:
            raise
        # La otra transacción ya confirmó su fila; si no aparece, el error es otro
        otra = get_entrada_por_cedula(db, numero_cedula)
        if otra is None or otra.id == entrada_id:
            raise
        logger.warning(
            "Conflicto de integridad por cédula duplicada",
            extra={"numero_cedula": numero_cedula, "error": str(e.orig)},
        )
        raise ConstraintViolation(numero_cedula) from e


def create_entrada(db: Session, data: EntradaCreate) -> Entrada:
    """
    Inserta una entrada nueva.

    Raises:
        ConstraintViolation: si `numero_cedula` ya existe.
    """
    if get_entrada_por_cedula(db, data.numero_cedula) is not None:
        raise ConstraintViolation(data.numero_cedula)

    obj = Entrada(**data.model_dump())
    db.add(obj)
    _commit_o_conflicto(db, data.numero_cedula)
    db.refresh(obj)
    return obj


def update_entrada(db: Session, entrada: Entrada, cambios: dict) -> Entrada:
    """
    Aplica `cambios` sobre una entrada existente. El `id` nunca se modifica.

    Raises:
        ConstraintViolation: si la nueva cédula pertenece a otra entrada.
    """
    cedula = cambios.get("numero_cedula")
    if cedula is not None and cedula != entrada.numero_cedula:
        otra = get_entrada_por_cedula(db, cedula)
        if otra is not None and otra.id != entrada.id:
            raise ConstraintViolation(cedula)

    for campo, valor in cambios.items():
        if campo == "id":
            continue
        setattr(entrada, campo, valor)
    _commit_o_conflicto(db, cedula, entrada.id)
    db.refresh(entrada)
    return entrada


def delete_entrada(db: Session, entrada: Entrada) -> None:
    db.delete(entrada)
    db.commit()
