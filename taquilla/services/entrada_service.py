"""
Servicio de Entradas

Punto de entrada para registrar y consultar entradas de cine:
- Validación de datos con los esquemas pydantic
- Unicidad de número de cédula (una compra por identidad)
- Traducción de "no existe" a NotFound
- Logging estructurado

Uso:
    service = EntradaService(db_session)
    entrada = service.registrar({
        "numero_cedula": "001-0000001-1",
        "nombre_cliente": "Ana Pérez",
        "nombre_funcion": "Concierto",
        "cantidad_entradas": 2,
        "horario_funcion": "20:00",
    })
"""

import logging
from typing import Any, List, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from taquilla.core.exceptions import ValidationError, NotFound
from taquilla.crud import entrada as crud
from taquilla.models.entrada import Entrada
from taquilla.schemas.entrada import EntradaCreate, EntradaUpdate

logger = logging.getLogger(__name__)

EsquemaT = TypeVar("EsquemaT", bound=BaseModel)


def _validar(esquema: Type[EsquemaT], datos: Union[EsquemaT, Mapping[str, Any]]) -> EsquemaT:
    if isinstance(datos, esquema):
        return datos
    if isinstance(datos, BaseModel):
        datos = datos.model_dump(exclude_unset=True)
    try:
        return esquema.model_validate(datos)
    except PydanticValidationError as e:
        errores = [
            f"{'.'.join(str(p) for p in err['loc']) or 'datos'}: {err['msg']}"
            for err in e.errors()
        ]
        raise ValidationError("Datos de entrada inválidos", errores=errores) from e


class EntradaService:
    """
    Operaciones sobre la tabla `entradas`.

    Las escrituras confirman su propia transacción; la sesión es del llamador.
    """

    def __init__(self, db: Session):
        self.db = db

    # ================================================================================
    # CONSULTAS
    # ================================================================================

    def obtener(self, entrada_id: int) -> Entrada:
        """
        Obtiene una entrada por ID.

        Raises:
            NotFound: si no existe.
        """
        entrada = crud.get_entrada(self.db, entrada_id)
        if entrada is None:
            logger.info("Entrada no encontrada", extra={"entrada_id": entrada_id})
            raise NotFound(entrada_id=entrada_id)
        return entrada

    def obtener_por_cedula(self, numero_cedula: str) -> Entrada:
        """
        Obtiene la entrada asociada a un número de cédula.

        Raises:
            NotFound: si no existe.
        """
        entrada = crud.get_entrada_por_cedula(self.db, numero_cedula)
        if entrada is None:
            logger.info("Entrada no encontrada", extra={"numero_cedula": numero_cedula})
            raise NotFound(numero_cedula=numero_cedula)
        return entrada

    def listar(self, skip: int = 0, limit: int = 100) -> List[Entrada]:
        entradas = crud.list_entradas(self.db, skip=skip, limit=limit)
        logger.debug("Se listaron %s entradas (skip=%s, limit=%s)", len(entradas), skip, limit)
        return entradas

    # ================================================================================
    # ESCRITURAS
    # ================================================================================

    def registrar(self, datos: Union[EntradaCreate, Mapping[str, Any]]) -> Entrada:
        """
        Registra una entrada nueva y devuelve el registro con su `id`.

        Args:
            datos: EntradaCreate o diccionario con los cinco campos requeridos

        Raises:
            ValidationError: falta un campo, es nulo, vacío o fuera de rango.
            ConstraintViolation: el número de cédula ya está registrado.
        """
        payload = _validar(EntradaCreate, datos)
        entrada = crud.create_entrada(self.db, payload)
        logger.info(
            "Entrada creada exitosamente con id=%s",
            entrada.id,
            extra={"numero_cedula": entrada.numero_cedula, "funcion": entrada.nombre_funcion},
        )
        return entrada

    def actualizar(self, entrada_id: int, datos: Union[EntradaUpdate, Mapping[str, Any]]) -> Entrada:
        """
        Actualiza parcialmente una entrada.

        Raises:
            ValidationError: no se enviaron campos o alguno es inválido.
            NotFound: la entrada no existe.
            ConstraintViolation: la nueva cédula pertenece a otra entrada.
        """
        cambios = _validar(EntradaUpdate, datos).cambios()
        if not cambios:
            raise ValidationError("No se proporcionaron datos para actualizar")

        entrada = self.obtener(entrada_id)
        entrada = crud.update_entrada(self.db, entrada, cambios)
        logger.info("Entrada actualizada id=%s campos=%s", entrada_id, sorted(cambios))
        return entrada

    def eliminar(self, entrada_id: int) -> None:
        """
        Raises:
            NotFound: la entrada no existe.
        """
        entrada = self.obtener(entrada_id)
        crud.delete_entrada(self.db, entrada)
        logger.info("Entrada eliminada id=%s", entrada_id)
