# taquilla/schemas/entrada.py
from pydantic import BaseModel, Field, field_validator
from typing import Optional

CAMPOS_TEXTO = ("numero_cedula", "nombre_cliente", "nombre_funcion", "horario_funcion")


def _validar_texto(valor: Optional[str]) -> Optional[str]:
    if valor is None:
        raise ValueError("el campo no puede ser nulo")
    if not valor.strip():
        raise ValueError("el campo no puede estar vacío")
    return valor


class EntradaBase(BaseModel):
    numero_cedula: str = Field(..., min_length=1, max_length=255)
    nombre_cliente: str = Field(..., min_length=1, max_length=255)
    nombre_funcion: str = Field(..., min_length=1, max_length=255)
    cantidad_entradas: int = Field(..., gt=0)
    horario_funcion: str = Field(..., min_length=1, max_length=255, description="Horario en texto libre, p. ej. '20:00'")


class EntradaCreate(EntradaBase):
    """Datos para registrar una entrada. El `id` lo asigna la base de datos."""

    @field_validator(*CAMPOS_TEXTO)
    @classmethod
    def no_vacio(cls, v: str) -> str:
        return _validar_texto(v)


class EntradaUpdate(BaseModel):
    """Actualización parcial: solo se modifican los campos enviados."""

    numero_cedula: Optional[str] = Field(None, min_length=1, max_length=255)
    nombre_cliente: Optional[str] = Field(None, min_length=1, max_length=255)
    nombre_funcion: Optional[str] = Field(None, min_length=1, max_length=255)
    cantidad_entradas: Optional[int] = Field(None, gt=0)
    horario_funcion: Optional[str] = Field(None, min_length=1, max_length=255)

    # Solo se ejecuta con valores enviados explícitamente, incluido null
    @field_validator(*CAMPOS_TEXTO, mode="before")
    @classmethod
    def texto_no_vacio(cls, v):
        if isinstance(v, str) or v is None:
            return _validar_texto(v)
        return v

    @field_validator("cantidad_entradas", mode="before")
    @classmethod
    def cantidad_no_nula(cls, v):
        if v is None:
            raise ValueError("el campo no puede ser nulo")
        return v

    def cambios(self) -> dict:
        return self.model_dump(exclude_unset=True)


class EntradaRead(EntradaBase):
    id: int

    class Config:
        from_attributes = True
