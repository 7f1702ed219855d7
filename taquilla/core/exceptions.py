"""
Excepciones del almacén de entradas.

Solo existen dos fallos de escritura (validación y unicidad de cédula) y un
fallo de consulta (registro inexistente). Todas se propagan al llamador.
"""

from typing import List, Optional


class EntradaError(Exception):
    """Excepción base para errores del almacén de entradas."""
    pass


class ValidationError(EntradaError):
    """Un campo requerido falta, es nulo, está vacío o fuera de rango."""

    def __init__(self, mensaje: str, errores: Optional[List[str]] = None):
        super().__init__(mensaje)
        self.errores = errores or []

    def __str__(self) -> str:
        if not self.errores:
            return self.args[0]
        return f"{self.args[0]}: {'; '.join(self.errores)}"


class ConstraintViolation(EntradaError):
    """El número de cédula ya existe para otra entrada."""

    def __init__(self, numero_cedula: str):
        super().__init__("El número de cédula ya existe para otra entrada")
        self.numero_cedula = numero_cedula


class NotFound(EntradaError):
    """No existe una entrada con el identificador solicitado."""

    def __init__(self, entrada_id: Optional[int] = None, numero_cedula: Optional[str] = None):
        super().__init__("Entrada no encontrada")
        self.entrada_id = entrada_id
        self.numero_cedula = numero_cedula
