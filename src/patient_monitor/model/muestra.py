"""
Definicion de estructura de datos del sistema

- Muestra: llega desde Fuente (csv/simulada), un par HR/SpO2 tal como se leyo.
- ResultadoAlarma: mascara GPIO (ODR) + descripcion corta.
- MuestraProcesada: sale del Microcontrolador y la consume la Vista.

Estas clases son el contrato comun entre Controller, Model y View.
Todas son inmutables: se crean una vez por linea y se descartan.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Muestra:
    hr: int
    spo2: int


@dataclass(frozen=True)
class ResultadoAlarma:
    mascara: int
    descripcion: str

    @property
    def activa(self) -> bool:
        return self.mascara != 0x0000


@dataclass(frozen=True)
class MuestraProcesada:
    muestra: Muestra

    ccr: int
    alarma: ResultadoAlarma

    t_s: float
    contador: int
