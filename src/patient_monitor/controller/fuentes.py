"""
Este modulo define las fuentes de datos crudos para el controller.

Una fuente de datos es un componente que entrega Muestra, sin procesar:
- FuenteCSV: lee el archivo de datos del paciente y entrega muestras una a una.
- FuenteSimulada: genera datos de prueba (desarrollo / generacion de archivos).

Idea de arquitectura:
- El Controller solo conoce el contrato FuenteDatos.leer_muestra().
- Asi se puede cambiar entre CSV / Simulada sin reescribir la logica del Controller.
"""

import random
from pathlib import Path
from typing import Iterator, Optional, TextIO

from patient_monitor.config.settings import SETTINGS
from patient_monitor.controller.decodificador import decodificar_linea, es_linea_vacia
from patient_monitor.model.muestra import Muestra


# ============================================================
# 0) CONTRATO BASE (interfaz)
# ============================================================

class FuenteDatos:
    """
    Contrato que deben cumplir todas las fuentes de datos.

    El controller trabajara con objetos que implementen:
    - leer_muestra() -> Muestra  (StopIteration cuando no hay mas datos)

    Opcionalmente, algunas fuentes pueden implementar:
    - cerrar() (si manejan recursos como archivos)
    """

    def leer_muestra(self) -> Muestra:
        raise NotImplementedError

    def cerrar(self) -> None:
        pass

    def __iter__(self) -> Iterator[Muestra]:
        while True:
            try:
                yield self.leer_muestra()
            except StopIteration:
                return

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cerrar()


# ============================================================
# 1) FUENTE CSV (ARCHIVO DEL PACIENTE)
# ============================================================

class FuenteCSV(FuenteDatos):
    """
    Fuente basada en el archivo de datos del paciente.

    Formato: una muestra por linea, "<hr>,<spo2>", sin header.

    Cada llamada a leer_muestra() devuelve la siguiente linea como Muestra.
    Las lineas vacias se saltan. Una linea mal formada se trata igual que
    el fin del archivo: la lectura termina sin reportar error.
    """

    def __init__(self, ruta_csv: str = SETTINGS.ruta_csv):
        self.ruta_csv = ruta_csv
        self.path = Path(ruta_csv)

        if not self.path.exists():
            raise FileNotFoundError(f"No existe el archivo CSV: {ruta_csv}")

        # Si open() falla (permisos, directorio) el OSError se propaga tal cual.
        # Bytes no UTF-8 se reemplazan: la linea falla en el decodificador (fin de datos)
        self._archivo: TextIO = self.path.open(
            mode="r", encoding="utf-8", errors="replace", newline=""
        )
        self._terminado = False

    def cerrar(self) -> None:
        """
        Cierra el archivo CSV.
        """
        self._archivo.close()

    def leer_muestra(self) -> Muestra:
        """
        Lee la siguiente linea util del archivo y la convierte a Muestra.

        Cuando se termina el archivo, o aparece una linea invalida, levanta
        StopIteration. Despues de eso, toda llamada siguiente tambien.
        """
        if self._terminado:
            raise StopIteration("Fin del archivo CSV")

        for linea in self._archivo:
            if es_linea_vacia(linea):
                continue

            try:
                return decodificar_linea(linea)
            except ValueError:
                # Dato corrupto = fin de datos (mismo comportamiento que el firmware)
                break

        self._terminado = True
        raise StopIteration("Fin del archivo CSV")


# ============================================================
# 2) FUENTE SIMULADA (DESARROLLO / GENERACION DE DATOS)
# ============================================================

class FuenteSimulada(FuenteDatos):
    """
    Fuente simulada para probar el pipeline completo sin archivo real.

    Idea:
    - Genera HR y SpO2 con ruido simple (uniforme) alrededor de un valor base.
    - Con probabilidad prob_desconexion el SpO2 cae a 0 (sensor desconectado).
    - Mantiene el mismo formato de Muestra usado por el modelo.
    """

    def __init__(
        self,
        hr_base: int = 75,
        spo2_base: int = 97,
        ruido_hr: int = 5,
        ruido_spo2: int = 2,
        prob_desconexion: float = 0.0,
        semilla: Optional[int] = None,
    ):
        if ruido_hr < 0 or ruido_spo2 < 0:
            raise ValueError("El ruido debe ser >= 0")
        if not 0.0 <= prob_desconexion <= 1.0:
            raise ValueError("prob_desconexion debe estar entre 0 y 1")

        self.hr_base = int(hr_base)
        self.spo2_base = int(spo2_base)

        self.ruido_hr = int(ruido_hr)
        self.ruido_spo2 = int(ruido_spo2)

        self.prob_desconexion = float(prob_desconexion)

        # Generador propio: la semilla no afecta al modulo random global
        self._rng = random.Random(semilla)

    def leer_muestra(self) -> Muestra:
        """
        Genera y retorna una Muestra simulada.

        Nota:
        - La fuente simulada nunca se agota.
        - El SpO2 siempre queda en [0, 100].
        """
        hr = self.hr_base + round(self._rng.uniform(-self.ruido_hr, self.ruido_hr))

        if self._rng.random() < self.prob_desconexion:
            spo2 = 0
        else:
            spo2 = self.spo2_base + round(self._rng.uniform(-self.ruido_spo2, self.ruido_spo2))
            spo2 = max(0, min(100, spo2))

        return Muestra(hr=hr, spo2=spo2)
